"""Time-decay ranking for post feeds.

Ranking runs client-side over posts already fetched from the backend.
"""

from collections.abc import Iterable
from datetime import datetime

from threads.domain.model.post import Post


def hot_score(
    post: Post,
    now: datetime,
    gravity: float = 1.5,
    time_offset: float = 2.0,
) -> float:
    """Decaying score: net score / (age_hours + time_offset) ** gravity.

    Negative net scores stay negative and decay towards zero.

    Args:
        post: Post to score
        now: Reference time
        gravity: Decay exponent
        time_offset: Hours added to the post age

    Returns:
        Hot score
    """
    age_hours = max((now - post.created_at).total_seconds() / 3600, 0.0)
    return post.score / ((age_hours + time_offset) ** gravity)


def rank_hot(
    posts: Iterable[Post],
    now: datetime,
    gravity: float = 1.5,
    time_offset: float = 2.0,
) -> list[Post]:
    """Sort posts by hot score, highest first (stable for ties)."""
    return sorted(
        posts,
        key=lambda post: hot_score(post, now, gravity, time_offset),
        reverse=True,
    )
