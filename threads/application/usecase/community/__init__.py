"""Community use cases."""

from .get_community import CommunityView, GetCommunityRequest, GetCommunityUseCase
from .toggle_membership import ToggleMembershipRequest, ToggleMembershipUseCase

__all__ = [
    "CommunityView",
    "GetCommunityRequest",
    "GetCommunityUseCase",
    "ToggleMembershipRequest",
    "ToggleMembershipUseCase",
]
