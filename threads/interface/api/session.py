"""Cookie helpers for the signed-in user and the thread view session."""

from uuid import uuid4

from fastapi import HTTPException, Response, status

from threads.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)

# Session token issued by the backend auth service
AUTH_COOKIE = "auth_token"

# Opaque ID keying collapse/reply-form state in the thread view store
THREAD_SESSION_COOKIE = "thread_session"


async def current_user_id(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> str | None:
    """Resolve the auth cookie to a user ID (None when signed out)."""
    if not auth_token:
        return None
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
    return user.user_id if user else None


async def require_user_id(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    action: str,
) -> str:
    """Resolve the auth cookie or fail with 401.

    Args:
        get_current_user_use_case: Use case resolving the session token
        auth_token: Session token from cookie
        action: What the user tried to do, for the error message

    Raises:
        HTTPException: If not authenticated
    """
    user_id = await current_user_id(get_current_user_use_case, auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def ensure_thread_session(response: Response, session_id: str | None) -> str:
    """Return the thread session ID, issuing a cookie on first use."""
    if session_id:
        return session_id
    session_id = uuid4().hex
    response.set_cookie(
        key=THREAD_SESSION_COOKIE,
        value=session_id,
        httponly=True,
        samesite="lax",
    )
    return session_id
