"""User use cases."""

from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase

__all__ = ["GetUserRequest", "GetUserResponse", "GetUserUseCase"]
