"""Authentication domain service."""

import logfire

from threads.domain.value import Identity

from .base import Service


class IdentityProvider:
    """Interface for resolving session tokens to signed-in identities."""

    async def get_identity(self, token: str) -> Identity | None:
        """Resolve a session token.

        Args:
            token: Session token issued by the auth service

        Returns:
            Identity, or None if the token is unknown or expired
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for authentication.

    Credentials and sessions are owned by the backend auth service; this
    service only asks it who a token belongs to.
    """

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize auth service.

        Args:
            identity_provider: Identity provider implementation
        """
        self.identity_provider = identity_provider

    async def resolve_identity(self, token: str | None) -> Identity | None:
        """Resolve a session token to an identity.

        Args:
            token: Session token (None when signed out)

        Returns:
            Identity, or None when signed out or the token is not recognized
        """
        if not token:
            return None
        with logfire.span("auth_service.resolve_identity"):
            identity = await self.identity_provider.get_identity(token)
            if identity is None:
                logfire.info("Session token not recognized")
            return identity
