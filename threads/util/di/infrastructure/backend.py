"""Backend infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from threads.adapter.backend import BackendClient, HttpBackendClient
from threads.config import BackendSettings
from threads.util.di.base import ProviderBase
from threads.util.error import ConfigurationError


class BackendProvider(ProviderBase):
    """Backend component base."""

    __mock_component__ = "backend"


class ProdBackendProvider(BackendProvider):
    """Production backend provider talking HTTP to the backend service."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_backend_client(
        self, backend_settings: BackendSettings
    ) -> AsyncIterator[BackendClient]:
        """Provide the shared backend client, closed with the container.

        Raises:
            ConfigurationError: If the backend URL is not configured
        """
        if not backend_settings.url:
            raise ConfigurationError("Backend URL must be configured")

        client = HttpBackendClient(
            base_url=backend_settings.url,
            project_id=backend_settings.project_id,
            api_key=backend_settings.api_key,
            timeout=backend_settings.timeout,
        )
        logfire.info(
            "Backend client created",
            url=backend_settings.url,
            project_id=backend_settings.project_id,
        )
        yield client
        await client.aclose()
