"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from threads.config import (
    BackendSettings,
    RankingSettings,
    SearchSettings,
    Settings,
    ThreadingSettings,
)
from threads.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_backend_settings(self, settings: Settings) -> BackendSettings:
        return settings.backend

    @provide(scope=Scope.APP)
    def provide_threading_settings(self, settings: Settings) -> ThreadingSettings:
        return settings.threading

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        return settings.search
