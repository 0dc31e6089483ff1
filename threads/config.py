"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseModel):
    """Backend-as-a-service record store configuration."""

    url: str = "http://localhost:8787"
    project_id: str = "threads-dev"
    api_key: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    timeout: float = 30.0


class ThreadingSettings(BaseModel):
    """Comment threading configuration."""

    # Stored depth cap for new replies: min(parent_level + 1, max_comment_depth)
    max_comment_depth: int = 10

    # Indentation stops growing past this nesting level
    max_display_depth: int = 8

    # Indentation units per nesting level
    indent_width: int = 4

    # Viewing sessions with collapse/reply state kept in memory (LRU)
    max_view_sessions: int = 10000


class RankingSettings(BaseModel):
    """Feed ranking configuration."""

    # Exponent of the age decay in (score) / (age_hours + time_offset) ** gravity
    # Higher values = faster decay (more emphasis on recency)
    gravity: float = 1.5

    # Hours added to post age before applying decay
    time_offset: float = 2.0

    # Number of newest posts ranked client-side for the hot feed
    candidate_limit: int = 50

    # Default feed page size
    feed_limit: int = 20

    # Number of posts shown on the trending page
    trending_limit: int = 20


class SearchSettings(BaseModel):
    """Search configuration.

    Search filters small fetched sets client-side, so these limits bound
    both the backend reads and the result sizes.
    """

    post_limit: int = 20
    community_limit: int = 10
    user_limit: int = 10


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Base URL for this API server.

        In development: http://localhost:8000
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL allowed by CORS.

        In development: http://localhost:3000
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends when a token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        HOST=api.threads.example
        BACKEND__URL=https://backend.example
        BACKEND__API_KEY=...
        THREADING__MAX_DISPLAY_DEPTH=6
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows BACKEND__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    backend: BackendSettings = BackendSettings()
    threading: ThreadingSettings = ThreadingSettings()
    ranking: RankingSettings = RankingSettings()
    search: SearchSettings = SearchSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
        )
        return self
