from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from skyline.errors import MissingCredentialError


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    github_api_token: str | None = None
    github_graphql_url: str = "https://api.github.com/graphql"
    user_agent: str = "skylineg"
    http_timeout_seconds: float = 20.0
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def require_token(self) -> str:
        """Return the GitHub API token or fail when it is not configured."""

        token = (self.github_api_token or "").strip()
        if not token:
            raise MissingCredentialError("Missing GITHUB_API_TOKEN")
        return token
