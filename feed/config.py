"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# GIF catalog bundled with the package
DEFAULT_GIF_CATALOG = Path(__file__).parent / "data" / "gifs.json"


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://<host> (standard ports)
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL, used as the allowed CORS origin.

        In development: http://localhost:3000
        """
        if self.frontend_host == "localhost":
            return "http://localhost:3000"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class CommentSettings(BaseModel):
    """Comment threading configuration."""

    # Demote comments that sit on a parent cycle to roots.
    # Disable only to reproduce the naive two-pass linking, where cycle
    # members are linked to each other and vanish from the root list.
    detect_cycles: bool = True


class PostSettings(BaseModel):
    """Post configuration."""

    # There are no accounts; every post is attributed to this name
    default_username: str = "demo_user"


class GifSettings(BaseModel):
    """GIF catalog configuration."""

    # JSON array of {id, name, url} objects
    catalog_path: Path = DEFAULT_GIF_CATALOG


class ClientSettings(BaseModel):
    """Settings for the HTTP client used by comment viewers."""

    base_url: str = "http://localhost:8000"
    timeout_seconds: float = 10.0


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested sections:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        -> API: http://localhost:8000
        -> Frontend: http://localhost:3000

    Examples:
        COMMENTS__DETECT_CYCLES=false
        POSTS__DEFAULT_USERNAME=guest
        GIFS__CATALOG_PATH=/srv/feed/gifs.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows COMMENTS__DETECT_CYCLES syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()
    comments: CommentSettings = CommentSettings()
    posts: PostSettings = PostSettings()
    gifs: GifSettings = GifSettings()
    client: ClientSettings = ClientSettings()

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

        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
