"""Configuration: frozen Config resolved from arguments and the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from movieflow.errors import ConfigurationError

load_dotenv()

API_KEY_ENV_VAR = "IMDB_API_KEY"
BASE_URL_ENV_VAR = "MOVIEFLOW_BASE_URL"
DEFAULT_BASE_URL = "https://imdb-api.com"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for fetching the popular-movies list.

    The API key is auto-resolved from ``IMDB_API_KEY`` and the base URL from
    ``MOVIEFLOW_BASE_URL`` when not passed explicitly.

    Example:
        config = Config()  # key from IMDB_API_KEY
        config = Config(use_mock=True)  # offline, no key needed
    """

    #: Auto-resolved from ``IMDB_API_KEY`` when *None*.
    api_key: str | None = None
    #: Auto-resolved from ``MOVIEFLOW_BASE_URL`` when *None*.
    base_url: str | None = None
    language: str = "en"
    timeout_s: float = 10.0
    use_mock: bool = False

    def __post_init__(self) -> None:
        """Resolve environment defaults and validate configuration."""
        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This bounds a single request to the movie service, in seconds.",
            )
        if not self.language or not self.language.strip():
            raise ConfigurationError(
                "language must be a non-empty string",
                hint="Use a language code such as 'en' or 'de'.",
            )

        if self.base_url is None:
            resolved_url = os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
            object.__setattr__(self, "base_url", resolved_url)
        if not str(self.base_url).startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base_url must be an http(s) URL, got {self.base_url!r}",
                hint=f"Set {BASE_URL_ENV_VAR} or pass base_url='https://...'.",
            )
        object.__setattr__(self, "base_url", str(self.base_url).rstrip("/"))

        if self.api_key is None and not self.use_mock:
            object.__setattr__(self, "api_key", os.environ.get(API_KEY_ENV_VAR))

        # Real requests need a key
        if not self.use_mock and not self.api_key:
            raise ConfigurationError(
                "API key required for the movie service",
                hint=f"Set {API_KEY_ENV_VAR} environment variable or pass api_key=...",
            )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(base_url={self.base_url!r}, language={self.language!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None}, "
            f"timeout_s={self.timeout_s}, use_mock={self.use_mock})"
        )

    __repr__ = __str__
