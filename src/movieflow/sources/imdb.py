"""IMDb-API source implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from movieflow.errors import APIError
from movieflow.models import MovieListResponse
from movieflow.sources._errors import _auth_hint, wrap_source_error

if TYPE_CHECKING:
    from movieflow.config import Config

log = logging.getLogger(__name__)

SOURCE_NAME = "imdb-api"


class ImdbApiSource:
    """Most-popular movies from the IMDb-API ``MostPopularMovies`` endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://imdb-api.com",
        language: str = "en",
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with an API key; *client* is injected mainly for tests."""
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout_s = timeout_s
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, config: Config) -> ImdbApiSource:
        """Build a source from a resolved Config."""
        return cls(
            config.api_key or "",
            base_url=config.base_url or "https://imdb-api.com",
            language=config.language,
            timeout_s=config.timeout_s,
        )

    def _get_client(self) -> httpx.AsyncClient:
        """Lazily initialize and return the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_s)
        return self._client

    @property
    def popular_url(self) -> str:
        return f"{self.base_url}/{self.language}/API/MostPopularMovies/{self.api_key}"

    async def get_most_popular_movies(self) -> MovieListResponse:
        """Fetch and decode the most-popular list.

        Raises:
            APIError: On transport failure, a non-2xx status, an undecodable
                body, or a refusal reported in ``errorMessage``.
        """
        client = self._get_client()
        log.debug("GET %s/%s/API/MostPopularMovies/***", self.base_url, self.language)
        try:
            response = await client.get(self.popular_url)
        except httpx.HTTPError as e:
            raise wrap_source_error(e, source=SOURCE_NAME, phase="popular") from e

        if response.is_error:
            # Not raise_for_status(): its message embeds the URL and the key.
            reason = response.reason_phrase or "HTTP error"
            raise APIError(
                f"{SOURCE_NAME} popular failed (status={response.status_code}): {reason}",
                hint=_auth_hint(response.status_code, reason),
                status_code=response.status_code,
                source=SOURCE_NAME,
                phase="popular",
            )

        try:
            payload = MovieListResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise wrap_source_error(
                e,
                source=SOURCE_NAME,
                phase="decode",
                message=f"{SOURCE_NAME} returned an unreadable response",
            ) from e

        if payload.error_message:
            raise APIError(
                payload.error_message,
                hint=_auth_hint(None, payload.error_message),
                status_code=response.status_code,
                source=SOURCE_NAME,
                phase="popular",
            )

        log.debug("%s returned %d movies", SOURCE_NAME, len(payload.items))
        return payload

    async def aclose(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
