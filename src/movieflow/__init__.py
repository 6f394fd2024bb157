"""movieflow: the most-popular movies list as a stream of fetch states.

Public API:
    - MovieRepository: Emits Loading, then Success or Failure, per fetch
    - popular_movies(): One fetch built from a Config, source cleanup included
    - Config: Configuration dataclass
    - Loading / Success / Failure: The NetworkResult states
"""

from __future__ import annotations

import asyncio
from contextlib import aclosing
import logging
from typing import TYPE_CHECKING

from movieflow.config import Config
from movieflow.errors import APIError, ConfigurationError, MovieflowError
from movieflow.models import Movie, MovieListResponse
from movieflow.repository import MovieRepository
from movieflow.result import (
    UNKNOWN_ERROR,
    Failure,
    Loading,
    NetworkResult,
    Success,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from movieflow.sources.base import MovieSource

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("movieflow")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("movieflow").addHandler(logging.NullHandler())

logger = logging.getLogger(__name__)


async def popular_movies(
    config: Config,
) -> AsyncIterator[NetworkResult[list[Movie]]]:
    """Stream the fetch states for the most-popular list.

    Args:
        config: Configuration selecting the real service or the mock.

    Yields:
        ``Loading(True)``, then one ``Success`` or ``Failure``.

    Example:
        async for state in popular_movies(Config(use_mock=True)):
            print(state)
    """
    source = get_source(config)
    try:
        async with aclosing(MovieRepository(source).fetch_popular_movies()) as states:
            async for state in states:
                yield state
    finally:
        aclose = getattr(source, "aclose", None)
        if callable(aclose):
            try:
                await aclose()
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                # Cleanup should never mask the reported outcome.
                logger.warning("Source cleanup failed: %s", exc)


def get_source(config: Config) -> MovieSource:
    """Get the appropriate source based on configuration."""
    if config.use_mock:
        from movieflow.sources.mock import MockSource

        return MockSource()

    from movieflow.sources.imdb import ImdbApiSource

    return ImdbApiSource.from_config(config)


# Re-export for convenience
__all__ = [
    "UNKNOWN_ERROR",
    "APIError",
    "Config",
    "ConfigurationError",
    "Failure",
    "Loading",
    "Movie",
    "MovieListResponse",
    "MovieRepository",
    "MovieflowError",
    "NetworkResult",
    "Success",
    "get_source",
    "popular_movies",
]
