"""Source protocol: minimal interface for remote movie data sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from movieflow.models import MovieListResponse


@runtime_checkable
class MovieSource(Protocol):
    """Anything that can fetch the most-popular list in one call."""

    async def get_most_popular_movies(self) -> MovieListResponse:
        """Fetch the current most-popular list."""
        ...
