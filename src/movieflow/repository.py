"""Repository: republishes one remote fetch as a stream of NetworkResult states."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from movieflow.result import Failure, Loading, NetworkResult, Success

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from movieflow.models import Movie
    from movieflow.sources.base import MovieSource

log = logging.getLogger(__name__)


class MovieRepository:
    """Fetches the most-popular list from a source, one call per stream."""

    def __init__(self, source: MovieSource) -> None:
        self.source = source

    async def fetch_popular_movies(self) -> AsyncIterator[NetworkResult[list[Movie]]]:
        """Yield ``Loading(True)`` then exactly one ``Success`` or ``Failure``.

        Nothing runs until iteration starts, and every new iteration issues a
        new remote call. Errors from the source never escape: they are
        reported as ``Failure`` with the error text, or ``"Unknown Error"``
        when there is none. Cancellation of the consuming task still
        propagates.

        Example:
            async for state in repo.fetch_popular_movies():
                if isinstance(state, Success):
                    show(state.data)
        """
        yield Loading(True)

        log.debug("Fetching popular movies from %s", type(self.source).__name__)
        try:
            response = await self.source.get_most_popular_movies()
            items = response.items
        except Exception as e:
            failure = Failure.from_exception(e)
            log.warning("Popular movies fetch failed: %s", failure.message)
            yield failure
            return

        log.debug("Fetched %d popular movies", len(items))
        yield Success(items)
