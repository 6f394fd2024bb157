"""Mock source for offline use and testing."""

from __future__ import annotations

import asyncio

from movieflow.models import Movie, MovieListResponse

SAMPLE_MOVIES: tuple[Movie, ...] = (
    Movie(
        id="tt0111161",
        rank="1",
        rank_up_down="+2",
        title="The Shawshank Redemption",
        full_title="The Shawshank Redemption (1994)",
        year="1994",
        crew="Frank Darabont (dir.), Tim Robbins, Morgan Freeman",
        imdb_rating="9.3",
        imdb_rating_count="2700000",
    ),
    Movie(
        id="tt0068646",
        rank="2",
        rank_up_down="-1",
        title="The Godfather",
        full_title="The Godfather (1972)",
        year="1972",
        crew="Francis Ford Coppola (dir.), Marlon Brando, Al Pacino",
        imdb_rating="9.2",
        imdb_rating_count="1900000",
    ),
    Movie(
        id="tt0468569",
        rank="3",
        rank_up_down="0",
        title="The Dark Knight",
        full_title="The Dark Knight (2008)",
        year="2008",
        crew="Christopher Nolan (dir.), Christian Bale, Heath Ledger",
        imdb_rating="9.0",
        imdb_rating_count="2700000",
    ),
)


class MockSource:
    """Source returning a fixed list without network access.

    Pass *error* to make every call fail with it, and *delay_s* to simulate
    latency.
    """

    def __init__(
        self,
        items: list[Movie] | None = None,
        *,
        error: BaseException | None = None,
        delay_s: float = 0.0,
    ) -> None:
        self.items = list(SAMPLE_MOVIES) if items is None else list(items)
        self.error = error
        self.delay_s = delay_s
        self.calls = 0

    async def get_most_popular_movies(self) -> MovieListResponse:
        """Return the configured list, or raise the configured error."""
        self.calls += 1
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.error is not None:
            raise self.error
        return MovieListResponse(items=list(self.items))
