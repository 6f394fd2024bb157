"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to prevent test suites from
growing lots of one-off source subclasses as coverage expands.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from movieflow.models import MovieListResponse
from tests.conftest import FakeSource


@dataclass
class GateSource(FakeSource):
    """FakeSource that blocks inside the call until released.

    Lets a test hold several fetches in flight at once, or cancel one
    mid-call.
    """

    started: asyncio.Event = field(default_factory=asyncio.Event)
    release: asyncio.Event = field(default_factory=asyncio.Event)

    async def get_most_popular_movies(self) -> MovieListResponse:
        self.calls += 1
        self.started.set()
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return MovieListResponse(items=list(self.items))


@dataclass
class ClosingSource(FakeSource):
    """FakeSource with an ``aclose`` that records (or fails) cleanup."""

    closed: int = 0
    close_error: BaseException | None = None

    async def aclose(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error
