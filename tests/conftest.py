"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and a source test
double. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os

import pytest

from movieflow.models import Movie, MovieListResponse

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeSource:
    """Source test double for repository behavior verification.

    Returns ``items`` or raises ``error`` and counts calls. Use to test the
    state stream without making real API calls.
    """

    items: list[Movie] = field(default_factory=list)
    error: BaseException | None = None
    calls: int = 0

    async def get_most_popular_movies(self) -> MovieListResponse:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return MovieListResponse(items=list(self.items))


def make_movie(idx: int, **overrides: str) -> Movie:
    """Build a Movie with predictable fields."""
    fields = {
        "id": f"tt{idx:07d}",
        "rank": str(idx),
        "title": f"Movie {idx}",
        "full_title": f"Movie {idx} (2020)",
        "year": "2020",
        "imdb_rating": "7.5",
    }
    fields.update(overrides)
    return Movie(**fields)


@pytest.fixture
def movies() -> list[Movie]:
    """Three distinct movies (not autouse)."""
    return [make_movie(i) for i in (1, 2, 3)]


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_env(request, monkeypatch):
    """Ensure a clean environment for each test.

    Clears IMDB_* and MOVIEFLOW_* env vars to prevent test pollution.
    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith(("IMDB_", "MOVIEFLOW_")):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
