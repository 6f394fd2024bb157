"""Remote movie data sources."""

from .base import MovieSource
from .imdb import ImdbApiSource
from .mock import MockSource

__all__ = [
    "ImdbApiSource",
    "MockSource",
    "MovieSource",
]
