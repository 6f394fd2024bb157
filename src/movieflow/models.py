"""Wire models for the popular-movies response."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """One entry of the most-popular list."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    title: str
    rank: str | None = None
    #: Movement since the previous ranking, e.g. ``"+3"`` or ``"-12"``.
    rank_up_down: str | None = Field(default=None, alias="rankUpDown")
    full_title: str | None = Field(default=None, alias="fullTitle")
    year: str | None = None
    image: str | None = None
    crew: str | None = None
    imdb_rating: str | None = Field(default=None, alias="imDbRating")
    imdb_rating_count: str | None = Field(default=None, alias="imDbRatingCount")


class MovieListResponse(BaseModel):
    """Response body of the most-popular endpoint.

    The service reports refusals (bad key, quota) in ``errorMessage`` with an
    HTTP 200, so an empty ``items`` list is only meaningful when
    ``error_message`` is empty too.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: list[Movie] = Field(default_factory=list)
    error_message: str | None = Field(default=None, alias="errorMessage")
