from __future__ import annotations

import httpx
from pydantic import ValidationError
import pytest

from movieflow.errors import APIError, ConfigurationError, MovieflowError
from movieflow.models import MovieListResponse
from movieflow.sources._errors import wrap_source_error

pytestmark = pytest.mark.unit


def test_api_error_structured_metadata() -> None:
    err = APIError(
        "boom",
        hint="do this",
        status_code=503,
        source="imdb-api",
        phase="popular",
    )

    assert str(err) == "boom"
    assert err.hint == "do this"
    assert err.status_code == 503
    assert err.source == "imdb-api"
    assert err.phase == "popular"


def test_api_error_defaults_to_none() -> None:
    err = APIError("fail")
    assert err.hint is None
    assert err.status_code is None
    assert err.source is None
    assert err.phase is None


def test_subclass_hierarchy() -> None:
    assert isinstance(APIError("x"), MovieflowError)
    assert isinstance(ConfigurationError("x"), MovieflowError)


def test_wrap_source_error_keeps_transport_message() -> None:
    err = wrap_source_error(
        httpx.ConnectError("connection refused"), source="imdb-api", phase="popular"
    )

    assert isinstance(err, APIError)
    assert str(err) == "imdb-api popular failed: connection refused"
    assert err.source == "imdb-api"
    assert err.phase == "popular"
    assert err.status_code is None
    assert err.hint is None


def test_wrap_source_error_describes_silent_timeouts() -> None:
    err = wrap_source_error(httpx.ReadTimeout(""), source="imdb-api", phase="popular")

    assert str(err) == "imdb-api popular failed: request timed out"


def test_wrap_source_error_finds_timeout_in_cause_chain() -> None:
    try:
        try:
            raise httpx.ConnectTimeout("")
        except httpx.ConnectTimeout as e:
            raise httpx.TransportError("") from e
    except httpx.TransportError as outer:
        err = wrap_source_error(outer, source="imdb-api", phase="popular")

    assert str(err).endswith("request timed out")


def test_wrap_source_error_flattens_validation_errors_to_one_line() -> None:
    with pytest.raises(ValidationError) as caught:
        MovieListResponse.model_validate_json(b'{"items": [{"rank": "1"}]}')

    err = wrap_source_error(
        caught.value, source="imdb-api", phase="decode", message="bad body"
    )

    assert str(err) == "bad body: Field required (+1 more)"
    assert "\n" not in str(err)
    assert "errors.pydantic.dev" not in str(err)
