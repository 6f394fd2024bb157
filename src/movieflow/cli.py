"""Command-line entry point: print the fetch states for the popular list.

Examples:
- movieflow --mock
- movieflow --limit 5
- python -m movieflow --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING

from movieflow import popular_movies
from movieflow.config import Config
from movieflow.errors import ConfigurationError
from movieflow.result import Failure, Loading, Success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from movieflow.models import Movie
    from movieflow.result import NetworkResult

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser."""
    parser = argparse.ArgumentParser(
        prog="movieflow",
        description="Fetch the most popular movies and print each fetch state.",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use built-in sample data instead of the movie service",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Print at most this many movies",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the terminal state as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_movie(movie: Movie) -> str:
    rank = movie.rank or "-"
    rating = f"  ★ {movie.imdb_rating}" if movie.imdb_rating else ""
    return f"{rank:>4}. {movie.full_title or movie.title}{rating}"


def _state_to_json(state: NetworkResult[list[Movie]], limit: int | None) -> str:
    if isinstance(state, Success):
        movies = state.data[:limit] if limit is not None else state.data
        body = {
            "status": "success",
            "items": [m.model_dump(by_alias=True, exclude_none=True) for m in movies],
        }
    elif isinstance(state, Failure):
        body = {"status": "failure", "message": state.message}
    else:
        body = {"status": "loading"}
    return json.dumps(body, indent=2, ensure_ascii=False)


async def _run(config: Config, *, limit: int | None, as_json: bool) -> int:
    code = EXIT_FAILURE
    async for state in popular_movies(config):
        if isinstance(state, Loading):
            if not as_json:
                print("Loading popular movies...", file=sys.stderr)
            continue
        if as_json:
            print(_state_to_json(state, limit))
        elif isinstance(state, Success):
            movies = state.data[:limit] if limit is not None else state.data
            if not movies:
                print("No movies returned.")
            for movie in movies:
                print(format_movie(movie))
        else:
            print(f"Error: {state.message}", file=sys.stderr)
        code = EXIT_OK if isinstance(state, Success) else EXIT_FAILURE
    return code


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.limit is not None and args.limit < 0:
        print("Error: --limit must be >= 0", file=sys.stderr)
        return EXIT_CONFIG

    try:
        config = Config(use_mock=args.mock)
        return asyncio.run(_run(config, limit=args.limit, as_json=args.json))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.hint:
            print(f"Hint: {e.hint}", file=sys.stderr)
        return EXIT_CONFIG


if __name__ == "__main__":
    sys.exit(main())
