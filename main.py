"""
PocketSomm command-line client
Main entry point: configures logging from settings and runs one backend operation
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional

import anyio
from pydantic import BaseModel

from app.config import settings
from app.exceptions import InvalidRequestError, PocketSommError, describe_error
from api.dependencies import open_client
from services import FavoritesService, ProfileService, WineService

_logger = logging.getLogger("pocketsomm.main")


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Talk to the PocketSomm backend.")
    p.add_argument(
        "--user",
        default=settings.default_user_id,
        help="User id (defaults to DEFAULT_USER_ID)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("health", help="Check backend health")
    sub.add_parser("profile", help="Show the user's profile and insights")

    search = sub.add_parser("search", help="Free-text wine search")
    search.add_argument("query")

    wine = sub.add_parser("wine", help="Show a wine and similar wines")
    wine.add_argument("wine_id")

    resolve = sub.add_parser("resolve", help="Resolve a wine name without saving it")
    resolve.add_argument("name")

    favorite = sub.add_parser("favorite", help="Add a favorite by name")
    favorite.add_argument("name")

    tasting = sub.add_parser("tasting", help="Record a tasting")
    tasting.add_argument("wine_id")
    tasting.add_argument("rating", type=float)
    tasting.add_argument("--context")
    tasting.add_argument("--notes")

    menu = sub.add_parser("menu", help="Recommend wines from a wine list PDF")
    menu.add_argument("pdf", type=Path)

    photo = sub.add_parser("photo", help="Add a favorite from a label photo")
    photo.add_argument("image", type=Path)
    photo.add_argument("--content-type", default="image/jpeg")
    return p


def _require_user(args: argparse.Namespace) -> str:
    if not args.user:
        raise InvalidRequestError("pass --user or set DEFAULT_USER_ID")
    return args.user


async def run(args: argparse.Namespace) -> Any:
    async with open_client(settings) as client:
        profiles = ProfileService(client)
        wines = WineService(client)
        favorites = FavoritesService(client, profiles)

        commands: Dict[str, Callable[[], Awaitable[Any]]] = {
            "health": client.health,
            "profile": lambda: profiles.refresh(_require_user(args)),
            "search": lambda: wines.search(args.query),
            "wine": lambda: wines.load_wine(args.wine_id),
            "resolve": lambda: favorites.preview_by_name(args.name),
            "favorite": lambda: favorites.add_by_name(_require_user(args), args.name),
            "tasting": lambda: profiles.add_tasting(
                _require_user(args),
                args.wine_id,
                args.rating,
                context=args.context,
                notes=args.notes,
            ),
            "menu": lambda: wines.recommend_from_menu(_require_user(args), args.pdf.read_bytes()),
            "photo": lambda: favorites.add_from_photo(
                _require_user(args), args.image.read_bytes(), args.content_type
            ),
        }
        return await commands[args.command]()


def main(argv: Optional[List[str]] = None) -> int:
    # Setup logging with configured level and format
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )
    args = build_parser().parse_args(argv)
    _logger.info(f"Running '{args.command}' against {settings.api_base_url}")

    try:
        result = anyio.run(run, args)
    except PocketSommError as exc:
        if settings.is_production():
            _logger.debug("Command failed", exc_info=True)
        else:
            _logger.warning(f"Command failed: {exc}", exc_info=True)
        print(f"error: {describe_error(exc)}", file=sys.stderr)
        return 1

    print(json.dumps(_to_jsonable(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
