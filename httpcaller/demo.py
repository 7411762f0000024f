#!/usr/bin/env python
"""
Command-line demo for the GET and POST callers.

Fetches or creates a post on a JSONPlaceholder-style API and prints the
decoded result as JSON. ``--expect key=value`` adds a base success response
entry; values are compared by their string form.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .clients import GetCaller, PostCaller
from .config import caller_options_from_settings, create_http_client, get_settings
from .errors import HTTPCallerError
from .schemas import CallOptions

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


class NewPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    body: str
    user_id: int = Field(alias="userId")


class Post(NewPost):
    id: int


def _parse_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    expected: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        expected[key] = value
    return expected


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Call a REST endpoint and validate the reply")
    parser.add_argument(
        "--base-url",
        help=f"API base URL (default: HTTPCALLER_BASE_URL or {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--expect",
        action="append",
        metavar="KEY=VALUE",
        help="Field the response must contain; may be repeated",
    )
    parser.add_argument(
        "--header",
        action="append",
        metavar="NAME=VALUE",
        help="Extra request header for this call; may be repeated",
    )
    parser.add_argument("--timeout", type=float, help="Deadline for the call in seconds")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    get_parser = commands.add_parser("get", help="Fetch posts/:id")
    get_parser.add_argument("--id", default="1", help="Post id (default: 1)")

    post_parser = commands.add_parser("post", help="Create a post")
    post_parser.add_argument("--title", default="foo")
    post_parser.add_argument("--body", default="bar")
    post_parser.add_argument("--user-id", type=int, default=1)

    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> Post:
    settings = get_settings()
    base_url = (args.base_url or settings.base_url or DEFAULT_BASE_URL).rstrip("/")
    options = caller_options_from_settings(
        settings, base_success_response=_parse_pairs(args.expect)
    )
    call_options = CallOptions(
        headers=_parse_pairs(args.header) or None,
        path_params={"id": args.id} if args.command == "get" else None,
        timeout=args.timeout,
    )

    async with create_http_client(settings) as client:
        if args.command == "get":
            getter = GetCaller[Post](client, base_url, "posts/:id", Post, options)
            return await getter.get(call_options)

        poster = PostCaller[NewPost, Post](client, base_url, "posts", Post, NewPost, options)
        payload = NewPost(title=args.title, body=args.body, user_id=args.user_id)
        return await poster.post(payload, call_options)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = asyncio.run(_run(args))
    except argparse.ArgumentTypeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except HTTPCallerError as exc:
        print(f"Error ({type(exc).__name__}): {exc}", file=sys.stderr)
        sys.exit(1)

    print(result.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    main()
