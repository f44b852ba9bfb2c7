"""
simplehttp CLI entrypoint.

Handy for poking an endpoint with exactly the headers/body the library would send:

    simplehttp get https://example.test/search -p q="a b" --encode
    simplehttp post https://example.test/items --data '{"a": 1}' -H X-Trace=1
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from simplehttp import client
from simplehttp.core.headers import HttpHeader
from simplehttp.core.logging import configure_logging
from simplehttp.exceptions import HttpExecutionError
from simplehttp.transport.base import Http
from simplehttp.transport.registry import TRANSPORTS, create_http


def _key_value(pair: str) -> tuple[str, str]:
    """Parse a `KEY=VALUE` argument (the value may be empty)."""
    if "=" not in pair:
        raise argparse.ArgumentTypeError(f"Invalid '{pair}', expected KEY=VALUE")
    key, value = pair.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError(f"Invalid '{pair}', key is empty")
    return key, value


def _resolve_http(args: argparse.Namespace) -> Http:
    if args.transport:
        return create_http(args.transport)
    return client.get_http()


def _header(args: argparse.Namespace) -> HttpHeader | None:
    if not args.header:
        return None
    return HttpHeader(dict(args.header))


def _cmd_get(args: argparse.Namespace) -> int:
    http = _resolve_http(args)
    params = dict(args.param) or None
    print(http.get(args.url, params, _header(args), encode=bool(args.encode)))
    return 0


def _cmd_post(args: argparse.Namespace) -> int:
    http = _resolve_http(args)
    params = dict(args.param) or None
    print(http.post(args.url, args.data, _header(args), params=params, encode=bool(args.encode)))
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("url")
    p.add_argument(
        "-p", "--param", action="append", default=[], type=_key_value, help="Query parameter KEY=VALUE (repeatable)."
    )
    p.add_argument(
        "-H", "--header", action="append", default=[], type=_key_value, help="Request header NAME=VALUE (repeatable)."
    )
    p.add_argument("--encode", action="store_true", help="Percent-encode query parameter values.")
    p.add_argument("--transport", choices=sorted(TRANSPORTS), default=None, help="Override the configured transport.")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the simplehttp CLI."""
    parser = argparse.ArgumentParser(prog="simplehttp")
    parser.add_argument("--log-level", type=str, default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="Send a GET request and print the response body.")
    _add_common(get)
    get.set_defaults(func=_cmd_get)

    post = sub.add_parser("post", help="Send a POST request and print the response body.")
    _add_common(post)
    post.add_argument("--data", type=str, default=None, help="JSON text body.")
    post.set_defaults(func=_cmd_post)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m simplehttp.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except HttpExecutionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
