"""CLI entry point for fdy-fetch-client."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import httpx

from .api.client import create_client
from .config import load_config
from .errors import FetchClientError

METHODS_WITH_BODY = {"post", "put"}


def parse_headers(values: Optional[List[str]]) -> Dict[str, str]:
    """Turn repeated ``-H "Name: value"`` arguments into a dict."""
    headers: Dict[str, str] = {}
    for value in values or []:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header (expected 'Name: value'): {value}")
        headers[name.strip()] = content.strip()
    return headers


def format_data(data: Any) -> str:
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False)


async def run_request(args: argparse.Namespace) -> int:
    """Execute the request described by ``args`` and print the result."""
    config = load_config(base_url=args.base_url, debug=args.debug or None)
    client = create_client(config)

    options: Dict[str, Any] = {}
    if args.timeout is not None:
        options["timeout"] = args.timeout

    headers = parse_headers(args.header)

    verb = getattr(client, args.command)
    try:
        if args.command in METHODS_WITH_BODY:
            response = await verb(args.url, args.data, headers, options)
        else:
            response = await verb(args.url, headers, options)
    except FetchClientError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        print(format_data(e.data))
        return 1
    except httpx.TransportError as e:
        print(f"Transport error: {str(e) or type(e).__name__}", file=sys.stderr)
        return 2
    finally:
        await client.aclose()

    print(f"Status: {response.status_code}")
    print(format_data(response.data))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="fdy-fetch-client CLI")
    subparsers = parser.add_subparsers(dest='command', help='HTTP method')

    for method in ("get", "post", "put", "delete"):
        sub = subparsers.add_parser(method, help=f'Send a {method.upper()} request')
        sub.add_argument('url', help='Path (with --base-url) or absolute URL')
        sub.add_argument('-H', '--header', action='append', help='Header as "Name: value"')
        sub.add_argument('--base-url', help='Prefix for the URL')
        sub.add_argument('--timeout', type=float, help='Timeout in seconds')
        sub.add_argument('--debug', action='store_true', help='Log failed requests')
        if method in METHODS_WITH_BODY:
            sub.add_argument('-d', '--data', help='Request body')

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )

    try:
        exit_code = asyncio.run(run_request(args))
    except ValueError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        exit_code = 2
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
