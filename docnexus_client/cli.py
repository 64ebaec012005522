"""Command line entry point for one-off platform calls.

    docnexus-call --list
    docnexus-call v5/health
    docnexus-call v5/profile/us/:npi --payload '{"npi": "1234567890"}'
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

import aiohttp

from .platform.core import create_platform_client
from .platform.errors import DocnexusError
from .platform.models import JsonBody
from .platform.registry import list_endpoint_names
from .platform.transport import AiohttpTransport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docnexus-call", description="Call a DocNexus endpoint by name")
    parser.add_argument("endpoint", nargs="?", help="Endpoint name, e.g. v5/search")
    parser.add_argument("--list", action="store_true", help="List the supported endpoint names and exit")
    parser.add_argument("--payload", help="JSON object sent as body or path values")
    parser.add_argument("--api-key", default=os.getenv("DOCNEXUS_API_KEY"), help="Defaults to $DOCNEXUS_API_KEY")
    parser.add_argument("--base-url", help="Override the gateway base URL")
    parser.add_argument("--timeout", type=float, help="Total request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(levelname)s] %(message)s',
    )

    if args.list:
        for name in list_endpoint_names():
            print(name)
        return 0

    if not args.endpoint:
        parser.error("an endpoint name is required unless --list is given")
    if not args.api_key:
        parser.error("an API key is required (--api-key or DOCNEXUS_API_KEY)")

    payload = None
    if args.payload:
        try:
            payload = json.loads(args.payload)
        except ValueError as exc:
            parser.error(f"--payload is not valid JSON: {exc}")
        if not isinstance(payload, dict):
            parser.error("--payload must be a JSON object")

    client = create_platform_client(
        args.api_key,
        base_url=args.base_url,
        transport=AiohttpTransport(timeout=args.timeout),
    )

    try:
        result = asyncio.run(client.call(args.endpoint, payload))
    except (DocnexusError, aiohttp.ClientError, asyncio.TimeoutError) as exc:
        print(f"Error: {str(exc) or type(exc).__name__}", file=sys.stderr)
        return 1

    if isinstance(result, JsonBody):
        print(json.dumps(result.value, indent=2))
    else:
        print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
