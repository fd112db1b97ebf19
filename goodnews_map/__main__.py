"""Command-line entry point for the good news map service."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from .config import load_config
from .exceptions import FeedFetchError
from .pipeline import build_pipeline

LOGGER = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve recent good news with map coordinates")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Build the payload once, print it as JSON and exit",
    )
    parser.add_argument("--host", help="Override the bind address")
    parser.add_argument("--port", type=int, help="Override the listen port")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    config = load_config()
    if args.host is not None:
        config = replace(config, host=args.host)
    if args.port is not None:
        config = replace(config, port=args.port)

    if args.once:
        try:
            payload = build_pipeline(config).handle()
        except FeedFetchError as exc:
            LOGGER.error("Could not build payload: %s", exc)
            return 1
        print(json.dumps(payload.to_dict(), indent=2))
        return 0

    import uvicorn

    from .api import app, set_pipeline

    set_pipeline(build_pipeline(config))
    uvicorn.run(app, host=config.host, port=config.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
