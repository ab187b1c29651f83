#!/usr/bin/env python3
"""Command-line entry point: serve rng-service over HTTP with uvicorn.

Usage:
    # Start on the default address (127.0.0.1:8080):
    rng-service

    # Bind all interfaces on a custom port:
    rng-service --host 0.0.0.0 --port 9000

    # Reproducible output for a debugging session:
    rng-service --source seeded --seed 1234

Every option can also be set through the environment (RNG_HOST,
RNG_PORT, RNG_RANDOM_SOURCE_TYPE, RNG_RANDOM_SEED, RNG_LOG_LEVEL).
"""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from rng_service.app import create_app
from rng_service.config import load_config
from rng_service.exceptions import ConfigValidationError

logger = logging.getLogger("rng_service")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for :func:`main`."""
    parser = argparse.ArgumentParser(
        prog="rng-service",
        description="HTTP microservice sampling random values, bytes and colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s                              # Default: 127.0.0.1:8080
  %(prog)s --port 9000                  # Custom port
  %(prog)s --source seeded --seed 42    # Reproducible sampling
""",
    )
    parser.add_argument("--host", type=str, default=None, help="Bind address (default: 127.0.0.1).")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: 8080).")
    parser.add_argument(
        "--source",
        dest="random_source_type",
        type=str,
        default=None,
        help="Random source: 'system' (default), 'seeded', or a plugin name.",
    )
    parser.add_argument(
        "--seed",
        dest="random_seed",
        type=int,
        default=None,
        help="Root seed for sources that accept one.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["none", "summary", "full"],
        help="Per-request logging verbosity (default: summary).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and start the server."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(
            host=args.host,
            port=args.port,
            random_source_type=args.random_source_type,
            random_seed=args.random_seed,
            log_level=args.log_level,
        )
        app = create_app(config)
    except ConfigValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(2)

    logger.info("Random source: %s", config.random_source_type)
    uvicorn.run(app, host=config.host, port=config.port, log_level="debug" if args.verbose else "info")


if __name__ == "__main__":
    main()
