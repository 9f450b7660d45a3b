"""
CLI entry point for the user service.

Usage:
    # Start the HTTP API (host/port default to settings)
    python -m user_service serve

    # Bind elsewhere, with auto-reload for development
    python -m user_service serve --host 127.0.0.1 --port 8000 --reload
"""

import argparse
import logging
from typing import Optional, Sequence

from user_service.core.config import settings

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    logger.info(
        "Starting %s at http://%s:%d%s",
        settings.project_name,
        args.host,
        args.port,
        settings.api_prefix,
    )
    uvicorn.run(
        "user_service.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="User service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument(
        "--host", default=settings.host,
        help=f"Bind address (default {settings.host})",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"Bind port (default {settings.port})",
    )
    serve_parser.add_argument(
        "--reload", action="store_true",
        help="Reload on code changes (development only)",
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
