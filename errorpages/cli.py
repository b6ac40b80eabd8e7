"""
Command line entry point.

    python -m errorpages                  # listen on $HOST:$PORT (0.0.0.0:8080)
    python -m errorpages --port 9000
"""

import argparse
import logging

from errorpages.core.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Custom error pages backend for the ingress controller"
    )
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument(
        "--port", type=int, default=settings.port, help="Listen port"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Start the HTTP server."""
    import uvicorn

    args = build_parser().parse_args(argv)
    logger.info(
        "Serving error pages from %s at http://%s:%d",
        settings.error_files_path,
        args.host,
        args.port,
    )
    uvicorn.run(
        "errorpages.main:app",
        host=args.host,
        port=args.port,
        reload=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()
