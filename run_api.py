#!/usr/bin/env python3
"""
Startup script for the Safety-Aware Routing API server.
"""

import argparse
import logging

import uvicorn

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Safety-Aware Routing API Server")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes (development only)")
    parser.add_argument("--no-access-log", action="store_true", help="Disable per-request access logging")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    return parser.parse_args(argv)


def main(argv=None):
    """Start the FastAPI server."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    base_url = f"http://{args.host}:{args.port}"
    logger.info(f"Serving routing API on {base_url} (docs at {base_url}/docs)")

    # The app is passed as an import string so --reload can re-import it
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=not args.no_access_log
    )


if __name__ == "__main__":
    main()
