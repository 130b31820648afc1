#!/usr/bin/env python
"""
Run the StyleStash API server.

Usage:
    python run_api.py
    python run_api.py --reload            # Development mode
    python run_api.py --port 8080 --log-level debug

Defaults come from STYLESTASH_* settings; flags override them.
"""

import argparse
import uvicorn

from shared.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the StyleStash wardrobe API")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", type=str, help="Interface to bind (default: STYLESTASH_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: STYLESTASH_PORT, 5000)")
    parser.add_argument("--log-level", type=str, help="Uvicorn log level (default: STYLESTASH_LOG_LEVEL)")
    return parser


def main():
    args = build_parser().parse_args()
    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=(args.log_level or settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
