#!/usr/bin/env python3
"""Run the Storyverse guidelines API.

Host, port and auto-reload come from STORYVERSE_HOST, STORYVERSE_PORT
and STORYVERSE_RELOAD (see storyverse/api/config.py).
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from storyverse.api.config import API_HOST, API_PORT, API_RELOAD


def main():
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Run the Storyverse guidelines API")
    parser.add_argument("--host", default=API_HOST, help=f"Bind address (default: {API_HOST})")
    parser.add_argument("--port", type=int, default=API_PORT, help=f"Port (default: {API_PORT})")
    parser.add_argument("--reload", action="store_true", default=API_RELOAD, help="Auto-reload on code changes")
    args = parser.parse_args()

    uvicorn.run(
        "storyverse.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
