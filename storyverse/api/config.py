"""API configuration constants.

Single source of truth for settings used across the API layer.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

# Logging
LOG_JSON = os.getenv("STORYVERSE_LOG_JSON", "true").lower() in ("1", "true", "yes")
LOG_LEVEL = getattr(logging, os.getenv("STORYVERSE_LOG_LEVEL", "INFO").upper(), logging.INFO)

# Comma-separated list of allowed web origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("STORYVERSE_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Server
API_HOST = os.getenv("STORYVERSE_HOST", "0.0.0.0")
API_PORT = int(os.getenv("STORYVERSE_PORT", "8000"))
API_RELOAD = os.getenv("STORYVERSE_RELOAD", "false").lower() in ("1", "true", "yes")
