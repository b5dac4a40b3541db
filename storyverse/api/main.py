"""FastAPI application for Storyverse content guidelines."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_JSON, LOG_LEVEL
from .logging import configure_logging, guidelines_logger
from .routes import guidelines

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=LOG_JSON, level=LOG_LEVEL)
    logger.info("Storyverse guidelines API started")
    yield


app = FastAPI(
    title="Storyverse Content Guidelines API",
    description="""
Compile family content preferences into guidelines for personalized children's books.

## Features
- **Story guidelines**: notes plus elements to include and exclude
- **Image guidelines**: dress code and visually sensitive exclusions
- **Tone**: chosen from the family's religious observance level

## Workflow
1. GET `/guidelines/options` to build the preferences form
2. POST `/guidelines` with family (and optional child) preferences
3. Embed the returned guidelines in story and illustration prompts
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(guidelines.router, prefix="/guidelines", tags=["Guidelines"])


@app.exception_handler(RequestValidationError)
async def log_validation_error(request: Request, exc: RequestValidationError):
    """Log rejected requests, then return the standard 422 body."""
    fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
    guidelines_logger.request_rejected(fields, type(exc).__name__)
    return await request_validation_exception_handler(request, exc)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
