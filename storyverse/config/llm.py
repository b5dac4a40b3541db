"""
LLM configuration for Storyverse story generation.

The text-generation model is an external collaborator. This module only
picks which provider to talk to, based on the API keys present, and
defines the retry policy for transient network failures.
"""

import os
import logging
from dotenv import load_dotenv
import dspy
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Timeout for LLM calls (seconds)
LLM_TIMEOUT = 120

# Network errors that should trigger retry
RETRYABLE_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
    BrokenPipeError,
)


def get_inference_lm() -> dspy.LM:
    """
    Get the LM used for story writing.

    Priority order:
    1. Claude (ANTHROPIC_API_KEY)
    2. Gemini (GOOGLE_API_KEY)
    3. GPT (OPENAI_API_KEY)
    """
    if os.getenv("ANTHROPIC_API_KEY"):
        return dspy.LM(
            "anthropic/claude-sonnet-4-20250514",
            api_key=os.getenv("ANTHROPIC_API_KEY"),
            max_tokens=4096,
            temperature=1.0,
            timeout=LLM_TIMEOUT,
        )
    elif os.getenv("GOOGLE_API_KEY"):
        return dspy.LM(
            "gemini/gemini-2.5-pro",
            api_key=os.getenv("GOOGLE_API_KEY"),
            max_tokens=4096,
            temperature=1.0,
            timeout=LLM_TIMEOUT,
        )
    elif os.getenv("OPENAI_API_KEY"):
        return dspy.LM(
            "openai/gpt-4o",
            api_key=os.getenv("OPENAI_API_KEY"),
            max_tokens=4096,
            temperature=0.9,
            timeout=LLM_TIMEOUT,
        )
    else:
        raise ValueError(
            "No API key found. Set ANTHROPIC_API_KEY, GOOGLE_API_KEY, or OPENAI_API_KEY in .env"
        )


# Retry decorator for LLM calls with network errors
llm_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=2, min=2, max=10),
    retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)


def configure_dspy() -> None:
    """
    Configure DSPy with the inference LM globally.

    Note:
        Tests and callers needing explicit control should pass an LM to
        GuidedStoryGenerator(lm=...) instead.
    """
    dspy.configure(lm=get_inference_lm())
