"""
Configuration module for Storyverse.

Re-exports LLM and story configuration.
"""

from .llm import configure_dspy, get_inference_lm, llm_retry
from .story import STORY_DEFAULTS

__all__ = [
    # LLM
    "configure_dspy",
    "get_inference_lm",
    "llm_retry",
    # Story
    "STORY_DEFAULTS",
]
