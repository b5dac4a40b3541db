"""Pydantic models for API requests and responses."""

from .requests import (
    CompileGuidelinesRequest,
    FamilyPreferencesModel,
    ChildPreferencesModel,
)
from .responses import (
    ContentGuidelinesResponse,
    GuidelineChecksResponse,
    GuidelineOptionsResponse,
)

__all__ = [
    "CompileGuidelinesRequest",
    "FamilyPreferencesModel",
    "ChildPreferencesModel",
    "ContentGuidelinesResponse",
    "GuidelineChecksResponse",
    "GuidelineOptionsResponse",
]
