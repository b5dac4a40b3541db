"""Pydantic models for API responses."""

from pydantic import BaseModel

from storyverse.core.types import ContentGuidelines


class ContentGuidelinesResponse(BaseModel):
    """Compiled content guidelines for one story request."""

    story_guidelines: str
    image_guidelines: str
    excluded_elements: list[str]
    included_elements: list[str]
    tone_guidelines: str

    @classmethod
    def from_guidelines(cls, guidelines: ContentGuidelines) -> "ContentGuidelinesResponse":
        return cls(**guidelines.to_dict())


class GuidelineChecksResponse(BaseModel):
    """Quick restriction checks used by the book creation form."""

    can_include_magic: bool
    can_include_talking_animals: bool
    modesty_level: str
    dietary_restrictions: list[str]


class GuidelineOptionsResponse(BaseModel):
    """Preference values the compiler recognises."""

    religious_traditions: list[str]
    observance_levels: list[str]
    cultural_backgrounds: list[str]
    dietary_preferences: list[str]
    modesty_levels: list[str]
    mythology_policies: list[str]
    conflict_levels: list[str]
    gender_representations: list[str]
    languages: dict[str, str]
