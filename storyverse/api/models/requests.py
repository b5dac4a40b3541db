"""Pydantic models for API requests."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from storyverse.config import STORY_DEFAULTS
from storyverse.core.guidelines import is_supported_language
from storyverse.core.types import ChildPreferences, FamilyPreferences


class FamilyPreferencesModel(BaseModel):
    """Family content preferences.

    Enum-like fields are free strings: values the compiler does not know
    are accepted and simply trigger no rule.
    """

    cultural_background: Optional[list[str]] = Field(default=None, examples=[["south-asian"]])
    religious_tradition: Optional[str] = Field(default=None, examples=["muslim"])
    religious_observance_level: Optional[str] = Field(default=None, examples=["observant"])
    dietary_preferences: Optional[list[str]] = Field(default=None, examples=[["halal"]])
    celebrate_religious_holidays: Optional[bool] = None
    celebrate_secular_holidays: Optional[bool] = None
    specific_holidays: Optional[list[str]] = None
    excluded_holidays: Optional[list[str]] = None
    allow_magic_fantasy: Optional[bool] = None
    allow_mythology: Optional[str] = None
    allow_talking_animals: Optional[bool] = None
    allow_supernatural_elements: Optional[bool] = None
    family_structure: Optional[str] = None
    custom_family_notes: Optional[str] = Field(default=None, max_length=2000)
    gender_representation: Optional[str] = None
    conflict_level: Optional[str] = None
    allow_mild_peril: Optional[bool] = None
    include_educational_content: Optional[bool] = None
    educational_focus: Optional[list[str]] = None
    modesty_level: Optional[str] = None
    allow_music_themes: Optional[bool] = None
    allow_dance_themes: Optional[bool] = None
    excluded_themes: Optional[list[str]] = None
    excluded_elements: Optional[list[str]] = None
    custom_guidelines: Optional[str] = Field(default=None, max_length=2000)

    def to_domain(self) -> FamilyPreferences:
        return FamilyPreferences.from_row(self.model_dump())


class ChildPreferencesModel(BaseModel):
    """Per-child overrides."""

    use_family_defaults: bool = True
    allow_magic_fantasy: Optional[bool] = None
    allow_scary_elements: Optional[bool] = None
    conflict_level: Optional[str] = None
    avoid_themes: Optional[list[str]] = Field(default=None, examples=[["spiders"]])
    favorite_themes: Optional[list[str]] = Field(default=None, examples=[["dinosaurs"]])
    needs_simple_language: Optional[bool] = None
    needs_high_contrast_images: Optional[bool] = None

    def to_domain(self) -> ChildPreferences:
        return ChildPreferences.from_row(self.model_dump())


class CompileGuidelinesRequest(BaseModel):
    """Request body for compiling content guidelines."""

    family_preferences: FamilyPreferencesModel = Field(default_factory=FamilyPreferencesModel)
    child_preferences: Optional[ChildPreferencesModel] = None
    child_name: Optional[str] = Field(default=None, max_length=100)
    child_age: int = Field(
        default=STORY_DEFAULTS["child_age"],
        ge=STORY_DEFAULTS["min_child_age"],
        le=STORY_DEFAULTS["max_child_age"],
        description="Child's age in years",
    )
    language: str = Field(
        default=STORY_DEFAULTS["language"],
        description="Language code of the story",
        examples=["en", "ar", "he"],
    )

    @field_validator("language")
    @classmethod
    def language_must_be_supported(cls, value: str) -> str:
        if not is_supported_language(value):
            raise ValueError(f"Unsupported language code: {value}")
        return value
