"""
Centralized domain types for Storyverse content guidelines.

Preference records mirror the family/child preference rows stored by the
web app. Guidelines are derived per story request and never stored.
"""

from dataclasses import dataclass, field, fields, asdict
from enum import Enum
from typing import Any, Optional


# =============================================================================
# Vocabulary
# =============================================================================


class ObservanceLevel(str, Enum):
    """How strictly a family observes its religious tradition."""

    SECULAR = "secular"
    CULTURAL = "cultural"
    OBSERVANT = "observant"
    STRICT = "strict"


class MythologyPolicy(str, Enum):
    ALL = "all"
    OWN_CULTURE = "own-culture"
    NONE = "none"


class ConflictLevel(str, Enum):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"


class ModestyLevel(str, Enum):
    STANDARD = "standard"
    MODEST = "modest"
    VERY_MODEST = "very-modest"


class GenderRepresentation(str, Enum):
    BALANCED = "balanced"
    TRADITIONAL = "traditional"
    NEUTRAL = "neutral"


# =============================================================================
# Row coercion
# =============================================================================


def _as_list(value: Any) -> list[str]:
    """Normalize a stored list column (may be NULL or a bare string)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    try:
        return [str(item) for item in value if item is not None]
    except TypeError:
        return []


def _coerce_row(cls, row: Optional[dict]) -> dict:
    """Pick known columns from a row, dropping NULLs so defaults apply."""
    if not isinstance(row, dict):
        return {}
    kwargs = {}
    for f in fields(cls):
        if f.name not in row:
            continue
        value = row[f.name]
        if f.default_factory is list:
            kwargs[f.name] = _as_list(value)
        elif value is not None:
            kwargs[f.name] = value
    return kwargs


# =============================================================================
# Preference Types
# =============================================================================


@dataclass
class FamilyPreferences:
    """Family-wide content preferences.

    Every field is optional. Enum-like fields hold plain strings so that
    values the app doesn't recognise yet simply match no rule.
    """

    cultural_background: list[str] = field(default_factory=list)
    religious_tradition: Optional[str] = None
    religious_observance_level: Optional[str] = None
    dietary_preferences: list[str] = field(default_factory=list)
    celebrate_religious_holidays: Optional[bool] = None
    celebrate_secular_holidays: Optional[bool] = None
    specific_holidays: list[str] = field(default_factory=list)
    excluded_holidays: list[str] = field(default_factory=list)
    allow_magic_fantasy: Optional[bool] = None
    allow_mythology: Optional[str] = None
    allow_talking_animals: Optional[bool] = None
    allow_supernatural_elements: Optional[bool] = None
    family_structure: Optional[str] = None
    custom_family_notes: Optional[str] = None
    gender_representation: Optional[str] = None
    conflict_level: Optional[str] = None
    allow_mild_peril: Optional[bool] = None
    include_educational_content: Optional[bool] = None
    educational_focus: list[str] = field(default_factory=list)
    modesty_level: Optional[str] = None
    allow_music_themes: Optional[bool] = None
    allow_dance_themes: Optional[bool] = None
    excluded_themes: list[str] = field(default_factory=list)
    excluded_elements: list[str] = field(default_factory=list)
    custom_guidelines: Optional[str] = None

    @classmethod
    def from_row(cls, row: Optional[dict]) -> "FamilyPreferences":
        """Build from a database row or JSON object. Unknown keys are ignored."""
        return cls(**_coerce_row(cls, row))


@dataclass
class ChildPreferences:
    """Per-child overrides layered on top of the family preferences."""

    use_family_defaults: bool = True
    allow_magic_fantasy: Optional[bool] = None
    allow_scary_elements: Optional[bool] = None
    conflict_level: Optional[str] = None
    avoid_themes: list[str] = field(default_factory=list)
    favorite_themes: list[str] = field(default_factory=list)
    needs_simple_language: Optional[bool] = None
    needs_high_contrast_images: Optional[bool] = None

    @classmethod
    def from_row(cls, row: Optional[dict]) -> "ChildPreferences":
        """Build from a database row or JSON object. Unknown keys are ignored."""
        kwargs = _coerce_row(cls, row)
        if "use_family_defaults" in kwargs:
            kwargs["use_family_defaults"] = bool(kwargs["use_family_defaults"])
        return cls(**kwargs)

    @property
    def overrides_family(self) -> bool:
        """True when child-level magic/conflict values take precedence."""
        return self.use_family_defaults is False


# =============================================================================
# Guideline Types
# =============================================================================


@dataclass
class GuidelineRule:
    """One table entry: elements to include/exclude plus a narrative note."""

    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    notes: str = ""


@dataclass
class CulturalElements:
    """Elements and sensitivities associated with a cultural region."""

    include: list[str]
    considerations: list[str]


@dataclass
class ContentGuidelines:
    """Compiled guidance handed to the story and image generators."""

    story_guidelines: str
    image_guidelines: str
    excluded_elements: list[str]
    included_elements: list[str]
    tone_guidelines: str

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Story Types
# =============================================================================


@dataclass
class StoryPage:
    """A single page of a generated book."""

    page_number: int
    text: str
    scene: str = ""  # Scene description from the [Illustration: ...] note
    illustration_prompt: str = ""  # Full image prompt with family guidelines

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    def __str__(self) -> str:
        return f"Page {self.page_number}: {self.text}"


@dataclass
class GuidedStory:
    """A story written under a family's content guidelines."""

    title: str
    pages: list[StoryPage]
    guidelines: Optional[ContentGuidelines] = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def word_count(self) -> int:
        return sum(page.word_count for page in self.pages)

    @property
    def full_text(self) -> str:
        return "\n\n".join(page.text for page in self.pages)


DEFAULT_STYLE_PREFIX = "Warm storybook illustration for a children's picture book"


def build_illustration_prompt(
    scene: str,
    guidelines: ContentGuidelines,
    style_prefix: str = DEFAULT_STYLE_PREFIX,
) -> str:
    """Compose an image prompt with the family's image guidelines embedded verbatim."""
    return f"""{style_prefix}.

Scene: {scene}

{guidelines.image_guidelines}

No text, letters, or words in the image."""
