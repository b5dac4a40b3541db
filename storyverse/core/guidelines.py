"""
Content guidelines compiler.

Turns a family's declared preferences (plus optional per-child overrides)
into the guidance embedded in story and illustration prompts.

Rules are applied in a fixed order and each one only appends to the
excluded/included element lists or to the free-text notes. Nothing here
raises: unrecognised values fall through without triggering a rule, and
every output field always carries at least a placeholder line.
"""

from typing import Any, Optional, Union

from .guideline_rules import (
    CONFLICT_TERMS,
    CULTURAL_ELEMENTS,
    DANCE_TERMS,
    DEFAULT_TONE,
    DIETARY_RULES,
    MAGIC_TERMS,
    MODESTY_GUIDELINES,
    MUSIC_TERMS,
    MYTHOLOGY_TERMS,
    PERIL_TERMS,
    RELIGIOUS_GUIDELINES,
    SUPERNATURAL_TERMS,
    SUPPORTED_LANGUAGES,
    TALKING_ANIMAL_TERMS,
    TONE_GUIDELINES,
    is_image_sensitive,
)
from .types import (
    ChildPreferences,
    ConflictLevel,
    ContentGuidelines,
    FamilyPreferences,
    GenderRepresentation,
    ModestyLevel,
    MythologyPolicy,
    ObservanceLevel,
)

FamilyInput = Union[FamilyPreferences, dict, None]
ChildInput = Union[ChildPreferences, dict, None]

NO_NOTES_PLACEHOLDER = "Standard content guidelines apply"
NO_INCLUDES_PLACEHOLDER = "No specific requirements"
NO_EXCLUDES_PLACEHOLDER = "Standard exclusions only"
NO_IMAGE_EXCLUDES_PLACEHOLDER = "Standard safety guidelines"


def _lookup(table: dict, key: Any):
    """Table lookup that treats non-string keys as a miss."""
    if not isinstance(key, str):
        return None
    return table.get(key)


def _strings(values: Any) -> list[str]:
    """Keep only usable string entries from a list-valued preference."""
    if isinstance(values, str):
        return [values] if values else []
    if not values:
        return []
    try:
        return [v for v in values if isinstance(v, str) and v]
    except TypeError:
        return []


def _allowed(value: Any) -> bool:
    """Switches default to allowed; only an explicit False turns them off."""
    return value is not False


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _bullets(items: list[str], placeholder: str) -> str:
    if not items:
        return f"- {placeholder}"
    return "\n".join(f"- {item}" for item in items)


def _as_family(prefs: FamilyInput) -> FamilyPreferences:
    if isinstance(prefs, FamilyPreferences):
        return prefs
    return FamilyPreferences.from_row(prefs)


def _as_child(prefs: ChildInput) -> Optional[ChildPreferences]:
    if prefs is None or isinstance(prefs, ChildPreferences):
        return prefs
    if isinstance(prefs, dict):
        return ChildPreferences.from_row(prefs)
    return None


def _effective(family_value: Any, child: Optional[ChildPreferences], child_value: Any) -> Any:
    """Child value wins only when the child opts out of family defaults and sets one."""
    if child is not None and child.overrides_family and child_value is not None:
        return child_value
    return family_value


def compile_content_guidelines(
    family_prefs: FamilyInput,
    child_prefs: ChildInput = None,
    child_age: Optional[int] = None,
    language: str = "en",
    child_name: Optional[str] = None,
) -> ContentGuidelines:
    """
    Compile family and child preferences into content guidelines.

    Args:
        family_prefs: Family preferences (dataclass, stored row dict, or None)
        child_prefs: Optional per-child overrides
        child_age: Child's age in years. Age-specific pacing is handled by
            the story prompt, so it does not change the compiled rules.
        language: Language code the story will be written in. Like
            child_age, it travels with the request but does not select rules.
        child_name: Used to attribute child-specific sensitivities

    Returns:
        ContentGuidelines with every field populated
    """
    family = _as_family(family_prefs)
    child = _as_child(child_prefs)

    excluded: list[str] = []
    included: list[str] = []
    story_notes: list[str] = []
    image_notes: list[str] = []

    # 1. Religious tradition (observant and strict only)
    level = family.religious_observance_level or ObservanceLevel.SECULAR.value
    if family.religious_tradition and family.religious_tradition != "none":
        if level in (ObservanceLevel.OBSERVANT.value, ObservanceLevel.STRICT.value):
            rule = _lookup(_lookup(RELIGIOUS_GUIDELINES, family.religious_tradition) or {}, level)
            if rule:
                included.extend(rule.include)
                excluded.extend(rule.exclude)
                story_notes.append(rule.notes)

    # 2. Cultural background
    for culture in _dedupe(_strings(family.cultural_background)):
        elements = _lookup(CULTURAL_ELEMENTS, culture)
        if elements:
            included.extend(elements.include)
            story_notes.append(f"Cultural considerations: {', '.join(elements.considerations)}")

    # 3. Magic and fantasy
    allow_magic = _effective(
        family.allow_magic_fantasy, child, child.allow_magic_fantasy if child else None
    )
    if not _allowed(allow_magic):
        excluded.extend(MAGIC_TERMS)
        story_notes.append("No magical or fantasy elements - keep stories grounded in reality")

    # 4. Mythology
    if family.allow_mythology == MythologyPolicy.NONE.value:
        excluded.extend(MYTHOLOGY_TERMS)
    elif family.allow_mythology == MythologyPolicy.OWN_CULTURE.value:
        story_notes.append("Only include mythology from the family's own cultural background")

    # 5. Talking animals
    if not _allowed(family.allow_talking_animals):
        excluded.extend(TALKING_ANIMAL_TERMS)
        story_notes.append("Animals should behave realistically, not talk or act human")

    # 6. Supernatural
    if not _allowed(family.allow_supernatural_elements):
        excluded.extend(SUPERNATURAL_TERMS)

    # 7. Dietary preferences
    for diet in _dedupe(_strings(family.dietary_preferences)):
        rule = _lookup(DIETARY_RULES, diet)
        if rule:
            excluded.extend(rule.exclude)
            story_notes.append(rule.notes)

    # 8. Holidays
    excluded.extend(f"{holiday} themes" for holiday in _strings(family.excluded_holidays))
    included.extend(f"{holiday} celebrations" for holiday in _strings(family.specific_holidays))

    # 9. Family structure and gender representation
    if family.family_structure == "traditional":
        story_notes.append("Show traditional two-parent family structures")
    elif family.family_structure == "custom" and family.custom_family_notes:
        story_notes.append(f"Family representation: {family.custom_family_notes}")

    if family.gender_representation == GenderRepresentation.TRADITIONAL.value:
        story_notes.append("Traditional gender roles in character depiction")
    elif family.gender_representation == GenderRepresentation.NEUTRAL.value:
        story_notes.append("Gender-neutral language and roles where possible")

    # 10. Conflict
    conflict_level = _effective(
        family.conflict_level, child, child.conflict_level if child else None
    )
    if conflict_level == ConflictLevel.NONE.value:
        excluded.extend(CONFLICT_TERMS)
        story_notes.append("No conflict - purely positive, harmonious stories")
    elif conflict_level == ConflictLevel.MILD.value:
        story_notes.append("Only mild, age-appropriate conflict resolved peacefully")

    # 11. Peril
    if not _allowed(family.allow_mild_peril):
        excluded.extend(PERIL_TERMS)

    # 12. Music and dance
    if not _allowed(family.allow_music_themes):
        excluded.extend(MUSIC_TERMS)
    if not _allowed(family.allow_dance_themes):
        excluded.extend(DANCE_TERMS)

    # 13. Modesty (always applies to images)
    image_notes.append(f"Dress code: {MODESTY_GUIDELINES[get_modesty_level(family)]}")

    # 14. Educational focus
    if family.include_educational_content:
        included.extend(f"{focus} learning elements" for focus in _strings(family.educational_focus))

    if child is not None:
        # 15. Child overlay applies even when using family defaults
        avoid = _strings(child.avoid_themes)
        if avoid:
            excluded.extend(avoid)
            who = f" for {child_name}" if child_name else ""
            story_notes.append(f"Child-specific sensitivities{who}: avoid {', '.join(avoid)}")
        included.extend(_strings(child.favorite_themes))

        # 16. Accessibility
        if child.needs_simple_language:
            story_notes.append("Use simpler vocabulary and shorter sentences for accessibility")
        if child.needs_high_contrast_images:
            image_notes.append("Use high contrast colors, clear outlines, avoid busy backgrounds")

    # 17. Free-form family additions
    excluded.extend(_strings(family.excluded_themes))
    excluded.extend(_strings(family.excluded_elements))
    if isinstance(family.custom_guidelines, str) and family.custom_guidelines.strip():
        story_notes.append(f"Custom family guidelines: {family.custom_guidelines.strip()}")

    excluded = _dedupe(excluded)
    included = _dedupe(included)
    image_excluded = [e for e in excluded if is_image_sensitive(e)]

    story_guidelines = "\n\n".join([
        f"FAMILY CONTENT GUIDELINES:\n{_bullets(story_notes, NO_NOTES_PLACEHOLDER)}",
        f"ELEMENTS TO INCLUDE:\n{_bullets(included, NO_INCLUDES_PLACEHOLDER)}",
        f"ELEMENTS TO EXCLUDE:\n{_bullets(excluded, NO_EXCLUDES_PLACEHOLDER)}",
    ])

    image_guidelines = "\n\n".join([
        f"IMAGE CONTENT GUIDELINES:\n{_bullets(image_notes, NO_NOTES_PLACEHOLDER)}",
        f"MUST NOT INCLUDE:\n{_bullets(image_excluded, NO_IMAGE_EXCLUDES_PLACEHOLDER)}",
    ])

    tone_guidelines = _lookup(TONE_GUIDELINES, family.religious_observance_level) or DEFAULT_TONE

    return ContentGuidelines(
        story_guidelines=story_guidelines,
        image_guidelines=image_guidelines,
        excluded_elements=excluded,
        included_elements=included,
        tone_guidelines=tone_guidelines,
    )


# =============================================================================
# Quick checks for common restrictions
# =============================================================================


def can_include_magic(prefs: FamilyInput) -> bool:
    return _allowed(_as_family(prefs).allow_magic_fantasy)


def can_include_talking_animals(prefs: FamilyInput) -> bool:
    return _allowed(_as_family(prefs).allow_talking_animals)


def get_modesty_level(prefs: FamilyInput) -> str:
    """Modesty level for image prompts, falling back to standard."""
    level = _as_family(prefs).modesty_level
    if _lookup(MODESTY_GUIDELINES, level) is None:
        return ModestyLevel.STANDARD.value
    return level


def get_dietary_restrictions(prefs: FamilyInput) -> list[str]:
    return _strings(_as_family(prefs).dietary_preferences)


def is_supported_language(code: Any) -> bool:
    return _lookup(SUPPORTED_LANGUAGES, code) is not None
