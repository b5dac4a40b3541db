# Storyverse - Core Domain

# Re-export types for convenient access
from .types import (
    FamilyPreferences,
    ChildPreferences,
    ContentGuidelines,
    ObservanceLevel,
    MythologyPolicy,
    ConflictLevel,
    ModestyLevel,
    GenderRepresentation,
)
from .guidelines import (
    compile_content_guidelines,
    can_include_magic,
    can_include_talking_animals,
    get_modesty_level,
    get_dietary_restrictions,
)

__all__ = [
    "FamilyPreferences",
    "ChildPreferences",
    "ContentGuidelines",
    "ObservanceLevel",
    "MythologyPolicy",
    "ConflictLevel",
    "ModestyLevel",
    "GenderRepresentation",
    "compile_content_guidelines",
    "can_include_magic",
    "can_include_talking_animals",
    "get_modesty_level",
    "get_dietary_restrictions",
]
