"""Content guideline endpoints."""

import time

from fastapi import APIRouter

from storyverse.core.guideline_rules import (
    CULTURAL_ELEMENTS,
    DIETARY_RULES,
    RELIGIOUS_TRADITIONS,
    SUPPORTED_LANGUAGES,
)
from storyverse.core.guidelines import (
    can_include_magic,
    can_include_talking_animals,
    compile_content_guidelines,
    get_dietary_restrictions,
    get_modesty_level,
)
from storyverse.core.types import (
    ConflictLevel,
    GenderRepresentation,
    ModestyLevel,
    MythologyPolicy,
    ObservanceLevel,
)
from ..logging import guidelines_logger
from ..models.requests import CompileGuidelinesRequest, FamilyPreferencesModel
from ..models.responses import (
    ContentGuidelinesResponse,
    GuidelineChecksResponse,
    GuidelineOptionsResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=ContentGuidelinesResponse,
    summary="Compile content guidelines",
    description="Compile family and child preferences into story, image and tone guidelines.",
)
async def compile_guidelines(request: CompileGuidelinesRequest):
    """Compile guidelines for a single story request."""
    started = time.perf_counter()
    guidelines = compile_content_guidelines(
        request.family_preferences.to_domain(),
        request.child_preferences.to_domain() if request.child_preferences else None,
        request.child_age,
        request.language,
        child_name=request.child_name,
    )

    guidelines_logger.compiled(
        language=request.language,
        child_age=request.child_age,
        excluded_count=len(guidelines.excluded_elements),
        included_count=len(guidelines.included_elements),
        duration=time.perf_counter() - started,
    )

    return ContentGuidelinesResponse.from_guidelines(guidelines)


@router.post(
    "/checks",
    response_model=GuidelineChecksResponse,
    summary="Quick restriction checks",
    description="Answer the common yes/no questions about a family's preferences.",
)
async def check_preferences(preferences: FamilyPreferencesModel):
    """Run the quick restriction checks."""
    prefs = preferences.to_domain()
    return GuidelineChecksResponse(
        can_include_magic=can_include_magic(prefs),
        can_include_talking_animals=can_include_talking_animals(prefs),
        modesty_level=get_modesty_level(prefs),
        dietary_restrictions=get_dietary_restrictions(prefs),
    )


@router.get(
    "/options",
    response_model=GuidelineOptionsResponse,
    summary="List recognised preference values",
)
async def list_options():
    """List the values that trigger guideline rules."""
    return GuidelineOptionsResponse(
        religious_traditions=RELIGIOUS_TRADITIONS,
        observance_levels=[level.value for level in ObservanceLevel],
        cultural_backgrounds=list(CULTURAL_ELEMENTS),
        dietary_preferences=list(DIETARY_RULES),
        modesty_levels=[level.value for level in ModestyLevel],
        mythology_policies=[policy.value for policy in MythologyPolicy],
        conflict_levels=[level.value for level in ConflictLevel],
        gender_representations=[rep.value for rep in GenderRepresentation],
        languages=SUPPORTED_LANGUAGES,
    )
