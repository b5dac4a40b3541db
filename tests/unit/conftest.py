"""Pytest fixtures for unit tests."""

import pytest

from dotenv import find_dotenv, load_dotenv
from fastapi.testclient import TestClient

# Load environment variables (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

from storyverse.api.main import app  # noqa: E402
from storyverse.core.types import ChildPreferences, FamilyPreferences  # noqa: E402


@pytest.fixture
def client():
    """TestClient for the guidelines API."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def empty_family():
    """Family that has not filled in any preferences."""
    return FamilyPreferences()


@pytest.fixture
def strict_muslim_family():
    """Strictly observant Muslim family with halal diet and modest dress."""
    return FamilyPreferences(
        cultural_background=["middle-eastern"],
        religious_tradition="muslim",
        religious_observance_level="strict",
        dietary_preferences=["halal"],
        modesty_level="very-modest",
    )


@pytest.fixture
def child_with_overrides():
    """Child whose own settings replace the family's magic/conflict choices."""
    return ChildPreferences(
        use_family_defaults=False,
        allow_magic_fantasy=False,
        conflict_level="none",
    )
