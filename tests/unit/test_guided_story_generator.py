"""Unit tests for GuidedStoryGenerator."""

import pytest
from unittest.mock import MagicMock, patch

from storyverse.core.guideline_rules import MODESTY_GUIDELINES
from storyverse.core.guidelines import compile_content_guidelines
from storyverse.core.modules.guided_story_generator import GuidedStoryGenerator
from storyverse.core.types import ChildPreferences, FamilyPreferences


SAMPLE_OUTPUT = """TITLE: Amira's Lantern Walk

Page 1: Amira held her lantern high.
[Illustration: A girl in a long blue dress holding a paper lantern at dusk]

Page 3: Home again, Amira smiled.
[Illustration: Amira hugging her grandmother in a warm kitchen]

Page 2: The street glowed gold.
[Illustration: A street lined with lanterns]
"""


@pytest.fixture
def generator():
    return GuidedStoryGenerator(page_count=3)


class TestBuildInputs:

    def test_embeds_guidelines_verbatim(self, generator):
        guidelines = compile_content_guidelines(
            FamilyPreferences(religious_tradition="muslim", religious_observance_level="observant")
        )

        inputs = generator.build_inputs(
            guidelines,
            child_name="Amira",
            child_age=6,
            theme="lantern festival",
            interests=["stars", "cats"],
            language="ar",
        )

        assert inputs["content_guidelines"] == guidelines.story_guidelines
        assert inputs["tone"] == guidelines.tone_guidelines
        assert inputs["language"] == "Arabic"
        assert "Name: Amira" in inputs["child_profile"]
        assert "Interests: stars, cats" in inputs["child_profile"]
        assert "Pages: 3" in inputs["story_request"]

    def test_unknown_language_falls_back_to_english(self, generator):
        inputs = generator.build_inputs(
            compile_content_guidelines({}), child_name="Leo", child_age=4, theme="space", language="zz"
        )

        assert inputs["language"] == "English"

    def test_custom_elements_included(self, generator):
        inputs = generator.build_inputs(
            compile_content_guidelines({}),
            child_name="Leo",
            child_age=4,
            theme="space",
            custom_elements="his dog Biscuit",
        )

        assert "Custom elements: his dog Biscuit" in inputs["story_request"]


class TestParseStoryOutput:

    def test_parses_title_and_sorted_pages(self, generator):
        title, pages = generator._parse_story_output(SAMPLE_OUTPUT)

        assert title == "Amira's Lantern Walk"
        assert [p.page_number for p in pages] == [1, 2, 3]
        assert pages[0].text == "Amira held her lantern high."
        assert pages[0].scene.startswith("A girl in a long blue dress")
        assert pages[0].illustration_prompt == ""
        assert "[Illustration" not in pages[1].text

    def test_missing_title(self, generator):
        title, pages = generator._parse_story_output("Page 1: Hello.")

        assert title == "Untitled Story"
        assert len(pages) == 1


class TestForward:

    def test_forward_compiles_guidelines_and_parses(self, generator):
        family = FamilyPreferences(dietary_preferences=["halal"], modesty_level="modest")
        child = ChildPreferences(avoid_themes=["thunder"])

        with patch.object(generator, "generate") as mock_generate:
            mock_generate.return_value = MagicMock(story=SAMPLE_OUTPUT)

            story = generator.forward(
                family,
                child_name="Amira",
                child_age=6,
                theme="lantern festival",
                child_prefs=child,
            )

        kwargs = mock_generate.call_args.kwargs
        assert "- pork" in kwargs["content_guidelines"]
        assert "Child-specific sensitivities for Amira: avoid thunder" in kwargs["content_guidelines"]
        assert story.title == "Amira's Lantern Walk"
        assert story.page_count == 3
        assert "thunder" in story.guidelines.excluded_elements

    def test_forward_puts_family_image_rules_on_every_page(self, generator):
        family = FamilyPreferences(modesty_level="very-modest", dietary_preferences=["halal"])

        with patch.object(generator, "generate") as mock_generate:
            mock_generate.return_value = MagicMock(story=SAMPLE_OUTPUT)

            story = generator.forward(family, child_name="Amira")

        for page in story.pages:
            prompt = page.illustration_prompt
            assert page.scene in prompt
            assert story.guidelines.image_guidelines in prompt
            assert f"Dress code: {MODESTY_GUIDELINES['very-modest']}" in prompt
            assert "MUST NOT INCLUDE:" in prompt
            assert "- pork" in prompt

    def test_forward_retries_transient_errors(self, generator):
        with patch.object(generator, "generate") as mock_generate, \
                patch("tenacity.nap.time.sleep"):
            mock_generate.side_effect = [ConnectionError("reset"), MagicMock(story=SAMPLE_OUTPUT)]

            story = generator.forward(None, child_name="Amira")

        assert mock_generate.call_count == 2
        assert story.page_count == 3

    def test_forward_does_not_retry_other_errors(self, generator):
        with patch.object(generator, "generate") as mock_generate:
            mock_generate.side_effect = ValueError("bad output")

            with pytest.raises(ValueError):
                generator.forward(None, child_name="Amira")

        assert mock_generate.call_count == 1
