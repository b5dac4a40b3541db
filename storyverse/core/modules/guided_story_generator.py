"""
DSPy Module for writing a story under a family's content guidelines.

Assembles the story request from the child's profile and the compiled
ContentGuidelines, hands it to the text model, and parses the
"TITLE:" / "Page N:" output into a GuidedStory.
"""

import logging
import re
from typing import Optional

import dspy

from storyverse.config import STORY_DEFAULTS, llm_retry
from ..guideline_rules import SUPPORTED_LANGUAGES
from ..guidelines import compile_content_guidelines
from ..signatures.guided_story import GuidedStorySignature
from ..types import (
    ChildPreferences,
    ContentGuidelines,
    FamilyPreferences,
    GuidedStory,
    StoryPage,
    build_illustration_prompt,
)

logger = logging.getLogger(__name__)


class GuidedStoryGenerator(dspy.Module):
    """
    Write a personalized story that respects family content guidelines.

    Args:
        page_count: Number of pages to ask the model for
        lm: Optional explicit LM to use. If provided, bypasses global
            dspy.configure() state.
    """

    def __init__(self, page_count: int = STORY_DEFAULTS["page_count"], lm: dspy.LM = None):
        super().__init__()
        self.page_count = page_count
        self.generate = dspy.ChainOfThought(GuidedStorySignature)
        self._lm = lm

    def build_inputs(
        self,
        guidelines: ContentGuidelines,
        child_name: str,
        child_age: int,
        theme: str,
        interests: Optional[list[str]] = None,
        custom_elements: Optional[str] = None,
        language: str = STORY_DEFAULTS["language"],
    ) -> dict:
        """Build signature inputs. Guideline text is embedded verbatim."""
        request_lines = [f"Theme: {theme}", f"Pages: {self.page_count}"]
        if custom_elements:
            request_lines.append(f"Custom elements: {custom_elements}")

        profile_lines = [f"Name: {child_name}", f"Age: {child_age}"]
        if interests:
            profile_lines.append(f"Interests: {', '.join(interests)}")

        return {
            "story_request": "\n".join(request_lines),
            "child_profile": "\n".join(profile_lines),
            "content_guidelines": guidelines.story_guidelines,
            "tone": guidelines.tone_guidelines,
            "language": SUPPORTED_LANGUAGES.get(language, SUPPORTED_LANGUAGES["en"]),
        }

    def _parse_story_output(self, raw_output: str) -> tuple[str, list[StoryPage]]:
        """Parse raw model output into a title and ordered pages."""
        title_match = re.search(r"TITLE:\s*(.+?)(?:\n|$)", raw_output, re.IGNORECASE)
        title = title_match.group(1).strip() if title_match else "Untitled Story"

        pages = []
        for part in re.split(r"(?=Page\s+\d+:)", raw_output, flags=re.IGNORECASE):
            num_match = re.match(r"Page\s+(\d+):\s*(.*)", part.strip(), re.DOTALL | re.IGNORECASE)
            if not num_match:
                continue

            content = num_match.group(2).strip()
            scene = ""
            illust_match = re.search(r"\[Illustration:\s*(.+?)\]", content, re.DOTALL)
            if illust_match:
                scene = illust_match.group(1).strip()
                content = content[:illust_match.start()] + content[illust_match.end():]

            pages.append(StoryPage(
                page_number=int(num_match.group(1)),
                text=content.strip(),
                scene=scene,
            ))

        pages.sort(key=lambda p: p.page_number)
        return title, pages

    def forward(
        self,
        family_prefs: Optional[FamilyPreferences],
        child_name: str,
        child_age: int = STORY_DEFAULTS["child_age"],
        theme: str = "adventure",
        child_prefs: Optional[ChildPreferences] = None,
        interests: Optional[list[str]] = None,
        custom_elements: Optional[str] = None,
        language: str = STORY_DEFAULTS["language"],
    ) -> GuidedStory:
        """
        Compile guidelines for the child and write the story.

        Returns:
            GuidedStory carrying the guidelines it was written under
        """
        guidelines = compile_content_guidelines(
            family_prefs, child_prefs, child_age, language, child_name=child_name
        )
        inputs = self.build_inputs(
            guidelines,
            child_name=child_name,
            child_age=child_age,
            theme=theme,
            interests=interests,
            custom_elements=custom_elements,
            language=language,
        )

        if self._lm is not None:
            with dspy.context(lm=self._lm):
                result = llm_retry(self.generate)(**inputs)
        else:
            result = llm_retry(self.generate)(**inputs)

        title, pages = self._parse_story_output(result.story)
        if len(pages) != self.page_count:
            logger.warning("Expected %d pages, got %d", self.page_count, len(pages))

        # Every page image carries the family dress code and exclusions
        for page in pages:
            page.illustration_prompt = build_illustration_prompt(page.scene, guidelines)

        return GuidedStory(title=title, pages=pages, guidelines=guidelines)
