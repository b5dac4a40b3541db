from .guided_story_generator import GuidedStoryGenerator

__all__ = [
    "GuidedStoryGenerator",
]
