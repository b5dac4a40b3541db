from .guided_story import GuidedStorySignature

__all__ = [
    "GuidedStorySignature",
]
