"""Storyverse - personalized children's books that respect each family's values."""

__version__ = "0.1.0"
