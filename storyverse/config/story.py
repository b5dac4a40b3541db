"""
Story request defaults for Storyverse.

Picture books target early readers; requests outside the age bounds are
rejected at the API layer.
"""

STORY_DEFAULTS = {
    "child_age": 5,
    "language": "en",
    "min_child_age": 0,
    "max_child_age": 18,
    "page_count": 10,  # Pages per generated book
}
