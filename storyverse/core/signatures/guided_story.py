"""
DSPy Signature for writing a personalized story under family guidelines.

The compiled content guidelines and tone are passed through verbatim;
the model is told to treat them as hard constraints.
"""

import dspy


class GuidedStorySignature(dspy.Signature):
    """
    Write a personalized children's picture book starring the child.

    The child is the hero. Weave their interests into the plot naturally.

    FAMILY GUIDELINES ARE HARD CONSTRAINTS:
    - Never include anything listed under ELEMENTS TO EXCLUDE
    - Work in elements listed under ELEMENTS TO INCLUDE where they fit
    - Follow every FAMILY CONTENT GUIDELINES note
    - Keep the requested tone throughout

    READ-ALOUD QUALITY:
    - Short sentences sized to the child's age
    - Natural rhythm when spoken
    - Write entirely in the requested language

    OUTPUT FORMAT:
    TITLE: [Your title]

    Page 1: [text]
    [Illustration: what to draw]

    Page 2: [text]
    [Illustration: what to draw]

    ... through the requested page count
    """

    story_request: str = dspy.InputField(
        desc="Theme, page count, and any custom elements the family asked for"
    )

    child_profile: str = dspy.InputField(
        desc="The child's name, age, and interests"
    )

    content_guidelines: str = dspy.InputField(
        desc="Family content guidelines: notes, elements to include, elements to exclude"
    )

    tone: str = dspy.InputField(
        desc="Overall tone the story must keep"
    )

    language: str = dspy.InputField(
        desc="Language to write the story in"
    )

    story: str = dspy.OutputField(
        desc="Title line, then 'Page N:' sections each followed by an [Illustration: ...] note"
    )
