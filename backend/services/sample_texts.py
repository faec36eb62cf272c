"""Example inputs for the Text Diff Checker"""

from __future__ import annotations

from models.diff import SampleTexts

SAMPLE_ORIGINAL = """The quick brown fox jumps over the lazy dog.
This is the original text.
Some content that will be changed.
Final line of original text."""

SAMPLE_MODIFIED = """The quick brown fox jumps over the lazy dog.
This is the modified text.
Some content that has been updated.
Additional line added here.
Final line of original text."""


def get_sample_texts() -> SampleTexts:
    return SampleTexts(original_text=SAMPLE_ORIGINAL, modified_text=SAMPLE_MODIFIED)
