"""
Text segmentation for animated effects.

Splits a string into independently animatable units (grapheme clusters,
word/whitespace runs, or lines). Every mode is lossless: joining the
segments gives back the original string.
"""

from enum import Enum
from typing import List

import regex

# Extended grapheme cluster (user-perceived character)
_GRAPHEME_RE = regex.compile(r"\X")


class AnimateBy(Enum):
    """How a string is cut into animated segments."""
    GRAPHEMES = "graphemes"
    WORDS = "words"
    LINES = "lines"


def graphemes(text: str) -> List[str]:
    """Return the extended grapheme clusters of text, in order."""
    return _GRAPHEME_RE.findall(text)


def is_blank(segment: str) -> bool:
    """True for segments made only of whitespace."""
    return segment.strip() == ""


def _split_words_preserve_spaces(text: str) -> List[str]:
    out: List[str] = []
    buf: List[str] = []
    last_was_space = None

    for cluster in graphemes(text):
        is_space = is_blank(cluster)
        if last_was_space is not None and is_space != last_was_space:
            out.append("".join(buf))
            buf = []
        buf.append(cluster)
        last_was_space = is_space

    if buf:
        out.append("".join(buf))
    return out


def split(text: str, mode: AnimateBy) -> List[str]:
    """
    Split text into segments.

    Args:
        text: The source string.
        mode: Segmentation mode.

    Returns:
        Graphemes: one entry per grapheme cluster.
        Words: alternating word / whitespace runs.
        Lines: the ``\\n``-delimited pieces, empty lines preserved.
    """
    if mode is AnimateBy.GRAPHEMES:
        return graphemes(text)
    if mode is AnimateBy.WORDS:
        return _split_words_preserve_spaces(text)
    if mode is AnimateBy.LINES:
        return text.split("\n")
    raise ValueError(f"Unknown segmentation mode: {mode!r}")


class SegmentedText:
    """Namespaced access to :func:`split`."""

    split = staticmethod(split)
    graphemes = staticmethod(graphemes)
