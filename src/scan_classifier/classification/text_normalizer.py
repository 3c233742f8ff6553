"""
Text normalization for the bag-of-words classifier.

Turns raw recognized text into the token form the vocabulary was built with:
lowercase, whitespace-split, ASCII letters and digits only.
"""

import re

# ASCII whitespace only; no-break and other Unicode spaces do not split tokens
WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
NON_TOKEN_CHAR_RE = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> list[str]:
    """
    Normalize text into a sequence of lowercase tokens.

    Splitting collapses runs of ASCII whitespace, but a leading or trailing run
    still produces one empty segment at that end. Segments that end up empty
    after stripping are kept; they simply never match the vocabulary.

    Args:
        text: Arbitrary Unicode text (OCR output, possibly multi-line)

    Returns:
        Tokens in text order. Empty list for an empty string.

    Examples:
        >>> normalize("Hello, World!")
        ['hello', 'world']
        >>> normalize(" a1 b2")
        ['', 'a1', 'b2']
    """
    if not text:
        return []

    segments = WHITESPACE_RE.split(text.lower())
    return [NON_TOKEN_CHAR_RE.sub("", segment) for segment in segments]
