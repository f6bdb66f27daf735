"""
Generic Pattern Matching for Transaction Classification.

Provides reusable keyword, exact-label and regex matching over the pattern
tables in ``baseline_engine.patterns``.
"""

import re
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple


@lru_cache(maxsize=None)
def _compile(pattern: str, flags: int) -> "re.Pattern":
    return re.compile(pattern, flags)


def match_keywords(
    text: str,
    keywords: Iterable[str]
) -> Optional[Tuple[str, float, str]]:
    """
    Match text against a list of keywords (substring match).

    Args:
        text: Normalized text to match
        keywords: Keyword strings, in the same case as ``text``

    Returns:
        Tuple of (matched_keyword, confidence, match_method) or None

    Example:
        >>> match_keywords("online transfer to savings", ["xfer", "transfer"])
        ('transfer', 1.0, 'keyword')
    """
    if not text:
        return None

    for keyword in keywords:
        if keyword in text:
            return (keyword, 1.0, "keyword")

    return None


def match_exact(
    text: str,
    labels: Iterable[str]
) -> Optional[Tuple[str, float, str]]:
    """
    Match text against a set of labels (whole-string equality).

    Returns:
        Tuple of (matched_label, confidence, match_method) or None
    """
    if not text:
        return None

    for label in labels:
        if text == label:
            return (label, 1.0, "category")

    return None


def match_regex_patterns(
    text: str,
    patterns: List[str],
    full_match: bool = True,
    flags: int = re.IGNORECASE | re.DOTALL
) -> Optional[Tuple[str, float, str]]:
    """
    Match text against a list of regex patterns.

    Args:
        text: Text to match
        patterns: List of regex pattern strings
        full_match: Require the pattern to match the whole string
        flags: Regex flags used when compiling each pattern

    Returns:
        Tuple of (matched_pattern, confidence, match_method) or None
    """
    if text is None:
        return None

    for pattern in patterns:
        compiled = _compile(pattern, flags)
        matched = compiled.fullmatch(text) if full_match else compiled.search(text)
        if matched:
            return (pattern, 1.0, "regex")

    return None
