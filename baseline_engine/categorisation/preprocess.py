"""
Preprocessing utilities for transaction classification.
Handles text normalization and category-name canonicalization.
"""

from typing import Optional


DEFAULT_CATEGORY = "Misc"


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for matching.

    Args:
        text: Raw text to normalize

    Returns:
        Normalized lowercase text
    """
    if not text:
        return ""
    return text.lower().strip()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def select_category(category_top: Optional[str], category_sub: Optional[str]) -> str:
    """
    Pick the raw category label to display.

    The top category wins unless it is missing, blank or "Misc"; the sub
    category is the fallback; "Misc" when neither is usable.
    """
    if not _is_blank(category_top) and category_top.strip().lower() != DEFAULT_CATEGORY.lower():
        return category_top

    if not _is_blank(category_sub):
        return category_sub

    return DEFAULT_CATEGORY


def capitalize_words(text: str) -> str:
    """
    Uppercase the first character of each whitespace-delimited token.

    A character whose uppercase form is longer than one character (e.g. "ß")
    is kept as-is so the text length never changes.
    """
    result = []
    capitalize_next = True

    for char in text:
        if char.isspace():
            result.append(char)
            capitalize_next = True
        elif capitalize_next:
            upper = char.upper()
            result.append(upper if len(upper) == 1 else char)
            capitalize_next = False
        else:
            result.append(char)

    return "".join(result)


def normalize_category(category_top: Optional[str], category_sub: Optional[str]) -> str:
    """
    Canonicalize a raw (top, sub) category pair into one display string.

    Args:
        category_top: Upstream top-level category label
        category_sub: Upstream sub category label

    Returns:
        Title-cased category name, never blank

    Example:
        >>> normalize_category("  food   &  drink ", "Restaurants")
        'Food & Drink'
        >>> normalize_category("Misc", "Groceries")
        'Groceries'
    """
    category = select_category(category_top, category_sub)
    if _is_blank(category):
        return DEFAULT_CATEGORY

    normalized = " ".join(category.split()).lower()
    return capitalize_words(normalized)
