"""
Text processing utilities for normalization and display.
"""

import unicodedata
from typing import List

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space → space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "--",  # em dash
    # Bullets and misc
    "\u2022": "*",  # bullet
    "\u2026": "...",  # ellipsis
    "\u00b7": "*",  # middle dot (used as bullet)
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause tokenization issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode

    Example:
        >>> normalize_unicode("data pipelines \\u2014 fast")
        'data pipelines -- fast'
    """
    if not text:
        return ""

    # NFKC normalization handles many compatibility characters
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def join_human(items: List[str], conjunction: str = "and") -> str:
    """
    Join items into a readable list ("A", "A and B", "A, B and C").

    Example:
        >>> join_human(["Python", "SQL", "Airflow"])
        'Python, SQL and Airflow'
    """
    items = [item for item in items if item]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} {conjunction} {items[-1]}"
