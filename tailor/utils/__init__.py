"""
Shared utilities for Resume Tailor.

Common functionality used across contexts:
- Text normalization and display helpers
- Tokenization
- Logger setup
"""

from tailor.utils.text_processing import join_human, normalize_unicode, truncate_display
from tailor.utils.token_processing import Token, Tokenizer

__all__ = ["join_human", "normalize_unicode", "truncate_display", "Token", "Tokenizer"]
