"""
Rendering Context

Responsibilities:
- Formats a TailoredResume as a markdown or plaintext preview

Owns: Preview formatting
Never: Makes targeting decisions or produces typeset documents
"""

from tailor.contexts.rendering.preview_formatter import (
    format_preview_markdown,
    format_preview_plaintext,
)

__all__ = ["format_preview_markdown", "format_preview_plaintext"]
