"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class JobInputError(Exception):
    """
    Exception raised when a job description source cannot be read or parsed.

    Attributes:
        message: Error description
        source_path: File the job input was read from, if any
        original_error: The underlying parsing or I/O error
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"\nSource: {source_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
