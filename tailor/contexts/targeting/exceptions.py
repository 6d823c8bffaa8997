"""Custom exceptions for the targeting context."""

from pathlib import Path
from typing import Optional


class TargetingConfigError(Exception):
    """
    Exception raised when targeting configuration cannot be loaded or merged.

    Attributes:
        message: Error description
        config_path: Config file involved, if any
        original_error: The underlying OmegaConf/YAML error
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.original_error = original_error

        parts = [message]

        if config_path:
            parts.append(f"\nConfig: {config_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
