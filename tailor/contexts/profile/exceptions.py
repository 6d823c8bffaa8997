"""Custom exceptions for the profile context with field references."""

from pathlib import Path
from typing import List, Optional


class ProfileValidationError(Exception):
    """
    Exception raised when a profile fails boundary validation.

    Attributes:
        message: Error description
        problems: Every individual problem found (one line each)
        source_path: File the profile was loaded from, if any
    """

    def __init__(
        self,
        message: str,
        problems: Optional[List[str]] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.problems = list(problems or [])
        self.source_path = source_path

        parts = [message]

        if source_path:
            parts.append(f"\nSource: {source_path}")

        for problem in self.problems:
            parts.append(f"  - {problem}")

        super().__init__("\n".join(parts))


class ProfileUpdateError(Exception):
    """
    Exception raised when a structured update cannot be applied.

    Attributes:
        message: Error description
        collection: Collection the update targeted (e.g., "experience")
        item_id: Id that was looked up, if any
    """

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        item_id: Optional[str] = None,
    ):
        self.message = message
        self.collection = collection
        self.item_id = item_id

        parts = [message]

        if collection:
            parts.append(f"\nCollection: {collection}")

        if item_id:
            parts.append(f"Id: {item_id}")

        super().__init__("\n".join(parts))
