"""
Job description input for the Intake context.

Provides JobInput, the raw job-description side of a tailoring request:
an optional explicit job title, an optional company website, and the
unstructured job description text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from tailor.contexts.intake.exceptions import JobInputError
from tailor.contexts.intake.logger import _log_debug, _log_warning

STRUCTURED_SUFFIXES = {".json", ".yaml", ".yml"}

# Accepted spellings for each field (camelCase from the original JSON export)
FIELD_ALIASES = {
    "job_title": ("jobTitle", "job_title", "title"),
    "company_website": ("companyWebsite", "company_website", "website"),
    "jd_text": ("jdText", "jd_text", "description", "text"),
}


def _first_present(data: Dict[str, Any], keys: tuple) -> Optional[Any]:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _clean_optional(value: Optional[Any]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class JobInput:
    """
    Job description supplied to the tailoring engine.

    Factory methods:
        from_text(text) - Wrap raw job description text
        from_dict(data) - Build from camelCase or snake_case mapping
        from_file(path) - Load .json/.yaml as structured input, anything else as raw text
    """

    jd_text: str = ""
    job_title: Optional[str] = None
    company_website: Optional[str] = None

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(
        cls,
        text: Optional[str],
        job_title: Optional[str] = None,
        company_website: Optional[str] = None,
    ) -> "JobInput":
        """
        Wrap raw job description text.

        Args:
            text: Job description (None is treated as empty)
            job_title: Optional explicit job title
            company_website: Optional company website

        Returns:
            JobInput instance
        """
        return cls(
            jd_text=text or "",
            job_title=_clean_optional(job_title),
            company_website=_clean_optional(company_website),
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "JobInput":
        """
        Build from a mapping as exported by the profile editor.

        Accepts {"jobTitle", "companyWebsite", "jdText"} or snake_case keys.
        Missing keys become empty values.
        """
        data = data or {}
        jd_text = _first_present(data, FIELD_ALIASES["jd_text"])
        return cls.from_text(
            str(jd_text) if jd_text is not None else "",
            job_title=_first_present(data, FIELD_ALIASES["job_title"]),
            company_website=_first_present(data, FIELD_ALIASES["company_website"]),
        )

    @classmethod
    def from_file(cls, file_path: Path) -> "JobInput":
        """
        Load job input from disk.

        .json/.yaml/.yml files are parsed as structured input; any other file
        is read as raw job description text.

        Args:
            file_path: Path to job file

        Returns:
            JobInput instance

        Raises:
            JobInputError: If the file cannot be read or parsed
        """
        file_path = Path(file_path)

        try:
            if file_path.suffix.lower() in STRUCTURED_SUFFIXES:
                data = OmegaConf.to_container(OmegaConf.load(file_path), resolve=True)
                if not isinstance(data, dict):
                    raise JobInputError("Structured job file must contain a mapping", file_path)
                _log_debug(f"Loaded structured job input from {file_path}")
                return cls.from_dict(data)

            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError, YAMLError, OmegaConfBaseException) as e:
            raise JobInputError("Could not read job input", file_path, e) from e

        if not text.strip():
            _log_warning(f"Job description file {file_path} is empty")
        _log_debug(f"Loaded raw job description from {file_path} ({len(text)} chars)")
        return cls.from_text(text)

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    @property
    def is_empty(self) -> bool:
        """True when the job description has no non-whitespace content."""
        return not self.jd_text.strip()

    def to_dict(self) -> Dict[str, Any]:
        """Export using the original camelCase field names."""
        return {
            "jobTitle": self.job_title or "",
            "companyWebsite": self.company_website or "",
            "jdText": self.jd_text,
        }
