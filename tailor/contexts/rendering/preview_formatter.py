"""
Preview Formatting

Helper functions for formatting a TailoredResume as a readable preview,
mirroring the on-screen preview: header (name, title, company website),
then SUMMARY, EXPERIENCE, PROJECTS and SKILLS.
"""

import re
from typing import List, Optional

from tailor.contexts.intake.job_input import JobInput
from tailor.contexts.profile.profile_data_structure import MasterProfile
from tailor.contexts.targeting.tailored_resume import TailoredResume
from tailor.utils.text_processing import truncate_display

PLACEHOLDER_NAME = "Your Name"

_MARKDOWN_HEADER = re.compile(r"^#+\s*", re.MULTILINE)
_MARKDOWN_BOLD = re.compile(r"\*\*(.+?)\*\*")


def display_title(resume: TailoredResume, job: Optional[JobInput] = None) -> str:
    """Explicit job title wins over the derived target title."""
    if job is not None and job.job_title:
        return job.job_title
    return resume.target_title


def format_preview_markdown(
    resume: TailoredResume,
    profile: Optional[MasterProfile] = None,
    job: Optional[JobInput] = None,
) -> str:
    """
    Format a tailored resume as markdown.

    Args:
        resume: Engine output
        profile: Master profile, used for the name header
        job: Job input, used for the explicit title and company website

    Returns:
        Markdown preview
    """
    name = profile.name.strip() if profile is not None and profile.name else ""
    parts = [f"# {name or PLACEHOLDER_NAME}", "", f"**{display_title(resume, job)}**"]

    if job is not None and job.company_website:
        parts.append(job.company_website)

    parts.extend(["", "## SUMMARY", "", resume.summary, "", "## EXPERIENCE"])

    for experience in resume.experience:
        heading = " - ".join(part for part in (experience.title, experience.company) if part)
        parts.extend(["", f"### {heading}"])
        if experience.bullets:
            parts.append("")
        parts.extend(f"- {bullet}" for bullet in experience.bullets)

    parts.extend(["", "## PROJECTS"])

    for project in resume.projects:
        parts.extend(["", f"### {project.name}"])
        if project.bullets:
            parts.append("")
        parts.extend(f"- {bullet}" for bullet in project.bullets)

    parts.extend(["", "## SKILLS", "", ", ".join(resume.skills)])

    return "\n".join(parts).rstrip() + "\n"


def format_preview_plaintext(
    resume: TailoredResume,
    profile: Optional[MasterProfile] = None,
    job: Optional[JobInput] = None,
) -> str:
    """Format a tailored resume as plain text (markdown preview with markup removed)."""
    markdown = format_preview_markdown(resume, profile, job)
    text = _MARKDOWN_HEADER.sub("", markdown)
    return _MARKDOWN_BOLD.sub(r"\1", text)


def format_keyword_table(keywords: List[tuple], width: int = 32) -> str:
    """
    Format (term, weight) pairs as an aligned two-column table.

    Terms longer than width are truncated with an ellipsis.

    Example:
        >>> print(format_keyword_table([("python", 3.0), ("data pipelines", 2.0)]))
        python                           3.00
        data pipelines                   2.00
    """
    return "\n".join(f"{truncate_display(term, width):<{width}} {weight:.2f}" for term, weight in keywords)
