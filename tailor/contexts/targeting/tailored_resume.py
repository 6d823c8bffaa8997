"""
Tailored resume output structure.

Derived, read-only view produced by the tailoring engine. It owns no state,
is recomputed on every request, and is replaced wholesale by the next one.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class TailoredExperience:
    company: str
    title: str
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TailoredProject:
    name: str
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TailoredResume:
    """
    Tailored resume preview.

    Attributes:
        target_title: Title to present for the target job
        summary: Short templated professional summary
        experience: Every experience entry with selected bullets, in profile order
        projects: Every project with selected bullets, in profile order
        skills: All distinct skills, most relevant first
    """

    target_title: str
    summary: str
    experience: Tuple[TailoredExperience, ...] = ()
    projects: Tuple[TailoredProject, ...] = ()
    skills: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Export with the camelCase shape consumed by the preview UI."""
        return {
            "targetTitle": self.target_title,
            "summary": self.summary,
            "experience": [
                {"company": e.company, "title": e.title, "bullets": list(e.bullets)}
                for e in self.experience
            ],
            "projects": [{"name": p.name, "bullets": list(p.bullets)} for p in self.projects],
            "skills": list(self.skills),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
