"""
Profile Context

Responsibilities:
- Defines the MasterProfile document model (the user's complete career record)
- Loads profiles from JSON/YAML documents and exports them back
- Validates profiles at the boundary (unique ids, non-null required fields)
- Applies structured update operations that produce new profile revisions

Owns: Profile data structures, validation, update operations
Never: Scores content or decides what appears on a tailored resume
"""

from tailor.contexts.profile.exceptions import ProfileUpdateError, ProfileValidationError
from tailor.contexts.profile.profile_data_structure import (
    SKILL_CATEGORIES,
    Award,
    Bullet,
    Certificate,
    EducationEntry,
    ExperienceEntry,
    ExtraItem,
    Link,
    MasterProfile,
    ProjectEntry,
    SkillSet,
    validate_profile,
)

__all__ = [
    "SKILL_CATEGORIES",
    "Award",
    "Bullet",
    "Certificate",
    "EducationEntry",
    "ExperienceEntry",
    "ExtraItem",
    "Link",
    "MasterProfile",
    "ProfileUpdateError",
    "ProfileValidationError",
    "ProjectEntry",
    "SkillSet",
    "validate_profile",
]
