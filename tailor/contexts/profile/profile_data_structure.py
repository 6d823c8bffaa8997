"""
Master Profile Document Structure

Defines the structured representation of a user's complete career record.
This structure is the interface between the Profile and Targeting contexts.

Profile owns:
- Loading documents (JSON/YAML, camelCase or snake_case keys) into MasterProfile
- Boundary validation (unique ids, non-null required fields)
- Exporting back to the camelCase document format

Targeting reads MasterProfile instances and never mutates them. All classes
are frozen; sequences are tuples so a profile can be shared freely.
"""

import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from tailor.contexts.profile.exceptions import ProfileValidationError
from tailor.contexts.profile.logger import _log_debug, _log_warning

# Fixed category declaration order; flattening follows this order
SKILL_CATEGORIES = ("languages", "frameworks", "data", "cloud", "tools", "other")

# End-date values meaning "still in this role"
CURRENT_END_DATES = {"", "present", "current", "now", "ongoing", "today"}

MONTH_NAMES = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

YEAR_PATTERN = re.compile(r"\b((?:19|20)\d{2})\b")
MONTH_BEFORE_YEAR_PATTERN = re.compile(r"\b(0?[1-9]|1[0-2])[/.-](?:19|20)\d{2}\b")
MONTH_AFTER_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}[/.-](0?[1-9]|1[0-2])\b")
MONTH_NAME_PATTERN = re.compile(r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\b")


def parse_month_year(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse a loosely formatted date into (year, month).

    Month defaults to 0 when only a year is present.

    Example:
        >>> parse_month_year("May 2023")
        (2023, 5)
        >>> parse_month_year("2021-09")
        (2021, 9)
        >>> parse_month_year("sometime") is None
        True
    """
    if not value:
        return None

    text = str(value).strip().lower()
    year_match = YEAR_PATTERN.search(text)
    if not year_match:
        return None
    year = int(year_match.group(1))

    for pattern in (MONTH_BEFORE_YEAR_PATTERN, MONTH_AFTER_YEAR_PATTERN):
        month_match = pattern.search(text)
        if month_match:
            return year, int(month_match.group(1))

    name_match = MONTH_NAME_PATTERN.search(text)
    if name_match:
        return year, MONTH_NAMES[name_match.group(1)]

    return year, 0


# =============================================================================
# ENTRY TYPES
# =============================================================================


@dataclass(frozen=True)
class Link:
    label: str = ""
    url: str = ""


@dataclass(frozen=True)
class Bullet:
    """A single achievement or responsibility statement."""

    id: str
    text: str


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One role in the work history.

    Attributes:
        id: Caller-assigned id, unique within the experience collection
        company: Employer name
        title: Job title held
        location: Optional location
        start_date: Free-text start date (e.g., "Jan 2022")
        end_date: Free-text end date; empty or "Present" marks a current role
        bullets: Achievements in entered order
    """

    id: str
    company: str
    title: str
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    bullets: Tuple[Bullet, ...] = ()

    @property
    def is_current(self) -> bool:
        return (self.end_date or "").strip().lower() in CURRENT_END_DATES

    @property
    def recency_key(self) -> Tuple[int, int, int]:
        """
        Sort key for recency: current roles first, then latest end date.

        Unparseable end dates sort below every parseable one.
        """
        if self.is_current:
            return (1, 9999, 12)
        parsed = parse_month_year(self.end_date)
        if parsed is None:
            return (-1, 0, 0)
        return (0, parsed[0], parsed[1])


@dataclass(frozen=True)
class ProjectEntry:
    id: str
    name: str
    link: Optional[str] = None
    bullets: Tuple[Bullet, ...] = ()
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SkillSet:
    """
    Skills grouped into the fixed categories of SKILL_CATEGORIES.

    Each category is a collection of short strings kept in entered order.
    """

    languages: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()
    data: Tuple[str, ...] = ()
    cloud: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    other: Tuple[str, ...] = ()

    def categories(self) -> List[Tuple[str, Tuple[str, ...]]]:
        """(category, skills) pairs in declaration order."""
        return [(name, getattr(self, name)) for name in SKILL_CATEGORIES]

    def flatten(self) -> List[str]:
        """All skills in category declaration order (duplicates kept)."""
        return [skill for _, skills in self.categories() for skill in skills]

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(skills) for name, skills in self.categories()}


@dataclass(frozen=True)
class EducationEntry:
    id: str
    school: str
    degree: Optional[str] = None
    major: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class Certificate:
    id: str
    name: str
    issuer: Optional[str] = None
    year: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class Award:
    id: str
    name: str
    org: Optional[str] = None
    year: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class ExtraItem:
    """Free-form labeled entry (Publications, Leadership, Volunteer, Interests)."""

    id: str
    label: str
    value: str


# =============================================================================
# DOCUMENT PARSING HELPERS
# =============================================================================

# Python field name -> camelCase document key, where they differ
CAMEL_CASE_KEYS = {
    "start_date": "startDate",
    "end_date": "endDate",
}

# Required (non-null) fields per collection; "id" is always required
REQUIRED_FIELDS = {
    "experience": ("company", "title"),
    "projects": ("name",),
    "education": ("school",),
    "certificates": ("name",),
    "awards": ("name",),
    "extras": ("label", "value"),
}

# Id prefix used when lenient loading fills in a missing id
ID_PREFIXES = {
    "experience": "exp",
    "projects": "proj",
    "education": "edu",
    "certificates": "cert",
    "awards": "award",
    "extras": "extra",
}


def _lookup(data: Dict[str, Any], name: str) -> Any:
    """Read a field by snake_case name or its camelCase alias."""
    if name in data:
        return data[name]
    camel = CAMEL_CASE_KEYS.get(name)
    if camel and camel in data:
        return data[camel]
    return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _string_list(value: Any) -> Tuple[str, ...]:
    """Accept a list of strings or a comma-separated string."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(item).strip() for item in value if item is not None and str(item).strip())


class _DocumentReader:
    """
    Collects problems while converting a raw document into dataclasses.

    In strict mode missing required fields and ids are recorded as problems;
    in lenient mode they become neutral values (empty string, positional id).
    """

    def __init__(self, strict: bool):
        self.strict = strict
        self.problems: List[str] = []

    def required_str(self, data: Dict[str, Any], name: str, where: str) -> str:
        value = _lookup(data, name)
        if value is None:
            if self.strict:
                self.problems.append(f"{where}: missing required field '{name}'")
            return ""
        return str(value)

    def item_id(self, data: Dict[str, Any], where: str, fallback: str) -> str:
        value = _lookup(data, "id")
        if value is None or not str(value).strip():
            if self.strict:
                self.problems.append(f"{where}: missing id")
                return ""
            return fallback
        return str(value)

    def string_list(self, value: Any, where: str) -> Tuple[str, ...]:
        if value is None or isinstance(value, (str, list, tuple)):
            return _string_list(value)
        self.problems.append(f"{where}: expected a list or comma-separated string, got {type(value).__name__}")
        return ()

    def revision(self, value: Any) -> int:
        if value is None or value == "":
            return 0
        try:
            return int(value)
        except (TypeError, ValueError):
            self.problems.append(f"revision: expected an integer, got {value!r}")
            return 0

    def mapping(self, value: Any, where: str) -> Optional[Dict[str, Any]]:
        if isinstance(value, dict):
            return value
        self.problems.append(f"{where}: expected a mapping, got {type(value).__name__}")
        return None

    def collection(
        self,
        raw: Any,
        name: str,
        build: Callable[[Dict[str, Any], str, str], Any],
    ) -> Tuple[Any, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, (list, tuple)):
            self.problems.append(f"{name}: expected a list, got {type(raw).__name__}")
            return ()

        items = []
        for index, entry in enumerate(raw):
            where = f"{name}[{index}]"
            entry = self.mapping(entry, where)
            if entry is None:
                continue
            item_id = self.item_id(entry, where, f"{ID_PREFIXES[name]}-{index + 1}")
            items.append(build(entry, item_id, where))
        return tuple(items)

    def bullets(self, raw: Any, where: str) -> Tuple[Bullet, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, (list, tuple)):
            self.problems.append(f"{where}.bullets: expected a list, got {type(raw).__name__}")
            return ()

        bullets = []
        for index, entry in enumerate(raw):
            bullet_where = f"{where}.bullets[{index}]"
            fallback_id = f"b-{index + 1}"
            if isinstance(entry, str):
                if self.strict:
                    self.problems.append(f"{bullet_where}: missing id")
                bullets.append(Bullet(id=fallback_id, text=entry))
                continue
            entry = self.mapping(entry, bullet_where)
            if entry is None:
                continue
            bullets.append(
                Bullet(
                    id=self.item_id(entry, bullet_where, fallback_id),
                    text=self.required_str(entry, "text", bullet_where),
                )
            )
        return tuple(bullets)

    def skills(self, raw: Any) -> SkillSet:
        if raw is None:
            return SkillSet()
        raw = self.mapping(raw, "skills")
        if raw is None:
            return SkillSet()

        values = {name: self.string_list(raw.get(name), f"skills.{name}") for name in SKILL_CATEGORIES}
        for name, items in raw.items():
            if name in SKILL_CATEGORIES:
                continue
            if self.strict:
                self.problems.append(f"skills: unknown category '{name}'")
            else:
                _log_warning(f"Merging unknown skill category '{name}' into 'other'")
                values["other"] = values["other"] + self.string_list(items, f"skills.{name}")
        return SkillSet(**values)


# =============================================================================
# MASTER PROFILE
# =============================================================================


@dataclass(frozen=True)
class MasterProfile:
    """
    The user's complete, editable career record.

    Never trimmed itself; tailoring produces a separate derived view.
    `revision` increases by one with every structured update.

    Factory methods:
        from_dict(data, strict) - Build from a JSON/YAML document mapping
        from_file(path, strict) - Load a .json/.yaml document from disk
    """

    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    links: Tuple[Link, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    skills: SkillSet = field(default_factory=SkillSet)
    education: Tuple[EducationEntry, ...] = ()
    certificates: Tuple[Certificate, ...] = ()
    awards: Tuple[Award, ...] = ()
    extras: Tuple[ExtraItem, ...] = ()
    revision: int = 0

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], strict: bool = False) -> "MasterProfile":
        """
        Build a profile from a document mapping.

        Accepts the bare profile mapping or the stored envelope
        {"profile": {...}, "extras": {"certificates", "awards", "extras"}}.
        Keys may be camelCase (startDate) or snake_case (start_date).

        Args:
            data: Document mapping (None is treated as an empty profile)
            strict: If True, missing required fields/ids and unknown skill
                    categories are errors; otherwise they become neutral values

        Returns:
            MasterProfile instance

        Raises:
            ProfileValidationError: In strict mode, listing every problem found
        """
        data = dict(data or {})
        extras_block: Dict[str, Any] = {}
        if isinstance(data.get("profile"), dict):
            extras_block = data.get("extras") if isinstance(data.get("extras"), dict) else {}
            revision = data.get("revision", data["profile"].get("revision", 0))
            data = dict(data["profile"])
            data["revision"] = revision

        reader = _DocumentReader(strict)

        def build_experience(entry, item_id, where):
            return ExperienceEntry(
                id=item_id,
                company=reader.required_str(entry, "company", where),
                title=reader.required_str(entry, "title", where),
                location=_optional_str(entry.get("location")),
                start_date=_optional_str(_lookup(entry, "start_date")),
                end_date=_optional_str(_lookup(entry, "end_date")),
                bullets=reader.bullets(entry.get("bullets"), where),
            )

        def build_project(entry, item_id, where):
            return ProjectEntry(
                id=item_id,
                name=reader.required_str(entry, "name", where),
                link=_optional_str(entry.get("link")),
                bullets=reader.bullets(entry.get("bullets"), where),
                tags=reader.string_list(entry.get("tags"), f"{where}.tags"),
            )

        def build_education(entry, item_id, where):
            return EducationEntry(
                id=item_id,
                school=reader.required_str(entry, "school", where),
                degree=_optional_str(entry.get("degree")),
                major=_optional_str(entry.get("major")),
                start_date=_optional_str(_lookup(entry, "start_date")),
                end_date=_optional_str(_lookup(entry, "end_date")),
                gpa=_optional_str(entry.get("gpa")),
                notes=_optional_str(entry.get("notes")),
            )

        def build_certificate(entry, item_id, where):
            return Certificate(
                id=item_id,
                name=reader.required_str(entry, "name", where),
                issuer=_optional_str(entry.get("issuer")),
                year=_optional_str(entry.get("year")),
                link=_optional_str(entry.get("link")),
            )

        def build_award(entry, item_id, where):
            return Award(
                id=item_id,
                name=reader.required_str(entry, "name", where),
                org=_optional_str(entry.get("org")),
                year=_optional_str(entry.get("year")),
                notes=_optional_str(entry.get("notes")),
            )

        def build_extra(entry, item_id, where):
            return ExtraItem(
                id=item_id,
                label=reader.required_str(entry, "label", where),
                value=reader.required_str(entry, "value", where),
            )

        links = []
        raw_links = data.get("links")
        if raw_links is not None and not isinstance(raw_links, (list, tuple)):
            reader.problems.append(f"links: expected a list, got {type(raw_links).__name__}")
            raw_links = None
        for index, link in enumerate(raw_links or []):
            link = reader.mapping(link, f"links[{index}]")
            if link is not None:
                links.append(Link(label=str(link.get("label") or ""), url=str(link.get("url") or "")))

        def extra_collection(name: str) -> Any:
            if data.get(name) is not None:
                return data.get(name)
            return extras_block.get(name)

        profile = cls(
            name=reader.required_str(data, "name", "profile"),
            email=_optional_str(data.get("email")),
            phone=_optional_str(data.get("phone")),
            location=_optional_str(data.get("location")),
            links=tuple(links),
            experience=reader.collection(data.get("experience"), "experience", build_experience),
            projects=reader.collection(data.get("projects"), "projects", build_project),
            skills=reader.skills(data.get("skills")),
            education=reader.collection(data.get("education"), "education", build_education),
            certificates=reader.collection(extra_collection("certificates"), "certificates", build_certificate),
            awards=reader.collection(extra_collection("awards"), "awards", build_award),
            extras=reader.collection(extra_collection("extras"), "extras", build_extra),
            revision=reader.revision(data.get("revision")),
        )

        problems = reader.problems
        if strict:
            problems = problems + find_profile_problems(profile)
        if problems and strict:
            raise ProfileValidationError("Invalid master profile", problems)
        for problem in problems:
            _log_warning(f"Ignored profile problem: {problem}")

        _log_debug(
            f"Loaded profile '{profile.name}' (revision {profile.revision}): "
            f"{len(profile.experience)} experience, {len(profile.projects)} projects, "
            f"{len(profile.skills.flatten())} skills"
        )
        return profile

    @classmethod
    def from_file(cls, file_path: Path, strict: bool = True) -> "MasterProfile":
        """
        Load a profile document (.json, .yaml or .yml) from disk.

        Raises:
            ProfileValidationError: If the file cannot be read/parsed, or
                                    (strict mode) the document is invalid
        """
        file_path = Path(file_path)
        try:
            data = OmegaConf.to_container(OmegaConf.load(file_path), resolve=True)
        except (OSError, YAMLError, OmegaConfBaseException) as e:
            raise ProfileValidationError(
                "Could not read profile document", [str(e)], source_path=file_path
            ) from e

        if not isinstance(data, dict):
            raise ProfileValidationError(
                "Profile document must contain a mapping", source_path=file_path
            )

        try:
            return cls.from_dict(data, strict=strict)
        except ProfileValidationError as e:
            raise ProfileValidationError(e.message, e.problems, source_path=file_path) from e

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def most_recent_experience(self) -> Optional[ExperienceEntry]:
        """
        The most recent role: a current role first, else the latest end date.

        Ties and unparseable dates fall back to entered order.
        """
        best = None
        for entry in self.experience:
            if best is None or entry.recency_key > best.recency_key:
                best = entry
        return best

    def to_dict(self) -> Dict[str, Any]:
        """Export as a camelCase document (inverse of from_dict)."""

        def export(item: Any) -> Dict[str, Any]:
            result = {}
            for f in fields(item):
                value = getattr(item, f.name)
                if isinstance(value, tuple):
                    value = [export(v) if hasattr(v, "__dataclass_fields__") else v for v in value]
                result[CAMEL_CASE_KEYS.get(f.name, f.name)] = value
            return result

        document = export(self)
        document["skills"] = self.skills.to_dict()
        return document


def _duplicate_ids(items: Iterable[Any], where: str) -> List[str]:
    problems = []
    seen = set()
    for index, item in enumerate(items):
        if not item.id:
            problems.append(f"{where}[{index}]: empty id")
        elif item.id in seen:
            problems.append(f"{where}[{index}]: duplicate id '{item.id}'")
        seen.add(item.id)
    return problems


def find_profile_problems(profile: MasterProfile) -> List[str]:
    """
    Check a profile for boundary violations.

    Checks:
    - ids unique and non-empty within each collection (bullets per parent)
    - required fields are not None

    Returns:
        List of problem descriptions (empty if valid)
    """
    problems = []

    if profile.name is None:
        problems.append("profile: 'name' must not be null")

    collections = {
        "experience": profile.experience,
        "projects": profile.projects,
        "education": profile.education,
        "certificates": profile.certificates,
        "awards": profile.awards,
        "extras": profile.extras,
    }

    for name, items in collections.items():
        problems.extend(_duplicate_ids(items, name))
        for index, item in enumerate(items):
            for required in REQUIRED_FIELDS[name]:
                if getattr(item, required) is None:
                    problems.append(f"{name}[{index}]: '{required}' must not be null")

    for name in ("experience", "projects"):
        for index, entry in enumerate(collections[name]):
            where = f"{name}[{index}].bullets"
            problems.extend(_duplicate_ids(entry.bullets, where))
            for bullet_index, bullet in enumerate(entry.bullets):
                if bullet.text is None:
                    problems.append(f"{where}[{bullet_index}]: 'text' must not be null")

    return problems


def validate_profile(profile: MasterProfile) -> MasterProfile:
    """
    Validate a profile at the boundary.

    Returns:
        The same profile, for chaining

    Raises:
        ProfileValidationError: Listing every problem found
    """
    problems = find_profile_problems(profile)
    if problems:
        raise ProfileValidationError("Invalid master profile", problems)
    return profile
