"""
Structured update operations for MasterProfile documents.

Every operation takes a profile and returns a NEW profile with
revision + 1; the input profile is never modified. Results are validated
before they are returned, so an update can never produce a profile with
duplicate ids or null required fields.

Usage:
    from tailor.contexts.profile.profile_updates import add_bullet, update_entry

    profile = update_entry(profile, "experience", "exp-1", title="Staff Engineer")
    profile = add_bullet(profile, "experience", "exp-1", Bullet("b-9", "Cut costs 30%"))
"""

from dataclasses import fields, replace
from typing import Any, Iterable, Optional, Tuple

from tailor.contexts.profile.exceptions import ProfileUpdateError
from tailor.contexts.profile.logger import _log_info
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
    validate_profile,
)

# Collection name -> entry type
COLLECTION_TYPES = {
    "experience": ExperienceEntry,
    "projects": ProjectEntry,
    "education": EducationEntry,
    "certificates": Certificate,
    "awards": Award,
    "extras": ExtraItem,
}

# Collections whose entries carry bullets
BULLET_COLLECTIONS = ("experience", "projects")

IDENTITY_FIELDS = ("name", "email", "phone", "location", "links")


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _commit(profile: MasterProfile, description: str, **changes: Any) -> MasterProfile:
    """Apply changes, bump the revision and validate the result."""
    updated = replace(profile, revision=profile.revision + 1, **changes)
    validate_profile(updated)
    _log_info(f"{description} (revision {updated.revision})")
    return updated


def _entries(profile: MasterProfile, collection: str) -> Tuple[Any, ...]:
    if collection not in COLLECTION_TYPES:
        raise ProfileUpdateError(
            f"Unknown collection (expected one of {', '.join(COLLECTION_TYPES)})",
            collection=collection,
        )
    return getattr(profile, collection)


def _index_of(items: Tuple[Any, ...], item_id: str, collection: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    raise ProfileUpdateError("No entry with this id", collection=collection, item_id=item_id)


def _insert(items: Tuple[Any, ...], item: Any, position: Optional[int]) -> Tuple[Any, ...]:
    items = list(items)
    if position is None:
        items.append(item)
    else:
        items.insert(max(0, min(position, len(items))), item)
    return tuple(items)


def _move(items: Tuple[Any, ...], index: int, new_index: int) -> Tuple[Any, ...]:
    items = list(items)
    item = items.pop(index)
    items.insert(max(0, min(new_index, len(items))), item)
    return tuple(items)


def _check_fields(entry_type: type, changes: Iterable[str], collection: str) -> None:
    allowed = {f.name for f in fields(entry_type)}
    unknown = sorted(set(changes) - allowed)
    if unknown:
        raise ProfileUpdateError(f"Unknown field(s): {', '.join(unknown)}", collection=collection)


def _bullet_entry(profile: MasterProfile, collection: str, entry_id: str) -> Tuple[int, Any]:
    if collection not in BULLET_COLLECTIONS:
        raise ProfileUpdateError("Collection has no bullets", collection=collection)
    entries = _entries(profile, collection)
    index = _index_of(entries, entry_id, collection)
    return index, entries[index]


def _replace_entry(
    profile: MasterProfile, collection: str, index: int, entry: Any, description: str
) -> MasterProfile:
    entries = list(_entries(profile, collection))
    entries[index] = entry
    return _commit(profile, description, **{collection: tuple(entries)})


# =============================================================================
# IDENTITY AND SKILLS
# =============================================================================


def update_identity(profile: MasterProfile, **changes: Any) -> MasterProfile:
    """
    Update identity fields (name, email, phone, location, links).

    Raises:
        ProfileUpdateError: If a non-identity field is passed
    """
    unknown = sorted(set(changes) - set(IDENTITY_FIELDS))
    if unknown:
        raise ProfileUpdateError(f"Not an identity field: {', '.join(unknown)}", collection="profile")
    if "links" in changes:
        changes["links"] = tuple(
            link if isinstance(link, Link) else Link(**link) for link in changes["links"]
        )
    return _commit(profile, f"Updated identity fields {sorted(changes)}", **changes)


def set_skill_category(profile: MasterProfile, category: str, skills: Iterable[str]) -> MasterProfile:
    """
    Replace the contents of one skill category.

    Raises:
        ProfileUpdateError: If the category is not one of SKILL_CATEGORIES
    """
    if category not in SKILL_CATEGORIES:
        raise ProfileUpdateError(
            f"Unknown skill category (expected one of {', '.join(SKILL_CATEGORIES)})",
            collection="skills",
            item_id=category,
        )
    cleaned = tuple(s.strip() for s in skills if s and s.strip())
    new_skills = replace(profile.skills, **{category: cleaned})
    return _commit(profile, f"Set skills.{category} ({len(cleaned)} items)", skills=new_skills)


# =============================================================================
# ENTRY OPERATIONS
# =============================================================================


def add_entry(
    profile: MasterProfile, collection: str, entry: Any, position: Optional[int] = None
) -> MasterProfile:
    """
    Add an entry to a collection (appended unless position is given).

    Raises:
        ProfileUpdateError: If the entry type does not match the collection
        ProfileValidationError: If the entry id is already used
    """
    entries = _entries(profile, collection)
    if not isinstance(entry, COLLECTION_TYPES[collection]):
        raise ProfileUpdateError(
            f"Expected {COLLECTION_TYPES[collection].__name__}, got {type(entry).__name__}",
            collection=collection,
        )
    return _commit(
        profile,
        f"Added {collection} entry '{entry.id}'",
        **{collection: _insert(entries, entry, position)},
    )


def update_entry(profile: MasterProfile, collection: str, entry_id: str, **changes: Any) -> MasterProfile:
    """
    Change fields of one entry.

    Raises:
        ProfileUpdateError: If the id or a field name is unknown
    """
    entries = _entries(profile, collection)
    _check_fields(COLLECTION_TYPES[collection], changes, collection)
    index = _index_of(entries, entry_id, collection)
    if "bullets" in changes:
        changes["bullets"] = tuple(changes["bullets"])
    if "tags" in changes:
        changes["tags"] = tuple(changes["tags"])
    return _replace_entry(
        profile,
        collection,
        index,
        replace(entries[index], **changes),
        f"Updated {collection} entry '{entry_id}' fields {sorted(changes)}",
    )


def remove_entry(profile: MasterProfile, collection: str, entry_id: str) -> MasterProfile:
    entries = _entries(profile, collection)
    index = _index_of(entries, entry_id, collection)
    remaining = entries[:index] + entries[index + 1 :]
    return _commit(profile, f"Removed {collection} entry '{entry_id}'", **{collection: remaining})


def move_entry(profile: MasterProfile, collection: str, entry_id: str, new_index: int) -> MasterProfile:
    """Move an entry to a new position (clamped to the collection bounds)."""
    entries = _entries(profile, collection)
    index = _index_of(entries, entry_id, collection)
    return _commit(
        profile,
        f"Moved {collection} entry '{entry_id}' to {new_index}",
        **{collection: _move(entries, index, new_index)},
    )


# =============================================================================
# BULLET OPERATIONS
# =============================================================================


def add_bullet(
    profile: MasterProfile,
    collection: str,
    entry_id: str,
    bullet: Bullet,
    position: Optional[int] = None,
) -> MasterProfile:
    index, entry = _bullet_entry(profile, collection, entry_id)
    return _replace_entry(
        profile,
        collection,
        index,
        replace(entry, bullets=_insert(entry.bullets, bullet, position)),
        f"Added bullet '{bullet.id}' to {collection} entry '{entry_id}'",
    )


def update_bullet(
    profile: MasterProfile, collection: str, entry_id: str, bullet_id: str, text: str
) -> MasterProfile:
    index, entry = _bullet_entry(profile, collection, entry_id)
    where = f"{collection}.{entry_id}.bullets"
    bullet_index = _index_of(entry.bullets, bullet_id, where)
    bullets = list(entry.bullets)
    bullets[bullet_index] = replace(bullets[bullet_index], text=text)
    return _replace_entry(
        profile,
        collection,
        index,
        replace(entry, bullets=tuple(bullets)),
        f"Updated bullet '{bullet_id}' in {collection} entry '{entry_id}'",
    )


def remove_bullet(profile: MasterProfile, collection: str, entry_id: str, bullet_id: str) -> MasterProfile:
    index, entry = _bullet_entry(profile, collection, entry_id)
    where = f"{collection}.{entry_id}.bullets"
    bullet_index = _index_of(entry.bullets, bullet_id, where)
    bullets = entry.bullets[:bullet_index] + entry.bullets[bullet_index + 1 :]
    return _replace_entry(
        profile,
        collection,
        index,
        replace(entry, bullets=bullets),
        f"Removed bullet '{bullet_id}' from {collection} entry '{entry_id}'",
    )


def move_bullet(
    profile: MasterProfile, collection: str, entry_id: str, bullet_id: str, new_index: int
) -> MasterProfile:
    index, entry = _bullet_entry(profile, collection, entry_id)
    where = f"{collection}.{entry_id}.bullets"
    bullet_index = _index_of(entry.bullets, bullet_id, where)
    return _replace_entry(
        profile,
        collection,
        index,
        replace(entry, bullets=_move(entry.bullets, bullet_index, new_index)),
        f"Moved bullet '{bullet_id}' in {collection} entry '{entry_id}' to {new_index}",
    )
