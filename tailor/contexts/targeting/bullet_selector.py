"""
Bullet selection for experience and project entries.

For each entry independently:
1. Score every bullet against the keyword set
2. Stable-sort by descending score (ties keep entered order)
3. Truncate to the per-entry cap

When no bullet matches any keyword (e.g., empty job description) the stable
sort leaves the entered order untouched, so the entry keeps its original
bullets in original order up to the cap.

Entries themselves are never dropped; only their bullets are trimmed and
reordered. An optional total budget trims lowest-scoring bullets across all
entries, but never an entry's top bullet.
"""

from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from tailor.contexts.targeting.defaults import (
    DEFAULT_MAX_BULLETS_PER_ENTRY,
    DEFAULT_MAX_TOTAL_BULLETS,
)
from tailor.contexts.targeting.logger import _log_debug
from tailor.contexts.targeting.scorer import rank_by_score

# (original_index, bullet, score)
ScoredBullet = Tuple[int, Any, float]


@dataclass(frozen=True)
class BulletBudget:
    """
    Length budget for bullet selection.

    Attributes:
        per_entry: Maximum bullets kept per entry
        total: Maximum bullets across all entries (None = unbounded)
    """

    per_entry: int = DEFAULT_MAX_BULLETS_PER_ENTRY
    total: Optional[int] = DEFAULT_MAX_TOTAL_BULLETS


def _entry_label(entry: Any) -> str:
    return getattr(entry, "company", None) or getattr(entry, "name", None) or entry.id


def rank_entry_bullets(entry: Any, keywords: Mapping, per_entry: int) -> List[ScoredBullet]:
    """
    Rank one entry's bullets and cut to the per-entry cap.

    Blank bullets are skipped.

    Returns:
        Selected (original_index, bullet, score) triples, best first
    """
    bullets = [bullet for bullet in entry.bullets if bullet.text and bullet.text.strip()]
    ranked = rank_by_score(bullets, keywords, text_of=lambda bullet: bullet.text)

    if ranked and all(scored[2] == 0 for scored in ranked):
        _log_debug(f"{_entry_label(entry)}: no keyword overlap, keeping entered order")

    return ranked[: max(per_entry, 0)]


def _apply_total_budget(selections: List[List[ScoredBullet]], total: Optional[int]) -> List[List[ScoredBullet]]:
    """
    Trim selections to the total budget.

    Drops lowest score first; ties drop the later entry, then the later
    position. Position 0 of every entry is protected, so the result can
    exceed the total when there are more entries than budget.
    """
    count = sum(len(selection) for selection in selections)
    if total is None or count <= total:
        return selections

    candidates = [
        (scored[2], entry_index, position)
        for entry_index, selection in enumerate(selections)
        for position, scored in enumerate(selection)
        if position > 0
    ]
    candidates.sort(key=lambda c: (c[0], -c[1], -c[2]))
    dropped = {(entry_index, position) for _, entry_index, position in candidates[: count - total]}

    _log_debug(f"Total budget {total}: dropping {len(dropped)} of {count} selected bullets")

    return [
        [scored for position, scored in enumerate(selection) if (entry_index, position) not in dropped]
        for entry_index, selection in enumerate(selections)
    ]


def select_bullets(
    entries: Sequence[Any],
    keywords: Mapping,
    budget: Optional[BulletBudget] = None,
) -> List[Any]:
    """
    Rank and truncate the bullets of every entry.

    Args:
        entries: ExperienceEntry/ProjectEntry objects (anything with .bullets)
        keywords: Keyword set to score against
        budget: Per-entry and total caps (defaults to BulletBudget())

    Returns:
        Entries of the same type and order, with bullets replaced by the selection
    """
    budget = budget or BulletBudget()

    selections = [rank_entry_bullets(entry, keywords, budget.per_entry) for entry in entries]
    selections = _apply_total_budget(selections, budget.total)

    result = []
    for entry, selection in zip(entries, selections):
        _log_debug(
            f"{_entry_label(entry)}: kept {len(selection)}/{len(entry.bullets)} bullets "
            f"(scores {[round(scored[2], 2) for scored in selection]})"
        )
        result.append(replace(entry, bullets=tuple(scored[1] for scored in selection)))
    return result
