"""
Skill ranking against a job keyword set.

Skills from every category are flattened in category declaration order,
deduplicated case-insensitively (first-seen casing wins), scored like short
bullets, and stable-sorted by descending score. Unmatched skills are kept
after all matched ones in their original order, so the result is never
empty just because nothing matched.
"""

from typing import List, Mapping

from tailor.contexts.profile.profile_data_structure import SkillSet
from tailor.contexts.targeting.logger import _log_debug
from tailor.contexts.targeting.scorer import rank_by_score


def flatten_skills(skills: SkillSet) -> List[str]:
    """
    Flatten skill categories into one deduplicated list.

    Example:
        >>> flatten_skills(SkillSet(languages=("Python",), tools=("git", "PYTHON")))
        ['Python', 'git']
    """
    seen = set()
    flattened = []
    for skill in skills.flatten():
        skill = skill.strip()
        key = skill.casefold()
        if not skill or key in seen:
            continue
        seen.add(key)
        flattened.append(skill)
    return flattened


def rank_skills(skills: SkillSet, keywords: Mapping) -> List[str]:
    """
    Order all profile skills by relevance to the keyword set.

    Args:
        skills: Profile skill categories
        keywords: Keyword set to score against

    Returns:
        Every distinct skill, matched ones first
    """
    flattened = flatten_skills(skills)
    ranked = rank_by_score(flattened, keywords)
    matched = sum(1 for _, _, skill_score in ranked if skill_score > 0)
    _log_debug(f"Ranked {len(flattened)} skills ({matched} matched)")
    return [skill for _, skill, _ in ranked]
