"""
Target title and professional summary composition.

Purely template + data substitution; no generative text. Never raises on
missing fields: absent titles and empty skill lists fall back to generic
wording.

Title priority:
1. Explicit job title supplied with the job description
2. Best multi-word role phrase in the job description ("Python Engineer")
3. Title of the profile's most recent experience entry
4. Fallback title ("Professional")

Summary: "{most recent title} with experience in {top skills}. {connective}"
"""

from typing import List, Mapping, Optional, Tuple

from tailor.contexts.intake.keyword_extractor import KeywordSet
from tailor.contexts.profile.profile_data_structure import MasterProfile
from tailor.contexts.targeting.defaults import (
    DEFAULT_FALLBACK_TITLE,
    DEFAULT_SUMMARY_CONNECTIVE,
    DEFAULT_SUMMARY_SKILL_COUNT,
)
from tailor.contexts.targeting.logger import _log_debug
from tailor.utils.text_processing import join_human


def _title_case_word(word: str) -> str:
    """Capitalize a word unless it already carries deliberate casing (AWS, iOS)."""
    if any(c.isupper() for c in word):
        return word
    return word[:1].upper() + word[1:]


def best_role_phrase(keywords: Mapping) -> Optional[str]:
    """
    Pick the strongest role phrase from a keyword set.

    Ranked by occurrence count, then summed keyword weight, then first
    appearance in the job description.

    Returns:
        Display title (e.g., "Senior Data Engineer") or None
    """
    if not isinstance(keywords, KeywordSet) or not keywords.role_phrases:
        return None

    ranked = sorted(
        keywords.role_phrases.items(),
        key=lambda item: (-item[1], -keywords.role_phrase_weight(item[0])),
    )
    phrase = ranked[0][0]
    words = keywords.display_role(phrase).split()
    return " ".join(_title_case_word(word) for word in words)


def most_recent_title(profile: MasterProfile) -> Optional[str]:
    entry = profile.most_recent_experience()
    if entry is None or not entry.title or not entry.title.strip():
        return None
    return entry.title.strip()


def compose_title(
    profile: MasterProfile,
    keywords: Mapping,
    job_title: Optional[str] = None,
    fallback_title: str = DEFAULT_FALLBACK_TITLE,
) -> str:
    if job_title and job_title.strip():
        return job_title.strip()
    return best_role_phrase(keywords) or most_recent_title(profile) or fallback_title


def compose_summary(
    profile: MasterProfile,
    ranked_skills: List[str],
    summary_skill_count: int = DEFAULT_SUMMARY_SKILL_COUNT,
    fallback_title: str = DEFAULT_FALLBACK_TITLE,
    connective: str = DEFAULT_SUMMARY_CONNECTIVE,
) -> str:
    """
    Fill the summary template.

    Example:
        "Data Engineer with experience in Python, Airflow and SQL. Focused on ..."
    """
    role = most_recent_title(profile) or fallback_title
    top_skills = ranked_skills[: max(summary_skill_count, 0)]

    if top_skills:
        opening = f"{role} with experience in {join_human(top_skills)}."
    else:
        opening = f"{role}."

    return f"{opening} {connective}".strip() if connective else opening


def compose_title_and_summary(
    profile: MasterProfile,
    keywords: Mapping,
    ranked_skills: Optional[List[str]] = None,
    job_title: Optional[str] = None,
    summary_skill_count: int = DEFAULT_SUMMARY_SKILL_COUNT,
    fallback_title: str = DEFAULT_FALLBACK_TITLE,
    connective: str = DEFAULT_SUMMARY_CONNECTIVE,
) -> Tuple[str, str]:
    """
    Derive the target title and summary.

    Args:
        profile: Master profile
        keywords: Job keyword set
        ranked_skills: Skills from rank_skills() (empty if None)
        job_title: Explicit job title, if the user supplied one
        summary_skill_count: Number of top skills named in the summary
        fallback_title: Generic title when nothing better is known
        connective: Fixed closing sentence

    Returns:
        (target_title, summary)
    """
    target_title = compose_title(profile, keywords, job_title, fallback_title)
    summary = compose_summary(
        profile, ranked_skills or [], summary_skill_count, fallback_title, connective
    )
    _log_debug(f"Target title: '{target_title}'")
    return target_title, summary
