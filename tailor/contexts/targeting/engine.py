"""
Resume tailoring engine.

Single entry point tying the pipeline together:

    raw JD text -> keywords -> scores -> selected bullets, ranked skills,
    title, summary -> TailoredResume

Pure and synchronous: reads only its arguments, keeps no state between
calls, and returns the same TailoredResume for the same inputs. Safe to call
concurrently. Never raises on minimal input; an empty job description falls
back to entered order everywhere.
"""

from typing import Optional, Union

from tailor.contexts.intake.job_input import JobInput
from tailor.contexts.intake.keyword_extractor import build_tokenizer, extract_keywords
from tailor.contexts.profile.profile_data_structure import MasterProfile
from tailor.contexts.targeting.bullet_selector import BulletBudget, select_bullets
from tailor.contexts.targeting.composer import compose_title_and_summary
from tailor.contexts.targeting.config_resolver import TargetingConfig
from tailor.contexts.targeting.logger import _log_debug, _log_info, _log_success
from tailor.contexts.targeting.skill_ranker import rank_skills
from tailor.contexts.targeting.tailored_resume import (
    TailoredExperience,
    TailoredProject,
    TailoredResume,
)


def tailor_resume(
    profile: Optional[MasterProfile],
    job: Union[JobInput, str, None],
    config: Optional[TargetingConfig] = None,
) -> TailoredResume:
    """
    Produce a tailored resume preview for one job description.

    Args:
        profile: Master profile (None is treated as an empty profile)
        job: JobInput, or the raw job description text
        config: Engine parameters (defaults to TargetingConfig())

    Returns:
        TailoredResume with every entry kept, bullets trimmed and reordered,
        skills ranked, and a composed title and summary
    """
    profile = profile or MasterProfile()
    job = job if isinstance(job, JobInput) else JobInput.from_text(job)
    config = config or TargetingConfig()
    _log_info(f"Tailoring '{profile.name or 'profile'}' against {len(job.jd_text)} chars of job description")

    # Each call owns its tokenizer, so no state is shared across calls
    tokenizer = build_tokenizer(
        min_token_length=config.min_token_length,
        use_stemming=config.use_stemming,
        extra_stopwords=config.extra_stopwords,
    )
    keywords = extract_keywords(
        job.jd_text,
        phrase_weight_multiplier=config.phrase_weight_multiplier,
        proper_noun_bonus=config.proper_noun_bonus,
        extra_phrases=config.extra_phrases,
        tokenizer=tokenizer,
    )
    _log_debug(f"Top keywords: {keywords.top(10)}")

    budget = BulletBudget(per_entry=config.max_bullets_per_entry, total=config.max_total_bullets)

    # One budget across experience and projects
    entries = list(profile.experience) + list(profile.projects)
    selected = select_bullets(entries, keywords, budget)
    experience = selected[: len(profile.experience)]
    projects = selected[len(profile.experience) :]

    skills = rank_skills(profile.skills, keywords)

    target_title, summary = compose_title_and_summary(
        profile,
        keywords,
        ranked_skills=skills,
        job_title=job.job_title,
        summary_skill_count=config.summary_skill_count,
        fallback_title=config.fallback_title,
        connective=config.summary_connective,
    )

    resume = TailoredResume(
        target_title=target_title,
        summary=summary,
        experience=tuple(
            TailoredExperience(
                company=entry.company or "",
                title=entry.title or "",
                bullets=tuple(bullet.text for bullet in entry.bullets),
            )
            for entry in experience
        ),
        projects=tuple(
            TailoredProject(name=entry.name or "", bullets=tuple(bullet.text for bullet in entry.bullets))
            for entry in projects
        ),
        skills=tuple(skills),
    )

    _log_success(
        f"Tailored '{profile.name or 'profile'}' for '{target_title}': "
        f"{len(keywords)} keywords, {len(resume.experience)} experience, "
        f"{len(resume.projects)} projects, {len(resume.skills)} skills"
    )
    return resume
