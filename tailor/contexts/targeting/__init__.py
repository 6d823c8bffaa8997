"""
Targeting Context

Responsibilities:
- Scores relevance of bullets, skills and titles against a job keyword set
- Selects and orders bullets per experience/project entry under a length budget
- Ranks skills and composes the target title and summary
- Assembles the TailoredResume preview

Owns: Relevance scoring, content selection logic, tailoring configuration
Never: Reads profile or job documents, or mutates the master profile
"""

from tailor.contexts.targeting.bullet_selector import BulletBudget, select_bullets
from tailor.contexts.targeting.composer import compose_title_and_summary
from tailor.contexts.targeting.config_resolver import TargetingConfig, load_targeting_config
from tailor.contexts.targeting.engine import tailor_resume
from tailor.contexts.targeting.scorer import rank_by_score, score
from tailor.contexts.targeting.skill_ranker import flatten_skills, rank_skills
from tailor.contexts.targeting.tailored_resume import (
    TailoredExperience,
    TailoredProject,
    TailoredResume,
)

__all__ = [
    "BulletBudget",
    "TailoredExperience",
    "TailoredProject",
    "TailoredResume",
    "TargetingConfig",
    "compose_title_and_summary",
    "flatten_skills",
    "load_targeting_config",
    "rank_by_score",
    "rank_skills",
    "score",
    "select_bullets",
    "tailor_resume",
]
