"""
Targeting Configuration Resolution

Builds the TargetingConfig used by the tailoring engine from three layers
(later overrides earlier):

1. Structured defaults (TargetingConfig field defaults)
2. A YAML file: explicit path, or TAILOR_TARGETING_CONFIG from the environment/.env
3. Dotlist overrides (e.g., ["max_bullets_per_entry=3"])

Examples:
    >>> config = load_targeting_config(overrides=["max_bullets_per_entry=3"])
    >>> config.max_bullets_per_entry
    3
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from tailor.contexts.intake.keyword_extractor import (
    DEFAULT_MIN_TOKEN_LENGTH,
    DEFAULT_PHRASE_WEIGHT_MULTIPLIER,
    DEFAULT_PROPER_NOUN_BONUS,
)
from tailor.contexts.targeting.defaults import (
    DEFAULT_FALLBACK_TITLE,
    DEFAULT_MAX_BULLETS_PER_ENTRY,
    DEFAULT_MAX_TOTAL_BULLETS,
    DEFAULT_SUMMARY_CONNECTIVE,
    DEFAULT_SUMMARY_SKILL_COUNT,
)
from tailor.contexts.targeting.exceptions import TargetingConfigError
from tailor.contexts.targeting.logger import _log_debug

load_dotenv()
CONFIG_ENV_VAR = "TAILOR_TARGETING_CONFIG"


@dataclass
class TargetingConfig:
    """
    Tunable parameters of the tailoring engine.

    Attributes:
        max_bullets_per_entry: Bullet cap per experience/project entry
        max_total_bullets: Optional cap across all entries (None = unbounded)
        summary_skill_count: Number of top-ranked skills named in the summary
        min_token_length: Minimum token length kept by the tokenizer
        use_stemming: Porter-stem alphabetic tokens so word forms match
        phrase_weight_multiplier: Weight per occurrence of a multi-word phrase
        proper_noun_bonus: One-time bonus for terms seen as proper nouns
        extra_stopwords: Additional words to ignore
        extra_phrases: Additional multi-word phrases to detect
        fallback_title: Title used when nothing better is known
        summary_connective: Fixed closing sentence of the summary
    """

    max_bullets_per_entry: int = DEFAULT_MAX_BULLETS_PER_ENTRY
    max_total_bullets: Optional[int] = DEFAULT_MAX_TOTAL_BULLETS
    summary_skill_count: int = DEFAULT_SUMMARY_SKILL_COUNT
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH
    use_stemming: bool = True
    phrase_weight_multiplier: float = DEFAULT_PHRASE_WEIGHT_MULTIPLIER
    proper_noun_bonus: float = DEFAULT_PROPER_NOUN_BONUS
    extra_stopwords: List[str] = field(default_factory=list)
    extra_phrases: List[str] = field(default_factory=list)
    fallback_title: str = DEFAULT_FALLBACK_TITLE
    summary_connective: str = DEFAULT_SUMMARY_CONNECTIVE


def load_targeting_config(
    config_path: Optional[Path] = None,
    overrides: Optional[List[str]] = None,
) -> TargetingConfig:
    """
    Resolve the targeting configuration.

    Args:
        config_path: Optional YAML file (defaults to TAILOR_TARGETING_CONFIG if set)
        overrides: Optional dotlist overrides, applied last

    Returns:
        TargetingConfig instance

    Raises:
        TargetingConfigError: If the file is unreadable, or a key/type is invalid
    """
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.getenv(CONFIG_ENV_VAR))

    schema = OmegaConf.structured(TargetingConfig)
    layers = [schema]

    try:
        if config_path is not None:
            layers.append(OmegaConf.load(config_path))
            _log_debug(f"Loaded targeting config from {config_path}")
        if overrides:
            layers.append(OmegaConf.from_dotlist(list(overrides)))
        merged = OmegaConf.merge(*layers)
        config = OmegaConf.to_object(merged)
    except (OSError, YAMLError, OmegaConfBaseException) as e:
        raise TargetingConfigError("Invalid targeting configuration", config_path, e) from e

    if config.max_bullets_per_entry < 0:
        raise TargetingConfigError("max_bullets_per_entry must be >= 0", config_path)
    if config.max_total_bullets is not None and config.max_total_bullets < 0:
        raise TargetingConfigError("max_total_bullets must be >= 0", config_path)

    return config
