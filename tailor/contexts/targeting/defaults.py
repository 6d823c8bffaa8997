"""
Default values for resume targeting.

Provides shared defaults used by:
- config_resolver.py (TargetingConfig field defaults)
- bullet_selector.py / composer.py (when called without a config)
"""

# Bullet budget: strongest points per role, optional cap across the resume
DEFAULT_MAX_BULLETS_PER_ENTRY = 4
DEFAULT_MAX_TOTAL_BULLETS = None

# Summary composition
DEFAULT_SUMMARY_SKILL_COUNT = 3
DEFAULT_FALLBACK_TITLE = "Professional"
DEFAULT_SUMMARY_CONNECTIVE = "Focused on delivering measurable results in fast-moving teams."
