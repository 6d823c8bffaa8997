"""
Unit tests for targeting configuration resolution.
"""

from pathlib import Path

import pytest

from tailor.contexts.targeting.config_resolver import (
    CONFIG_ENV_VAR,
    TargetingConfig,
    load_targeting_config,
)
from tailor.contexts.targeting.exceptions import TargetingConfigError


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.mark.unit
class TestLoadTargetingConfig:
    def test_defaults(self):
        """Test the default targeting config values."""
        config = load_targeting_config()
        assert isinstance(config, TargetingConfig)
        assert config == TargetingConfig()
        assert config.max_bullets_per_entry == 4
        assert config.max_total_bullets is None

    def test_dotlist_overrides(self):
        """Test dotlist overrides replace defaults."""
        config = load_targeting_config(overrides=["max_bullets_per_entry=3", "max_total_bullets=10"])
        assert config.max_bullets_per_entry == 3
        assert config.max_total_bullets == 10

    def test_yaml_file(self, tmp_path):
        """Test values load from a YAML config file."""
        path = tmp_path / "targeting.yaml"
        path.write_text(
            "max_bullets_per_entry: 2\n"
            "extra_phrases:\n  - feature flags\n"
            "fallback_title: Generalist\n"
        )
        config = load_targeting_config(path)
        assert config.max_bullets_per_entry == 2
        assert config.extra_phrases == ["feature flags"]
        assert config.fallback_title == "Generalist"
        assert config.summary_skill_count == 3

    def test_overrides_beat_file(self, tmp_path):
        """Test dotlist overrides take precedence over the file."""
        path = tmp_path / "targeting.yaml"
        path.write_text("max_bullets_per_entry: 2\n")
        config = load_targeting_config(path, overrides=["max_bullets_per_entry=5"])
        assert config.max_bullets_per_entry == 5

    def test_environment_variable(self, tmp_path, monkeypatch):
        """Test the config path is read from the environment."""
        path = tmp_path / "targeting.yaml"
        path.write_text("summary_skill_count: 5\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_targeting_config().summary_skill_count == 5

    def test_unknown_key(self):
        """Test an unknown config key is rejected."""
        with pytest.raises(TargetingConfigError, match="Invalid targeting configuration"):
            load_targeting_config(overrides=["max_bulets=3"])

    def test_wrong_type(self):
        """Test a wrongly typed config value is rejected."""
        with pytest.raises(TargetingConfigError):
            load_targeting_config(overrides=["max_bullets_per_entry=many"])

    def test_missing_file(self, tmp_path):
        """Test a missing config file is reported."""
        with pytest.raises(TargetingConfigError) as exc_info:
            load_targeting_config(tmp_path / "missing.yaml")
        assert exc_info.value.original_error is not None

    def test_negative_cap(self):
        """Test a negative bullet cap is rejected."""
        with pytest.raises(TargetingConfigError, match="max_bullets_per_entry must be >= 0"):
            load_targeting_config(overrides=["max_bullets_per_entry=-1"])


@pytest.mark.unit
def test_shipped_config_matches_defaults():
    """Test the shipped targeting.yaml matches the code defaults."""
    path = Path(__file__).parent.parent.parent / "configs" / "targeting.yaml"
    assert load_targeting_config(path) == TargetingConfig()
