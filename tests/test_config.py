# tests/test_config.py
import pytest
from pydantic import ValidationError

from eval_analytics.config import Settings, get_settings
from eval_analytics.core.logging import configure_logging


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.AUTOMATED_WEIGHT_BASE == 0.4
        assert s.USER_WEIGHT_BASE == 0.6
        assert s.MIN_AUTOMATED_WEIGHT == 0.1
        assert s.AGREEMENT_BONUS_FACTOR == 0.1
        assert s.WORDCLOUD_SPIRAL_MAX_ATTEMPTS == 500
        assert s.WORDCLOUD_BUBBLE_MAX_ATTEMPTS == 300

    def test_weight_groups(self):
        s = Settings()
        assert s.metadata_weights == {
            "levenshtein": 0.5, "token_matching": 0.3, "special_char": 0.2,
        }
        assert set(s.research_field_weights) == {"exact_match", "top_n", "position_score"}

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="Metadata weights must sum to 1.0"):
            Settings(W_META_LEVENSHTEIN=0.9)

    def test_bonus_factor_upper_bound(self):
        with pytest.raises(ValidationError):
            Settings(AGREEMENT_BONUS_FACTOR=0.2)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("WORDCLOUD_MIN_FREQUENCY", "5")
        assert Settings().WORDCLOUD_MIN_FREQUENCY == 5

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="LOUD")

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_configures_structlog(self, fmt):
        configure_logging(level="DEBUG", fmt=fmt)
