"""Application configuration with validation."""
from typing import Literal, Dict
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring and layout settings, overridable from the environment or .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Evaluation Analytics"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Score blending
    AUTOMATED_WEIGHT_BASE: float = Field(default=0.4, gt=0, le=1.0)
    USER_WEIGHT_BASE: float = Field(default=0.6, gt=0, le=1.0)
    MIN_AUTOMATED_WEIGHT: float = Field(default=0.1, gt=0, le=1.0)
    AGREEMENT_BONUS_FACTOR: float = Field(default=0.1, ge=0, le=0.1)
    RATING_SCALE_MAX: float = Field(default=5.0, gt=0)

    # Metadata accuracy weights
    W_META_LEVENSHTEIN: float = Field(default=0.5, ge=0.0, le=1.0)
    W_META_TOKEN: float = Field(default=0.3, ge=0.0, le=1.0)
    W_META_SPECIAL: float = Field(default=0.2, ge=0.0, le=1.0)

    # Research field accuracy weights
    W_FIELD_EXACT: float = Field(default=0.4, ge=0.0, le=1.0)
    W_FIELD_TOP_N: float = Field(default=0.3, ge=0.0, le=1.0)
    W_FIELD_POSITION: float = Field(default=0.3, ge=0.0, le=1.0)

    # Word cloud
    WORDCLOUD_SPIRAL_MAX_ATTEMPTS: int = Field(default=500, ge=1, le=10000)
    WORDCLOUD_BUBBLE_MAX_ATTEMPTS: int = Field(default=300, ge=1, le=10000)
    WORDCLOUD_MIN_WORD_LENGTH: int = Field(default=3, ge=1, le=20)
    WORDCLOUD_MIN_FREQUENCY: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def validate_component_weights(self):
        """Each component weight group must sum to 1.0."""
        for name, weights in self.component_weights.items():
            total = sum(weights.values())
            if abs(total - 1.0) > 0.001:
                raise ValueError(f"{name} weights must sum to 1.0, got {total}")
        return self

    @property
    def metadata_weights(self) -> Dict[str, float]:
        return {
            "levenshtein": self.W_META_LEVENSHTEIN,
            "token_matching": self.W_META_TOKEN,
            "special_char": self.W_META_SPECIAL,
        }

    @property
    def research_field_weights(self) -> Dict[str, float]:
        return {
            "exact_match": self.W_FIELD_EXACT,
            "top_n": self.W_FIELD_TOP_N,
            "position_score": self.W_FIELD_POSITION,
        }

    @property
    def component_weights(self) -> Dict[str, Dict[str, float]]:
        return {
            "Metadata": self.metadata_weights,
            "Research field": self.research_field_weights,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
