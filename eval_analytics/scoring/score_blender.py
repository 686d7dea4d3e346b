"""
scoring/score_blender.py

Blends an automated similarity/accuracy score with an expertise-weighted
human star rating into one final score.

Formula:
    conf      = 1 − ((auto − 0.5) × 2)²                   (U-shaped confidence)
    raw_a     = max(0.1, 0.4 × conf)
    raw_u     = 0.6 × expertise
    w_a       = raw_a / (raw_a + raw_u),   w_u = 1 − w_a
    rating_n  = user_rating / 5
    adjusted  = min(1, rating_n × expertise)
    combined  = auto × w_a + adjusted × w_u
    agreement = 1 − |auto − rating_n|,      bonus = 0.1 × agreement
    final     = clamp(combined × (1 + bonus), 0, 1)

The confidence curve peaks at auto = 0.5, so an automated score sitting on
the decision boundary gets the largest automatic weight. This is the
observed behaviour of every accuracy and quality view and is kept as is.

Inputs are expected to be in their documented domains (auto in [0, 1],
rating in [0, 5], expertise in [1, 2]); normalization happens at the
ingestion boundary, see models/score_record.py.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import structlog

from eval_analytics.config import settings
from eval_analytics.scoring.utils import camel_record, clamp

logger = structlog.get_logger(__name__)


def u_shaped_confidence(score: float) -> float:
    """Confidence in an automated score: 1.0 at 0.5, 0.0 at both extremes."""
    distance_from_middle = abs(clamp(score) - 0.5)
    return 1 - (distance_from_middle * 2) ** 2


@dataclass(frozen=True)
class ScoreInput:
    """Canonical numeric triple consumed by ScoreBlender."""
    automated_score: float                 # [0, 1]
    user_rating: Optional[float] = None    # [0, 5] stars, None = not evaluated
    expertise_multiplier: float = 1.0      # [1.0, 2.0]


@dataclass(frozen=True)
class ScoreResult:
    """Output of ScoreBlender.blend()."""
    automated_score: float
    normalized_rating: Optional[float]     # rating / 5, None without a rating
    adjusted_user_rating: Optional[float]  # min(1, rating_n × expertise)
    automatic_confidence: float            # U-shaped, [0, 1]
    raw_automatic_weight: float
    raw_user_weight: float
    automatic_weight: float                # w_a + w_u == 1
    user_weight: float
    agreement: float                       # [0, 1]
    agreement_bonus: float                 # [0, 0.1]
    combined_score: float
    final_score: float                     # [0, 1]
    is_capped: bool
    expertise_multiplier: float

    @property
    def has_user_rating(self) -> bool:
        return self.normalized_rating is not None

    def as_record(self) -> Dict[str, Any]:
        """camelCase dict (automaticWeight, finalScore, isCapped, ...)."""
        return camel_record(self)


class ScoreBlender:
    """Combine automated and human scores with confidence-dependent weights."""

    def __init__(
        self,
        automated_weight_base: Optional[float] = None,
        user_weight_base: Optional[float] = None,
        min_automated_weight: Optional[float] = None,
        agreement_bonus_factor: Optional[float] = None,
        rating_scale_max: Optional[float] = None,
    ):
        self.automated_weight_base = (
            settings.AUTOMATED_WEIGHT_BASE if automated_weight_base is None else automated_weight_base
        )
        self.user_weight_base = (
            settings.USER_WEIGHT_BASE if user_weight_base is None else user_weight_base
        )
        self.min_automated_weight = (
            settings.MIN_AUTOMATED_WEIGHT if min_automated_weight is None else min_automated_weight
        )
        self.agreement_bonus_factor = (
            settings.AGREEMENT_BONUS_FACTOR if agreement_bonus_factor is None else agreement_bonus_factor
        )
        self.rating_scale_max = (
            settings.RATING_SCALE_MAX if rating_scale_max is None else rating_scale_max
        )

    def blend(
        self,
        automated_score: float,
        user_rating: Optional[float] = None,
        expertise_multiplier: float = 1.0,
    ) -> ScoreResult:
        """
        Blend an automated score with an optional human rating.

        Args:
            automated_score: Machine-computed score in [0, 1].
            user_rating: Star rating in [0, 5], or None when nobody rated.
            expertise_multiplier: Rater weight in [1.0, 2.0].

        Returns:
            ScoreResult with the final score and the full weighting breakdown.

        Examples:
            >>> result = ScoreBlender().blend(0.8, 4.0, 1.5)
            >>> round(result.automatic_weight, 4), result.final_score, result.is_capped
            (0.2215, 1.0, True)
            >>> ScoreBlender().blend(0.73, None, 1.5).final_score
            0.73
        """
        confidence = u_shaped_confidence(automated_score)
        raw_automatic = max(self.min_automated_weight, self.automated_weight_base * confidence)

        if user_rating is None:
            result = ScoreResult(
                automated_score=automated_score,
                normalized_rating=None,
                adjusted_user_rating=None,
                automatic_confidence=confidence,
                raw_automatic_weight=raw_automatic,
                raw_user_weight=0.0,
                automatic_weight=1.0,
                user_weight=0.0,
                agreement=0.0,
                agreement_bonus=0.0,
                combined_score=automated_score,
                final_score=automated_score,
                is_capped=False,
                expertise_multiplier=expertise_multiplier,
            )
            logger.debug("score_blended", automated_score=automated_score, has_rating=False)
            return result

        normalized_rating = user_rating / self.rating_scale_max
        raw_user = self.user_weight_base * expertise_multiplier

        automatic_weight = raw_automatic / (raw_automatic + raw_user)
        user_weight = 1 - automatic_weight

        adjusted_rating = min(1.0, normalized_rating * expertise_multiplier)
        combined = automated_score * automatic_weight + adjusted_rating * user_weight

        agreement = 1 - abs(automated_score - normalized_rating)
        agreement_bonus = agreement * self.agreement_bonus_factor

        boosted = combined * (1 + agreement_bonus)
        final_score = clamp(boosted)

        result = ScoreResult(
            automated_score=automated_score,
            normalized_rating=normalized_rating,
            adjusted_user_rating=adjusted_rating,
            automatic_confidence=confidence,
            raw_automatic_weight=raw_automatic,
            raw_user_weight=raw_user,
            automatic_weight=automatic_weight,
            user_weight=user_weight,
            agreement=agreement,
            agreement_bonus=agreement_bonus,
            combined_score=combined,
            final_score=final_score,
            is_capped=boosted > 1,
            expertise_multiplier=expertise_multiplier,
        )

        logger.debug(
            "score_blended",
            automated_score=automated_score,
            user_rating=user_rating,
            expertise_multiplier=expertise_multiplier,
            automatic_weight=automatic_weight,
            agreement_bonus=agreement_bonus,
            final_score=final_score,
            is_capped=result.is_capped,
        )
        return result

    def blend_input(self, score_input: ScoreInput) -> ScoreResult:
        """Blend a normalized ScoreInput."""
        return self.blend(
            score_input.automated_score,
            score_input.user_rating,
            score_input.expertise_multiplier,
        )


def blend(
    automated_score: float,
    user_rating: Optional[float] = None,
    expertise_multiplier: float = 1.0,
) -> ScoreResult:
    """Blend with the configured default weighting."""
    return ScoreBlender().blend(automated_score, user_rating, expertise_multiplier)
