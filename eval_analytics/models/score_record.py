#eval_analytics/models/score_record.py
"""
Canonical schema for upstream score records.

The aggregation service emits per-field score records in two shapes:

  ARRAY:  [{"id": "doi", "displayName": "DOI Extraction", "scores": {...}, ...}]
  OBJECT: {"DOI Extraction": {"accuracyScores": {...}, "userRatings": {...}}}

and the score fields themselves drift between producers (accuracyScores.mean,
scores.mean, automatedScore; userRatings.mean normalized to [0, 1],
rawUserRatings.mean or userRating in stars; expertise.mean or
expertiseMultiplier). This module performs the single normalization pass
into ScoreInput, clamping every value into the domain ScoreBlender assumes.
"""

import math
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eval_analytics.core.exceptions import ScoreRecordFormatException
from eval_analytics.scoring.score_blender import ScoreInput
from eval_analytics.scoring.utils import clamp

RATING_MAX = 5.0
MIN_EXPERTISE = 1.0
MAX_EXPERTISE = 2.0


class ScoreRecordFormat(str, Enum):
    ARRAY = "array"
    OBJECT = "object"


class ScoreStats(BaseModel):
    """Summary statistics as produced by the aggregation service."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mean: Optional[float] = None
    std: Optional[float] = None
    count: Optional[int] = None
    weighted_mean: Optional[float] = Field(default=None, alias="weightedMean")
    normalized_mean: Optional[float] = Field(default=None, alias="normalizedMean")


class ObjectFormatRecord(BaseModel):
    """One component/field record, any producer."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    accuracy_scores: Optional[ScoreStats] = Field(default=None, alias="accuracyScores")
    scores: Optional[ScoreStats] = None
    automated_score: Optional[float] = Field(default=None, alias="automatedScore")
    similarity: Optional[float] = None

    user_ratings: Optional[ScoreStats] = Field(default=None, alias="userRatings")
    raw_user_ratings: Optional[ScoreStats] = Field(default=None, alias="rawUserRatings")
    user_rating: Optional[Union[float, ScoreStats]] = Field(default=None, alias="userRating")

    expertise: Optional[ScoreStats] = None
    expertise_multiplier: Optional[float] = Field(default=None, alias="expertiseMultiplier")

    def resolve_automated_score(self) -> Optional[float]:
        return _first_finite(
            self.accuracy_scores.mean if self.accuracy_scores else None,
            self.scores.mean if self.scores else None,
            self.automated_score,
            self.similarity,
        )

    def resolve_user_rating(self) -> Optional[float]:
        """Star rating in [0, 5], converting normalized means back to stars."""
        if isinstance(self.user_rating, ScoreStats):
            stars = _first_finite(
                self.user_rating.mean,
                _scale(self.user_rating.normalized_mean, RATING_MAX),
            )
        else:
            stars = _first_finite(self.user_rating)

        return _first_finite(
            self.raw_user_ratings.mean if self.raw_user_ratings else None,
            stars,
            _scale(self.user_ratings.mean, RATING_MAX) if self.user_ratings else None,
        )

    def resolve_expertise(self) -> float:
        value = _first_finite(
            self.expertise.mean if self.expertise else None,
            self.expertise_multiplier,
        )
        return MIN_EXPERTISE if value is None else value

    def to_score_input(self, record_key: Optional[str] = None) -> ScoreInput:
        automated = self.resolve_automated_score()
        if automated is None:
            raise ScoreRecordFormatException(
                "record has no automated score (accuracyScores.mean, scores.mean, "
                "automatedScore or similarity)",
                record_key=record_key,
            )
        rating = self.resolve_user_rating()
        return ScoreInput(
            automated_score=clamp(automated),
            user_rating=None if rating is None else clamp(rating, 0.0, RATING_MAX),
            expertise_multiplier=clamp(self.resolve_expertise(), MIN_EXPERTISE, MAX_EXPERTISE),
        )


class ArrayFormatRecord(ObjectFormatRecord):
    """List entry carrying its own identity."""
    id: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    name: Optional[str] = None

    @property
    def key(self) -> Optional[str]:
        return self.id or self.display_name or self.name


def _first_finite(*values: Optional[float]) -> Optional[float]:
    for value in values:
        if value is not None and math.isfinite(value):
            return float(value)
    return None


def _scale(value: Optional[float], factor: float) -> Optional[float]:
    return None if value is None else value * factor


def detect_format(raw: Any) -> ScoreRecordFormat:
    if isinstance(raw, list):
        return ScoreRecordFormat.ARRAY
    if isinstance(raw, Mapping):
        return ScoreRecordFormat.OBJECT
    raise ScoreRecordFormatException(
        f"expected a list or a mapping of score records, got {type(raw).__name__}"
    )


def normalize_score_record(raw: Mapping[str, Any], record_key: Optional[str] = None) -> ScoreInput:
    """Normalize one upstream record into the canonical ScoreInput."""
    try:
        record = ObjectFormatRecord.model_validate(raw)
    except ValidationError as e:
        raise ScoreRecordFormatException(f"invalid score record: {e}", record_key=record_key) from e
    return record.to_score_input(record_key)


def normalize_field_records(raw: Union[List[Mapping[str, Any]], Mapping[str, Any]]) -> Dict[str, ScoreInput]:
    """
    Normalize a collection of per-field records in either format.

    Returns:
        Mapping of field key (array: id / displayName / name; object: dict key)
        to ScoreInput.
    """
    fmt = detect_format(raw)
    normalized: Dict[str, ScoreInput] = {}

    if fmt is ScoreRecordFormat.ARRAY:
        for index, item in enumerate(raw):
            try:
                record = ArrayFormatRecord.model_validate(item)
            except ValidationError as e:
                raise ScoreRecordFormatException(
                    f"invalid score record at index {index}: {e}"
                ) from e
            if not record.key:
                raise ScoreRecordFormatException(
                    f"score record at index {index} has no id, displayName or name"
                )
            normalized[record.key] = record.to_score_input(record.key)
        return normalized

    for key, item in raw.items():
        normalized[str(key)] = normalize_score_record(item, record_key=str(key))
    return normalized
