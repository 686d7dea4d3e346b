"""
Component Accuracy Sub-Scores
eval_analytics/scoring/component_scores.py

Automated scores that feed ScoreBlender as `automated_score`:

  Metadata        = 0.5 × Levenshtein + 0.3 × TokenMatching + 0.2 × SpecialChar
  Research field  = 0.4 × ExactMatch  + 0.3 × TopN          + 0.3 × PositionScore

Weights come from Settings (W_META_*, W_FIELD_*) and are validated to sum
to 1.0 there.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from eval_analytics.config import settings
from eval_analytics.scoring.score_blender import ScoreBlender, ScoreResult
from eval_analytics.scoring.utils import camel_record, clamp, weighted_mean

_SPECIAL_CHAR_RE = re.compile(r"[^\w\s]")

# Ground truth at rank 0..4 → position score; anything lower scores 0
POSITION_SCORES: Dict[int, float] = {0: 1.0, 1: 0.8, 2: 0.6, 3: 0.4, 4: 0.2}
TOP_N = 3


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

@dataclass
class MetadataAccuracyResult:
    """Output of MetadataAccuracyCalculator.calculate()."""
    levenshtein: float      # 1 − distance / max_len
    token_matching: float   # shared whitespace tokens / max token count
    special_char: float     # shared punctuation / max punctuation count
    overall_score: float    # weighted sum, ≤ 1
    distance: int
    weights: Dict[str, float] = field(default_factory=dict)

    def as_record(self) -> dict:
        return camel_record(self)


def _overlap_ratio(original: List[str], extracted: List[str]) -> float:
    """Fraction of extracted items found in original, over the longer list."""
    longest = max(len(original), len(extracted))
    if longest == 0:
        return 1.0
    original_set = set(original)
    matches = sum(1 for item in extracted if item in original_set)
    return min(1.0, matches / longest)


class MetadataAccuracyCalculator:
    """Compare an extracted metadata value (title, DOI, venue, ...) to ground truth."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = weights or settings.metadata_weights

    def calculate(self, reference: Optional[str], extracted: Optional[str]) -> MetadataAccuracyResult:
        reference = reference or ""
        extracted = extracted or ""

        if not reference and not extracted:
            return MetadataAccuracyResult(1.0, 1.0, 1.0, 1.0, 0, dict(self.weights))
        if not reference or not extracted:
            return MetadataAccuracyResult(
                0.0, 0.0, 0.0, 0.0, max(len(reference), len(extracted)), dict(self.weights)
            )

        distance = Levenshtein.distance(reference, extracted)
        lev_score = Levenshtein.normalized_similarity(reference, extracted)
        token_score = _overlap_ratio(reference.split(), extracted.split())
        special_score = _overlap_ratio(
            _SPECIAL_CHAR_RE.findall(reference), _SPECIAL_CHAR_RE.findall(extracted)
        )

        overall = min(
            1.0,
            lev_score * self.weights["levenshtein"]
            + token_score * self.weights["token_matching"]
            + special_score * self.weights["special_char"],
        )

        return MetadataAccuracyResult(
            levenshtein=lev_score,
            token_matching=token_score,
            special_char=special_score,
            overall_score=overall,
            distance=distance,
            weights=dict(self.weights),
        )


# ---------------------------------------------------------------------------
# Research field
# ---------------------------------------------------------------------------

@dataclass
class ResearchFieldAccuracyResult:
    """Output of ResearchFieldAccuracyCalculator.calculate()."""
    exact_match: float
    top_n: float
    position_score: float
    recall: float
    precision: float
    f1_score: float
    found_position: Optional[int]   # 1-based rank, None if absent
    total_predictions: int
    overall_score: float

    def as_record(self) -> dict:
        return camel_record(self)


class ResearchFieldAccuracyCalculator:
    """Score where the ground-truth research field lands in a ranked prediction list."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = weights or settings.research_field_weights

    def calculate(self, ground_truth: Optional[str], predictions: Sequence) -> ResearchFieldAccuracyResult:
        """
        Args:
            ground_truth: Reference field label.
            predictions: Ranked labels, either strings or dicts with "name"/"field".
        """
        names = [self._prediction_name(p) for p in predictions or []]
        target = (ground_truth or "").strip().lower()

        position = -1
        if target:
            for index, name in enumerate(names):
                if name.strip().lower() == target:
                    position = index
                    break

        exact_match = 1.0 if position == 0 else 0.0
        recall = 1.0 if position >= 0 else 0.0
        top_n = 1.0 if 0 <= position < TOP_N else 0.0
        position_score = POSITION_SCORES.get(position, 0.0)
        f1 = 2 * exact_match * recall / (exact_match + recall) if exact_match and recall else 0.0

        overall = (
            exact_match * self.weights["exact_match"]
            + top_n * self.weights["top_n"]
            + position_score * self.weights["position_score"]
        )

        return ResearchFieldAccuracyResult(
            exact_match=exact_match,
            top_n=top_n,
            position_score=position_score,
            recall=recall,
            precision=exact_match,
            f1_score=f1,
            found_position=position + 1 if position >= 0 else None,
            total_predictions=len(names),
            overall_score=overall,
        )

    @staticmethod
    def _prediction_name(prediction) -> str:
        if isinstance(prediction, str):
            return prediction
        if isinstance(prediction, dict):
            return prediction.get("name") or prediction.get("field") or ""
        return str(prediction)


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------

def weighted_component_score(scores: Dict[str, float], weights: Dict[str, float]) -> float:
    """Weighted mean of the component scores that have a weight; 0.0 if none do."""
    return weighted_mean(scores, weights)


@dataclass
class BalancedScore:
    """Output of balanced_overall_score()."""
    automated_score: float
    importance_factor: float
    final_score: float
    blend: ScoreResult

    def as_record(self) -> dict:
        record = camel_record(self)
        record["blend"] = self.blend.as_record()
        return record


def balanced_overall_score(
    component_scores: Dict[str, float],
    component_weights: Dict[str, float],
    user_rating: Optional[float],
    expertise_multiplier: float = 1.0,
    importance_factor: float = 1.0,
    blender: Optional[ScoreBlender] = None,
) -> BalancedScore:
    """
    Blend a weighted multi-component automated score with a user rating.

    The blended final score is scaled by importance_factor and clamped to [0, 1].
    """
    automated = weighted_component_score(component_scores, component_weights)
    result = (blender or ScoreBlender()).blend(automated, user_rating, expertise_multiplier)
    return BalancedScore(
        automated_score=automated,
        importance_factor=importance_factor,
        final_score=clamp(result.final_score * importance_factor),
        blend=result,
    )
