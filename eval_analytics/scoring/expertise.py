# scoring/expertise.py
"""
Expertise weighting for human evaluators.

Two scales are in use:

  Role multiplier (fed to ScoreBlender, [1.0, 2.0]):
    PhD Student 1.2, Researcher 1.5, PostDoc 1.7, Professor 2.0, other 1.0

  Expertise weight (evaluator profile, [1, 5]):
    weight = role_weight × domain_multiplier × experience_multiplier × (1 + orkg_bonus)
    clamped to [1, 5]; orkg_bonus = 0.05 when the evaluator has used ORKG before.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from eval_analytics.core.exceptions import InvalidExpertiseException
from eval_analytics.scoring.utils import camel_record, clamp

logger = logging.getLogger(__name__)


ROLE_MULTIPLIERS: Dict[str, float] = {
    "PhD Student": 1.2,
    "Researcher": 1.5,
    "PostDoc": 1.7,
    "Professor": 2.0,
}
DEFAULT_ROLE_MULTIPLIER = 1.0

ROLE_WEIGHTS: Dict[str, float] = {
    "Professor": 5.0,
    "PostDoc": 4.0,
    "Senior Researcher": 4.0,
    "Researcher": 3.5,
    "PhD Student": 3.0,
    "Research Assistant": 2.5,
    "Master Student": 2.0,
    "Bachelor Student": 1.5,
    "Other": 1.0,
}

DOMAIN_EXPERTISE_WEIGHTS: Dict[str, float] = {
    "Expert": 2.0,
    "Advanced": 1.5,
    "Intermediate": 1.0,
    "Basic": 0.8,
    "Novice": 0.6,
}

EVALUATION_EXPERIENCE_WEIGHTS: Dict[str, float] = {
    "Extensive": 1.3,
    "Moderate": 1.1,
    "Limited": 1.0,
    "None": 0.9,
}

ORKG_BONUS = 0.05
EXPERT_THRESHOLD = 4.0
MEDIUM_THRESHOLD = 2.5


def role_multiplier(role: Optional[str]) -> float:
    """Multiplier applied to a rater's star rating; 1.0 for unknown roles."""
    if not role:
        return DEFAULT_ROLE_MULTIPLIER
    return ROLE_MULTIPLIERS.get(role.strip(), DEFAULT_ROLE_MULTIPLIER)


def weight_to_multiplier(expertise_weight: Optional[float]) -> float:
    """Map a [1, 5] expertise weight onto a multiplier (1 → 0.8, 5 → 1.6)."""
    if not expertise_weight:
        return 1.0
    return 0.8 + (expertise_weight - 1) * 0.2


def confidence_level(weight: float) -> str:
    if weight >= EXPERT_THRESHOLD:
        return "High"
    if weight >= MEDIUM_THRESHOLD:
        return "Medium"
    return "Low"


def is_expert(weight: float) -> bool:
    return weight >= EXPERT_THRESHOLD


@dataclass(frozen=True)
class ExpertiseWeight:
    """Output of ExpertiseCalculator.calculate()."""
    role_weight: float
    domain_multiplier: float
    experience_multiplier: float
    orkg_bonus: float
    final_weight: float          # [1, 5]

    @property
    def confidence_level(self) -> str:
        return confidence_level(self.final_weight)

    @property
    def is_expert(self) -> bool:
        return is_expert(self.final_weight)

    def describe(self) -> List[str]:
        return [
            f"Role Weight: {self.role_weight:.2f}",
            f"Domain Multiplier: {self.domain_multiplier:.2f}",
            f"Experience Multiplier: {self.experience_multiplier:.2f}",
            f"ORKG Bonus: {self.orkg_bonus * 100:.0f}%",
            f"Final Weight: {self.final_weight:.2f}/5",
        ]

    def as_record(self) -> dict:
        return camel_record(self)


class ExpertiseCalculator:
    """Calculate an evaluator's expertise weight from their profile."""

    MIN_WEIGHT = 1.0
    MAX_WEIGHT = 5.0

    def calculate(
        self,
        role: Optional[str],
        domain_expertise: str,
        evaluation_experience: str,
        orkg_experience: str = "never",
    ) -> ExpertiseWeight:
        """
        Args:
            role: Academic role; unknown roles count as "Other".
            domain_expertise: One of DOMAIN_EXPERTISE_WEIGHTS.
            evaluation_experience: One of EVALUATION_EXPERIENCE_WEIGHTS.
            orkg_experience: "used" grants a 5% bonus.

        Raises:
            InvalidExpertiseException: unknown domain or experience level.

        Examples:
            >>> ExpertiseCalculator().calculate("PostDoc", "Advanced", "Moderate").final_weight
            5.0
        """
        if domain_expertise not in DOMAIN_EXPERTISE_WEIGHTS:
            raise InvalidExpertiseException("domain expertise", domain_expertise)
        if evaluation_experience not in EVALUATION_EXPERIENCE_WEIGHTS:
            raise InvalidExpertiseException("evaluation experience", evaluation_experience)

        role_weight = ROLE_WEIGHTS.get(role, ROLE_WEIGHTS["Other"])
        domain_mult = DOMAIN_EXPERTISE_WEIGHTS[domain_expertise]
        experience_mult = EVALUATION_EXPERIENCE_WEIGHTS[evaluation_experience]
        orkg_bonus = ORKG_BONUS if orkg_experience == "used" else 0.0

        combined = role_weight * domain_mult * experience_mult * (1 + orkg_bonus)
        final_weight = clamp(combined, self.MIN_WEIGHT, self.MAX_WEIGHT)

        logger.info(
            "expertise_calculated",
            extra={
                "role": role,
                "domain_expertise": domain_expertise,
                "evaluation_experience": evaluation_experience,
                "combined_weight": combined,
                "final_weight": final_weight,
            },
        )

        return ExpertiseWeight(
            role_weight=role_weight,
            domain_multiplier=domain_mult,
            experience_multiplier=experience_mult,
            orkg_bonus=orkg_bonus,
            final_weight=final_weight,
        )

    @staticmethod
    def validate_profile(profile: dict) -> bool:
        """True when role, domain expertise and evaluation experience are all known."""
        role = profile.get("role")
        domain = profile.get("domainExpertise")
        experience = profile.get("evaluationExperience")
        if not role or not domain or not experience:
            return False
        return (
            role in ROLE_WEIGHTS
            and domain in DOMAIN_EXPERTISE_WEIGHTS
            and experience in EVALUATION_EXPERIENCE_WEIGHTS
        )
