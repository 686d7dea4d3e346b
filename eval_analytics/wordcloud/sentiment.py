# wordcloud/sentiment.py
"""
Lexicon-based sentiment tagging for evaluator comments.

Scoring:
  - each lexicon hit contributes its weight, multiplied by an intensifier
    on the previous token ("very good" → 0.7 × 1.5)
  - a negation within the previous three tokens flips and damps the hit (× −0.8)
  - multi-word phrases ("could be better") are matched on the raw text
  - normalized = clamp((total / matches + 1) / 2, 0, 1); 0.5 with no hits

This is the default tagger for WordExtractor; any callable with the same
`analyze(text) -> SentimentResult` shape can replace it.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from eval_analytics.models.enumerations import Sentiment, SentimentLabel
from eval_analytics.scoring.utils import clamp

POSITIVE_WORDS: Dict[str, float] = {
    # strong
    "excellent": 1.0, "outstanding": 1.0, "perfect": 1.0, "amazing": 0.95,
    "exceptional": 0.95, "fantastic": 0.9, "superb": 0.9, "impressive": 0.85,
    "brilliant": 0.85,
    # medium
    "great": 0.8, "good": 0.7, "accurate": 0.75, "correct": 0.75, "helpful": 0.7,
    "useful": 0.7, "effective": 0.7, "appropriate": 0.65, "suitable": 0.65,
    "relevant": 0.65, "clear": 0.6, "nice": 0.6, "well": 0.6, "complete": 0.7,
    "comprehensive": 0.75, "thorough": 0.7, "detailed": 0.65,
    # light
    "fine": 0.5, "okay": 0.4, "ok": 0.4, "adequate": 0.45, "reasonable": 0.5,
    "acceptable": 0.45, "satisfactory": 0.5, "decent": 0.5,
    # extraction domain
    "matched": 0.7, "extracted": 0.6, "identified": 0.65, "recognized": 0.65,
    "aligned": 0.7, "consistent": 0.65, "reliable": 0.7, "precise": 0.75,
    "valid": 0.65, "properly": 0.6, "successfully": 0.7, "correctly": 0.7,
    "improved": 0.65, "innovative": 0.75, "intuitive": 0.7,
}

NEGATIVE_WORDS: Dict[str, float] = {
    # strong
    "terrible": -1.0, "awful": -1.0, "horrible": -1.0, "worst": -0.95,
    "useless": -0.9, "completely wrong": -0.95, "totally incorrect": -0.95,
    # medium
    "wrong": -0.75, "incorrect": -0.75, "bad": -0.7, "poor": -0.7,
    "inaccurate": -0.75, "missing": -0.65, "error": -0.7, "errors": -0.7,
    "failed": -0.75, "failure": -0.75, "problematic": -0.65, "issue": -0.5,
    "issues": -0.55, "problem": -0.55, "problems": -0.6, "confusing": -0.6,
    "confused": -0.55, "unclear": -0.55, "difficult": -0.5, "frustrating": -0.7,
    "disappointing": -0.65, "incomplete": -0.6,
    # light
    "minor": -0.3, "slight": -0.25, "somewhat": -0.2, "could be better": -0.4,
    "needs improvement": -0.45, "not ideal": -0.4, "limited": -0.4,
    # extraction domain
    "irrelevant": -0.7, "unrelated": -0.65, "mismatch": -0.6, "mismatched": -0.6,
    "misidentified": -0.7, "misextracted": -0.7, "inconsistent": -0.6,
    "unreliable": -0.7, "invalid": -0.65, "buggy": -0.7, "slow": -0.5,
    "crashed": -0.8, "unresponsive": -0.7,
}

INTENSIFIERS: Dict[str, float] = {
    "very": 1.5, "really": 1.4, "extremely": 1.7, "highly": 1.5,
    "incredibly": 1.6, "absolutely": 1.6, "completely": 1.5, "totally": 1.5,
    "quite": 1.2, "fairly": 1.1, "rather": 1.1, "somewhat": 0.7,
    "slightly": 0.6, "mostly": 1.1,
}

NEGATIONS = frozenset([
    "not", "no", "never", "neither", "n't", "none", "nothing", "nowhere",
    "hardly", "barely", "scarcely", "doesn't", "don't", "didn't", "won't",
    "wouldn't", "couldn't", "shouldn't",
])

NEGATION_WINDOW = 3
NEGATION_FACTOR = -0.8

_TOKEN_CLEAN_RE = re.compile(r"[^\w\s'-]")


def tokenize(text: str) -> List[str]:
    if not text:
        return []
    return _TOKEN_CLEAN_RE.sub(" ", text.lower()).split()


@dataclass
class SentimentResult:
    """Output of SentimentAnalyzer.analyze()."""
    score: float                 # raw sum of hits
    normalized_score: float      # [0, 1], 0.5 = neutral
    label: SentimentLabel
    confidence: float            # share of tokens that hit the lexicon, ×2, ≤ 1
    word_count: int
    positive_words: List[Tuple[str, float]] = field(default_factory=list)
    negative_words: List[Tuple[str, float]] = field(default_factory=list)
    is_empty: bool = False

    @property
    def category(self) -> Sentiment:
        return categorize(self.label)


def categorize(label: SentimentLabel) -> Sentiment:
    """Fold the five-way label into positive / neutral / negative."""
    if label in (SentimentLabel.POSITIVE, SentimentLabel.SLIGHTLY_POSITIVE):
        return Sentiment.POSITIVE
    if label in (SentimentLabel.NEGATIVE, SentimentLabel.SLIGHTLY_NEGATIVE):
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def label_for(normalized_score: float) -> SentimentLabel:
    if normalized_score >= 0.65:
        return SentimentLabel.POSITIVE
    if normalized_score >= 0.55:
        return SentimentLabel.SLIGHTLY_POSITIVE
    if normalized_score <= 0.35:
        return SentimentLabel.NEGATIVE
    if normalized_score <= 0.45:
        return SentimentLabel.SLIGHTLY_NEGATIVE
    return SentimentLabel.NEUTRAL


class SentimentAnalyzer:
    """Keyword sentiment with intensifiers and negation handling."""

    def analyze(self, text: str) -> SentimentResult:
        if not text or not text.strip():
            return SentimentResult(
                score=0.0,
                normalized_score=0.5,
                label=SentimentLabel.NEUTRAL,
                confidence=0.0,
                word_count=0,
                is_empty=True,
            )

        tokens = tokenize(text)
        lower_text = text.lower()
        total = 0.0
        matches = 0
        positives: List[Tuple[str, float]] = []
        negatives: List[Tuple[str, float]] = []

        for lexicon, bucket in ((POSITIVE_WORDS, positives), (NEGATIVE_WORDS, negatives)):
            for phrase, weight in lexicon.items():
                if " " in phrase and phrase in lower_text:
                    total += weight
                    matches += 1
                    bucket.append((phrase, weight))

        for index, token in enumerate(tokens):
            score = POSITIVE_WORDS.get(token) or NEGATIVE_WORDS.get(token)
            if not score:
                continue
            word = token
            score *= self._intensity(tokens, index)
            if self._is_negated(tokens, index):
                score *= NEGATION_FACTOR
                word = f"not {token}"

            total += score
            matches += 1
            if score > 0:
                positives.append((word, round(score, 2)))
            else:
                negatives.append((word, round(score, 2)))

        normalized = clamp((total / matches + 1) / 2) if matches else 0.5
        confidence = min(1.0, matches / max(len(tokens), 1) * 2)

        return SentimentResult(
            score=round(total, 2),
            normalized_score=round(normalized, 3),
            label=label_for(normalized),
            confidence=round(confidence, 2),
            word_count=len(tokens),
            positive_words=positives,
            negative_words=negatives,
        )

    @staticmethod
    def _intensity(tokens: List[str], index: int) -> float:
        if index == 0:
            return 1.0
        return INTENSIFIERS.get(tokens[index - 1], 1.0)

    @staticmethod
    def _is_negated(tokens: List[str], index: int) -> bool:
        for previous in tokens[max(0, index - NEGATION_WINDOW):index]:
            if previous in NEGATIONS or previous.endswith("n't"):
                return True
        return False
