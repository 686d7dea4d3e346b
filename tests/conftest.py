# tests/conftest.py

"""
Pytest Fixtures - Shared test data for scoring and word cloud tests
"""

import random

import pytest

from eval_analytics.models.enumerations import Sentiment
from eval_analytics.scoring.score_blender import ScoreBlender
from eval_analytics.wordcloud.word_extractor import WordEntry


def make_entry(word, count, sentiment=Sentiment.NEUTRAL):
    """WordEntry with all of its count in one sentiment bucket."""
    return WordEntry(
        word=word,
        count=count,
        dominant_sentiment=sentiment,
        positive_ratio=1.0 if sentiment == Sentiment.POSITIVE else 0.0,
        neutral_ratio=1.0 if sentiment == Sentiment.NEUTRAL else 0.0,
        negative_ratio=1.0 if sentiment == Sentiment.NEGATIVE else 0.0,
    )


# =============================================================================
# SCORING FIXTURES
# =============================================================================

@pytest.fixture
def blender():
    return ScoreBlender()


@pytest.fixture
def sample_object_records():
    """Object-format records as emitted by the aggregation service."""
    return {
        "DOI Extraction": {
            "accuracyScores": {"mean": 0.92, "std": 0.05, "count": 12},
            "userRatings": {"mean": 0.8, "count": 4},
            "expertise": {"mean": 1.5},
        },
        "Title Extraction": {
            "scores": {"mean": 0.71},
            "rawUserRatings": {"mean": 3.5},
        },
        "Venue Extraction": {
            "automatedScore": 0.55,
        },
    }


@pytest.fixture
def sample_array_records():
    """Array-format records, one entry per metadata field."""
    return [
        {"id": "doi", "displayName": "DOI", "scores": {"mean": 0.9}, "userRating": 4.0},
        {"displayName": "Authors", "similarity": 0.62, "expertiseMultiplier": 1.7},
        {"name": "venue", "automatedScore": 1.4, "userRating": {"mean": 7.0}},
    ]


# =============================================================================
# WORD CLOUD FIXTURES
# =============================================================================

@pytest.fixture
def sample_comments():
    return [
        {"text": "The extraction was excellent and accurate", "componentName": "Metadata"},
        {"text": "Excellent research field prediction", "componentName": "Research Field"},
        {"text": "Some authors were missing and the venue was wrong", "componentName": "Metadata"},
        {"text": "Template properties look reasonable", "componentName": "Template"},
        {"text": None, "componentName": None},
    ]


@pytest.fixture
def sample_words():
    """Twelve words with descending counts and mixed sentiment."""
    sentiments = [Sentiment.POSITIVE, Sentiment.NEUTRAL, Sentiment.NEGATIVE]
    words = [
        "extraction", "accurate", "missing", "template", "authors", "venue",
        "research", "problem", "fields", "wrong", "good", "title",
    ]
    return [
        make_entry(word, 24 - 2 * i, sentiments[i % 3])
        for i, word in enumerate(words)
    ]


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def entry_factory():
    return make_entry
