# wordcloud/word_extractor.py
"""
Comment corpus → word frequency table for the sentiment word cloud.

Every comment is tagged once; each of its tokens inherits that comment's
sentiment category and normalized score.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import structlog

from eval_analytics.config import settings
from eval_analytics.models.comment import CommentRecord
from eval_analytics.models.enumerations import Sentiment
from eval_analytics.scoring.utils import camel_record
from eval_analytics.wordcloud.sentiment import SentimentAnalyzer

logger = structlog.get_logger(__name__)

STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "as", "is", "was", "are", "were", "been", "be", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
    "that", "which", "who", "whom", "this", "these", "those", "it", "its", "i", "me",
    "my", "we", "our", "you", "your", "he", "she", "his", "her", "they", "their", "them",
    "what", "when", "where", "why", "how", "all", "each", "every", "both", "few", "more",
    "most", "other", "some", "such", "no", "not", "only", "same", "so", "than", "too",
    "very", "just", "can", "also", "into", "about", "after", "before", "between", "through",
    "during", "without", "again", "further", "then", "once", "here", "there", "any", "if",
])

MAX_SAMPLE_COMMENTS = 5
SAMPLE_LENGTH = 100

_WORD_CLEAN_RE = re.compile(r"[^\w\s-]")
_DIGITS_RE = re.compile(r"^\d+$")


@dataclass
class WordEntry:
    """One word of the cloud with its frequency and sentiment split."""
    word: str
    count: int
    dominant_sentiment: Sentiment
    positive_ratio: float
    neutral_ratio: float
    negative_ratio: float
    avg_score: float = 0.5
    components: List[str] = field(default_factory=list)
    sample_comments: List[Dict[str, str]] = field(default_factory=list)

    def as_record(self) -> Dict[str, Any]:
        return camel_record(self)


def dominant_sentiment(positive: int, neutral: int, negative: int) -> Sentiment:
    """Strict majority over both other categories, otherwise neutral."""
    if positive > neutral and positive > negative:
        return Sentiment.POSITIVE
    if negative > neutral and negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


class WordExtractor:
    """Aggregate comment tokens into WordEntry records."""

    def __init__(self, tagger: Optional[SentimentAnalyzer] = None):
        self.tagger = tagger or SentimentAnalyzer()

    def extract(
        self,
        comments: Iterable[Union[CommentRecord, Mapping[str, Any]]],
        min_length: Optional[int] = None,
    ) -> List[WordEntry]:
        """
        Args:
            comments: {text, componentName} records or CommentRecord instances.
            min_length: Shortest token kept; defaults to settings.WORDCLOUD_MIN_WORD_LENGTH.

        Returns:
            WordEntry list sorted by count, descending.
        """
        min_length = settings.WORDCLOUD_MIN_WORD_LENGTH if min_length is None else min_length
        buckets: Dict[str, Dict[str, Any]] = {}
        comment_count = 0

        for raw in comments:
            comment = raw if isinstance(raw, CommentRecord) else CommentRecord.model_validate(raw)
            comment_count += 1
            analysis = self.tagger.analyze(comment.text)
            category = analysis.category

            for word in self._tokenize(comment.text, min_length):
                bucket = buckets.setdefault(word, {
                    "count": 0,
                    "sentiments": {s: 0 for s in Sentiment},
                    "components": [],
                    "total_score": 0.0,
                    "samples": [],
                })
                bucket["count"] += 1
                bucket["sentiments"][category] += 1
                bucket["total_score"] += analysis.normalized_score
                if comment.component_name not in bucket["components"]:
                    bucket["components"].append(comment.component_name)
                if len(bucket["samples"]) < MAX_SAMPLE_COMMENTS:
                    bucket["samples"].append({
                        "text": self._sample(comment.text),
                        "sentiment": category.value,
                    })

        entries = [self._to_entry(word, bucket) for word, bucket in buckets.items()]
        entries.sort(key=lambda e: e.count, reverse=True)

        logger.info("words_extracted", comments=comment_count, unique_words=len(entries))
        return entries

    @staticmethod
    def _tokenize(text: str, min_length: int) -> List[str]:
        words = _WORD_CLEAN_RE.sub(" ", text.lower()).split()
        return [
            w for w in words
            if len(w) >= min_length and w not in STOP_WORDS and not _DIGITS_RE.match(w)
        ]

    @staticmethod
    def _sample(text: str) -> str:
        if len(text) > SAMPLE_LENGTH:
            return text[:SAMPLE_LENGTH] + "..."
        return text

    @staticmethod
    def _to_entry(word: str, bucket: Dict[str, Any]) -> WordEntry:
        counts = bucket["sentiments"]
        positive = counts[Sentiment.POSITIVE]
        neutral = counts[Sentiment.NEUTRAL]
        negative = counts[Sentiment.NEGATIVE]
        total = positive + neutral + negative
        return WordEntry(
            word=word,
            count=bucket["count"],
            dominant_sentiment=dominant_sentiment(positive, neutral, negative),
            positive_ratio=positive / total,
            neutral_ratio=neutral / total,
            negative_ratio=negative / total,
            avg_score=bucket["total_score"] / bucket["count"],
            components=list(bucket["components"]),
            sample_comments=list(bucket["samples"]),
        )


def filter_words(
    words: List[WordEntry],
    min_frequency: Optional[int] = None,
    sentiment: Optional[Union[Sentiment, str]] = None,
) -> List[WordEntry]:
    """Keep words seen at least min_frequency times, optionally of one dominant sentiment."""
    min_frequency = settings.WORDCLOUD_MIN_FREQUENCY if min_frequency is None else min_frequency
    kept = [w for w in words if w.count >= min_frequency]
    if sentiment and sentiment != "all":
        wanted = Sentiment(sentiment)
        kept = [w for w in kept if w.dominant_sentiment == wanted]
    return kept
