# tests/test_word_extractor.py
import pytest

from eval_analytics.models.comment import CommentRecord
from eval_analytics.models.enumerations import Sentiment, SentimentLabel
from eval_analytics.wordcloud.sentiment import SentimentResult
from eval_analytics.wordcloud.word_extractor import (
    WordExtractor,
    dominant_sentiment,
    filter_words,
)


class NegativeTagger:
    """Tags every comment negative."""

    def analyze(self, text):
        return SentimentResult(
            score=-1.0,
            normalized_score=0.1,
            label=SentimentLabel.NEGATIVE,
            confidence=1.0,
            word_count=len(text.split()),
        )


class TestDominantSentiment:

    @pytest.mark.parametrize(
        "counts,expected",
        [
            ((2, 1, 1), Sentiment.POSITIVE),
            ((0, 0, 3), Sentiment.NEGATIVE),
            ((1, 1, 1), Sentiment.NEUTRAL),
            ((1, 0, 1), Sentiment.NEUTRAL),
            ((0, 2, 0), Sentiment.NEUTRAL),
        ],
    )
    def test_strict_majority(self, counts, expected):
        assert dominant_sentiment(*counts) == expected


class TestWordExtractor:

    def setup_method(self):
        self.extractor = WordExtractor()

    def test_extract_counts_and_order(self, sample_comments):
        words = self.extractor.extract(sample_comments)
        by_word = {w.word: w for w in words}

        assert words[0].word == "excellent"
        assert words[0].count == 2
        assert words[1].word == "extraction"
        assert by_word["wrong"].count == 1

    def test_stop_words_and_short_tokens_removed(self, sample_comments):
        words = {w.word for w in self.extractor.extract(sample_comments)}
        assert "the" not in words
        assert "was" not in words
        assert "some" not in words
        assert "and" not in words

    def test_numbers_removed(self):
        words = self.extractor.extract([{"text": "Found 2024 papers in 1999"}])
        assert [w.word for w in words] == ["found", "papers"]

    def test_sentiment_split(self, sample_comments):
        by_word = {w.word: w for w in self.extractor.extract(sample_comments)}

        excellent = by_word["excellent"]
        assert excellent.dominant_sentiment == Sentiment.POSITIVE
        assert excellent.positive_ratio == 1.0
        assert excellent.avg_score > 0.9

        wrong = by_word["wrong"]
        assert wrong.dominant_sentiment == Sentiment.NEGATIVE
        assert wrong.negative_ratio == 1.0

    def test_ratios_sum_to_one(self, sample_comments):
        for entry in self.extractor.extract(sample_comments):
            total = entry.positive_ratio + entry.neutral_ratio + entry.negative_ratio
            assert total == pytest.approx(1.0)

    def test_components_collected(self, sample_comments):
        by_word = {w.word: w for w in self.extractor.extract(sample_comments)}
        assert by_word["excellent"].components == ["Metadata", "Research Field"]

    def test_sample_comments_truncated_and_capped(self):
        text = "excellent " * 15
        words = self.extractor.extract([{"text": text}])
        entry = words[0]

        assert entry.count == 15
        assert len(entry.sample_comments) == 5
        assert entry.sample_comments[0]["text"] == text[:100] + "..."
        assert entry.sample_comments[0]["sentiment"] == "positive"

    def test_missing_component_is_unknown(self):
        words = self.extractor.extract([CommentRecord(text="Excellent output")])
        assert words[0].components == ["Unknown"]

    def test_min_length(self):
        words = self.extractor.extract([{"text": "doi found"}], min_length=4)
        assert [w.word for w in words] == ["found"]

    def test_explicit_zero_min_length_keeps_short_tokens(self):
        words = self.extractor.extract([{"text": "x ok doi"}], min_length=0)
        assert [w.word for w in words] == ["x", "ok", "doi"]

    def test_injected_tagger(self):
        extractor = WordExtractor(tagger=NegativeTagger())
        words = extractor.extract([{"text": "excellent extraction"}])
        assert all(w.dominant_sentiment == Sentiment.NEGATIVE for w in words)
        assert words[0].avg_score == pytest.approx(0.1)

    def test_empty_corpus(self):
        assert self.extractor.extract([]) == []

    def test_as_record(self, sample_comments):
        record = self.extractor.extract(sample_comments)[0].as_record()
        assert record["word"] == "excellent"
        assert "dominantSentiment" in record
        assert "sampleComments" in record


class TestFilterWords:

    def test_min_frequency(self, entry_factory):
        words = [entry_factory("alpha", 5), entry_factory("beta", 1)]
        assert [w.word for w in filter_words(words, min_frequency=2)] == ["alpha"]

    def test_default_min_frequency(self, entry_factory):
        words = [entry_factory("alpha", 2), entry_factory("beta", 1)]
        assert [w.word for w in filter_words(words)] == ["alpha"]

    def test_sentiment_filter(self, entry_factory):
        words = [
            entry_factory("alpha", 5, Sentiment.POSITIVE),
            entry_factory("beta", 5, Sentiment.NEGATIVE),
        ]
        assert [w.word for w in filter_words(words, 1, "negative")] == ["beta"]
        assert len(filter_words(words, 1, "all")) == 2
        assert len(filter_words(words, 1, Sentiment.POSITIVE)) == 1
