from eval_analytics.models.comment import CommentRecord
from eval_analytics.models.enumerations import (
    LayoutStrategy,
    Sentiment,
    SentimentLabel,
)
from eval_analytics.models.score_record import (
    ArrayFormatRecord,
    ObjectFormatRecord,
    ScoreRecordFormat,
    ScoreStats,
    detect_format,
    normalize_field_records,
    normalize_score_record,
)

__all__ = [
    "ArrayFormatRecord",
    "CommentRecord",
    "LayoutStrategy",
    "ObjectFormatRecord",
    "ScoreRecordFormat",
    "ScoreStats",
    "Sentiment",
    "SentimentLabel",
    "detect_format",
    "normalize_field_records",
    "normalize_score_record",
]
