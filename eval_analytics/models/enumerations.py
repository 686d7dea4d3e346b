from enum import Enum

class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    SLIGHTLY_POSITIVE = "slightly_positive"
    NEUTRAL = "neutral"
    SLIGHTLY_NEGATIVE = "slightly_negative"
    NEGATIVE = "negative"

class LayoutStrategy(str, Enum):
    SPIRAL = "spiral"
    GRID = "grid"
    BUBBLE = "bubble"
    WAVE = "wave"
