# wordcloud/layout.py
"""
Word Cloud Layout Engine

Places a weighted word list on a width × height canvas.

Strategies:
  spiral  - Archimedean spiral from the centre, AABB collision (5px padding),
            10px canvas margin, up to 500 attempts, random rotation jitter
  grid    - ceil(sqrt(n · width/height)) columns, one word per cell
  bubble  - circles on an outward spiral from the centre, 8px separation,
            up to 300 attempts
  wave    - five rows with a sinusoidal vertical offset per column

Spiral and bubble drop a word once its attempt budget is exhausted. Grid and
wave always place every word they take.

Coordinates:
  text layouts  → (x, y) is the top-left corner of the word's box
  bubble        → (x, y) is the circle centre
"""

import math
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import structlog

from eval_analytics.config import settings
from eval_analytics.core.exceptions import InvalidLayoutException
from eval_analytics.models.enumerations import LayoutStrategy, Sentiment
from eval_analytics.scoring.utils import camel_record
from eval_analytics.wordcloud.word_extractor import WordEntry

logger = structlog.get_logger(__name__)

DEFAULT_MAX_WORDS: Dict[LayoutStrategy, int] = {
    LayoutStrategy.SPIRAL: 100,
    LayoutStrategy.GRID: 80,
    LayoutStrategy.BUBBLE: 60,
    LayoutStrategy.WAVE: 60,
}

# (min, max) font size; bubble scales the radius instead
SIZE_RANGES: Dict[LayoutStrategy, Tuple[float, float]] = {
    LayoutStrategy.SPIRAL: (12.0, 64.0),
    LayoutStrategy.GRID: (14.0, 48.0),
    LayoutStrategy.BUBBLE: (25.0, 70.0),
    LayoutStrategy.WAVE: (12.0, 42.0),
}

CHAR_WIDTH_FACTOR = 0.6
LINE_HEIGHT_FACTOR = 1.2

SPIRAL_STEP = 0.5
SPIRAL_PADDING = 5.0
SPIRAL_MARGIN = 10.0
SPIRAL_JITTER_DEGREES = 20.0

BUBBLE_ANGLE_STEP = 0.3
BUBBLE_DISTANCE_STEP = 2.0
BUBBLE_START_DISTANCE = 50.0
BUBBLE_DISTANCE_PER_INDEX = 8.0
BUBBLE_PADDING = 8.0
BUBBLE_MIN_FONT = 10.0
BUBBLE_FONT_RATIO = 0.35

WAVE_ROWS = 5
WAVE_AMPLITUDE = 30.0
WAVE_ROTATION_DEGREES = 15.0


@dataclass
class PlacedWord:
    """A WordEntry with its position on the canvas."""
    word: str
    count: int
    dominant_sentiment: Sentiment
    positive_ratio: float
    neutral_ratio: float
    negative_ratio: float
    x: float
    y: float
    size: float
    width: Optional[float] = None
    height: Optional[float] = None
    rotation: float = 0.0
    radius: Optional[float] = None
    avg_score: float = 0.5
    components: List[str] = field(default_factory=list)
    sample_comments: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: WordEntry, **placement: Any) -> "PlacedWord":
        return cls(
            word=entry.word,
            count=entry.count,
            dominant_sentiment=entry.dominant_sentiment,
            positive_ratio=entry.positive_ratio,
            neutral_ratio=entry.neutral_ratio,
            negative_ratio=entry.negative_ratio,
            avg_score=entry.avg_score,
            components=list(entry.components),
            sample_comments=list(entry.sample_comments),
            **placement,
        )

    @property
    def is_bubble(self) -> bool:
        return self.radius is not None

    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) of the box, or of the circle's square."""
        if self.is_bubble:
            return (self.x - self.radius, self.y - self.radius,
                    self.x + self.radius, self.y + self.radius)
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def as_record(self) -> Dict[str, Any]:
        record = camel_record(self)
        return {k: v for k, v in record.items() if v is not None}


def scale(count: int, max_count: int, min_size: float, max_size: float) -> float:
    """Linear count → size, max_count maps to max_size."""
    return min_size + (count / max_count) * (max_size - min_size)


def text_box(word: str, size: float) -> Tuple[float, float]:
    return len(word) * size * CHAR_WIDTH_FACTOR, size * LINE_HEIGHT_FACTOR


def fitted_sizes(words: Sequence[WordEntry], strategy: LayoutStrategy,
                 width: float, height: float) -> List[float]:
    """
    Font sizes for the grid and wave layouts.

    Every size is scaled by one shared factor (≤ 1) so the largest text box
    fits the canvas. A shared factor keeps sizes ordered by count; on a
    narrow canvas sizes may fall below the strategy's minimum.
    """
    max_count = words[0].count
    min_size, max_size = SIZE_RANGES[strategy]
    sizes = [scale(entry.count, max_count, min_size, max_size) for entry in words]

    factor = 1.0
    for entry, size in zip(words, sizes):
        w, h = text_box(entry.word, size)
        if w > width:
            factor = min(factor, width / w)
        if h > height:
            factor = min(factor, height / h)
    return [size * factor for size in sizes]


def _clamp_box(x: float, y: float, w: float, h: float,
               width: float, height: float) -> Tuple[float, float]:
    x = min(max(x, 0.0), max(width - w, 0.0))
    y = min(max(y, 0.0), max(height - h, 0.0))
    return x, y


class WordCloudLayout:
    """
    Compute word placements for one of the four strategies.

    The only randomness is the spiral rotation jitter, drawn from `rng`.
    Pass a seeded random.Random for reproducible output.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        spiral_max_attempts: Optional[int] = None,
        bubble_max_attempts: Optional[int] = None,
    ):
        self.rng = rng or random.Random()
        self.spiral_max_attempts = (
            settings.WORDCLOUD_SPIRAL_MAX_ATTEMPTS if spiral_max_attempts is None else spiral_max_attempts
        )
        self.bubble_max_attempts = (
            settings.WORDCLOUD_BUBBLE_MAX_ATTEMPTS if bubble_max_attempts is None else bubble_max_attempts
        )

    def layout(
        self,
        words: Sequence[WordEntry],
        width: float,
        height: float,
        strategy: Union[LayoutStrategy, str] = LayoutStrategy.SPIRAL,
        max_words: Optional[int] = None,
    ) -> List[PlacedWord]:
        """
        Args:
            words: Word table, any order.
            width, height: Canvas size in pixels, both > 0.
            strategy: LayoutStrategy or its string value.
            max_words: Cap on words taken; defaults per strategy.

        Returns:
            Placed words, highest count first. Spiral and bubble may return
            fewer words than they took.

        Raises:
            InvalidLayoutException: unknown strategy, non-positive canvas,
                or negative max_words.
        """
        strategy = self._resolve_strategy(strategy)
        if width <= 0 or height <= 0:
            raise InvalidLayoutException(
                f"Canvas must be positive, got {width}x{height}", strategy=strategy.value
            )
        if max_words is None:
            max_words = DEFAULT_MAX_WORDS[strategy]
        if max_words < 0:
            raise InvalidLayoutException(
                f"max_words must be >= 0, got {max_words}", strategy=strategy.value
            )

        # sorted() is stable, equal counts keep their input order
        top = sorted(words, key=lambda w: w.count, reverse=True)[:max_words]
        if not top:
            return []

        placer = {
            LayoutStrategy.SPIRAL: self._spiral,
            LayoutStrategy.GRID: self._grid,
            LayoutStrategy.BUBBLE: self._bubble,
            LayoutStrategy.WAVE: self._wave,
        }[strategy]
        placed = placer(top, width, height)

        logger.info(
            "wordcloud_layout_computed",
            strategy=strategy.value,
            requested=len(top),
            placed=len(placed),
            dropped=len(top) - len(placed),
            canvas=f"{width}x{height}",
        )
        return placed

    @staticmethod
    def _resolve_strategy(strategy: Union[LayoutStrategy, str]) -> LayoutStrategy:
        try:
            return LayoutStrategy(strategy)
        except ValueError:
            raise InvalidLayoutException(
                f"Unknown layout strategy '{strategy}'", strategy=str(strategy)
            ) from None

    def _spiral(self, words: List[WordEntry], width: float, height: float) -> List[PlacedWord]:
        placed: List[PlacedWord] = []
        center_x, center_y = width / 2, height / 2
        max_count = words[0].count
        min_size, max_size = SIZE_RANGES[LayoutStrategy.SPIRAL]

        for entry in words:
            size = scale(entry.count, max_count, min_size, max_size)
            w, h = text_box(entry.word, size)
            angle = radius = 0.0

            for _ in range(self.spiral_max_attempts):
                x = center_x + radius * math.cos(angle) - w / 2
                y = center_y + radius * math.sin(angle) - h / 2
                if (self._fits_margin(x, y, w, h, width, height)
                        and not self._box_collides(x, y, w, h, placed)):
                    rotation = (self.rng.random() - 0.5) * SPIRAL_JITTER_DEGREES
                    placed.append(PlacedWord.from_entry(
                        entry, x=x, y=y, size=size, width=w, height=h, rotation=rotation,
                    ))
                    break
                angle += SPIRAL_STEP
                radius += SPIRAL_STEP
            else:
                logger.debug("word_dropped", word=entry.word, strategy="spiral",
                             attempts=self.spiral_max_attempts)
        return placed

    @staticmethod
    def _fits_margin(x: float, y: float, w: float, h: float,
                     width: float, height: float) -> bool:
        return (x > SPIRAL_MARGIN and x + w < width - SPIRAL_MARGIN
                and y > SPIRAL_MARGIN and y + h < height - SPIRAL_MARGIN)

    @staticmethod
    def _box_collides(x: float, y: float, w: float, h: float,
                      placed: List[PlacedWord]) -> bool:
        pad = SPIRAL_PADDING
        return any(
            x < p.x + p.width + pad and x + w + pad > p.x
            and y < p.y + p.height + pad and y + h + pad > p.y
            for p in placed
        )

    def _grid(self, words: List[WordEntry], width: float, height: float) -> List[PlacedWord]:
        n = len(words)
        cols = math.ceil(math.sqrt(n * width / height))
        rows = math.ceil(n / cols)
        cell_w, cell_h = width / cols, height / rows
        sizes = fitted_sizes(words, LayoutStrategy.GRID, width, height)

        placed = []
        for index, (entry, size) in enumerate(zip(words, sizes)):
            col, row = index % cols, index // cols
            w, h = self._fitted_box(entry.word, size, width, height)
            x = col * cell_w + (cell_w - w) / 2
            y = row * cell_h + (cell_h - h) / 2
            x, y = _clamp_box(x, y, w, h, width, height)
            placed.append(PlacedWord.from_entry(
                entry, x=x, y=y, size=size, width=w, height=h, rotation=0.0,
            ))
        return placed

    @staticmethod
    def _fitted_box(word: str, size: float, width: float, height: float) -> Tuple[float, float]:
        # fitted sizes can overshoot the canvas by float rounding only
        w, h = text_box(word, size)
        return min(w, width), min(h, height)

    def _bubble(self, words: List[WordEntry], width: float, height: float) -> List[PlacedWord]:
        placed: List[PlacedWord] = []
        n = len(words)
        center_x, center_y = width / 2, height / 2
        max_count = words[0].count
        min_radius, max_radius = SIZE_RANGES[LayoutStrategy.BUBBLE]

        for index, entry in enumerate(words):
            radius = scale(entry.count, max_count, min_radius, max_radius)
            angle = index / n * 2 * math.pi
            distance = BUBBLE_START_DISTANCE + index * BUBBLE_DISTANCE_PER_INDEX

            for _ in range(self.bubble_max_attempts):
                x = center_x + distance * math.cos(angle)
                y = center_y + distance * math.sin(angle)
                inside = radius < x < width - radius and radius < y < height - radius
                if inside and not self._circle_collides(x, y, radius, placed):
                    placed.append(PlacedWord.from_entry(
                        entry, x=x, y=y, radius=radius,
                        size=max(BUBBLE_MIN_FONT, radius * BUBBLE_FONT_RATIO),
                    ))
                    break
                angle += BUBBLE_ANGLE_STEP
                distance += BUBBLE_DISTANCE_STEP
            else:
                logger.debug("word_dropped", word=entry.word, strategy="bubble",
                             attempts=self.bubble_max_attempts)
        return placed

    @staticmethod
    def _circle_collides(x: float, y: float, radius: float,
                         placed: List[PlacedWord]) -> bool:
        return any(
            math.hypot(x - p.x, y - p.y) < radius + p.radius + BUBBLE_PADDING
            for p in placed
        )

    def _wave(self, words: List[WordEntry], width: float, height: float) -> List[PlacedWord]:
        per_row = math.ceil(len(words) / WAVE_ROWS)
        x_spacing = width / (per_row + 1)
        y_spacing = height / (WAVE_ROWS + 1)
        sizes = fitted_sizes(words, LayoutStrategy.WAVE, width, height)

        placed = []
        for index, (entry, size) in enumerate(zip(words, sizes)):
            row, col = index // per_row, index % per_row
            w, h = self._fitted_box(entry.word, size, width, height)
            offset = math.sin(col / per_row * 2 * math.pi) * WAVE_AMPLITUDE
            center_x = (col + 1) * x_spacing
            center_y = (row + 1) * y_spacing + offset
            x, y = _clamp_box(center_x - w / 2, center_y - h / 2, w, h, width, height)
            placed.append(PlacedWord.from_entry(
                entry, x=x, y=y, size=size, width=w, height=h,
                rotation=math.sin((col + row) * 0.5) * WAVE_ROTATION_DEGREES,
            ))
        return placed


def layout(
    words: Sequence[WordEntry],
    width: float,
    height: float,
    strategy: Union[LayoutStrategy, str] = LayoutStrategy.SPIRAL,
    max_words: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[PlacedWord]:
    """Module-level shortcut for WordCloudLayout(rng).layout(...)."""
    return WordCloudLayout(rng=rng).layout(words, width, height, strategy, max_words)
