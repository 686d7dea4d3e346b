# tests/test_component_scores.py
import pytest

from eval_analytics.scoring.component_scores import (
    MetadataAccuracyCalculator,
    ResearchFieldAccuracyCalculator,
    balanced_overall_score,
    weighted_component_score,
)
from eval_analytics.scoring.score_blender import ScoreBlender


class TestMetadataAccuracy:

    def setup_method(self):
        self.calculator = MetadataAccuracyCalculator()

    def test_identical_values(self):
        result = self.calculator.calculate("Deep Learning for NLP", "Deep Learning for NLP")
        assert result.levenshtein == 1.0
        assert result.token_matching == 1.0
        assert result.special_char == 1.0
        assert result.overall_score == pytest.approx(1.0)
        assert result.distance == 0

    def test_both_empty(self):
        result = self.calculator.calculate(None, "")
        assert result.overall_score == 1.0
        assert result.distance == 0

    def test_one_side_empty(self):
        result = self.calculator.calculate("10.1000/xyz", None)
        assert result.overall_score == 0.0
        assert result.distance == len("10.1000/xyz")

    def test_weighted_sum(self):
        result = self.calculator.calculate("kitten", "sitting")
        assert result.distance == 3
        assert result.levenshtein == pytest.approx(4 / 7)
        assert result.token_matching == 0.0
        # neither side has punctuation
        assert result.special_char == 1.0
        assert result.overall_score == pytest.approx(0.5 * 4 / 7 + 0.2)

    def test_partial_token_overlap(self):
        result = self.calculator.calculate("A Survey of Graph Models", "Survey of Graph Networks")
        # Survey, of, Graph shared out of five tokens
        assert result.token_matching == pytest.approx(3 / 5)

    def test_special_characters(self):
        result = self.calculator.calculate("10.1000/xyz-123", "10.1000 xyz 123")
        # ".", "/", "-" vs "."
        assert result.special_char == pytest.approx(1 / 3)

    def test_custom_weights(self):
        calculator = MetadataAccuracyCalculator(
            weights={"levenshtein": 1.0, "token_matching": 0.0, "special_char": 0.0}
        )
        result = calculator.calculate("kitten", "sitting")
        assert result.overall_score == pytest.approx(4 / 7)
        assert result.as_record()["overallScore"] == result.overall_score


class TestResearchFieldAccuracy:

    def setup_method(self):
        self.calculator = ResearchFieldAccuracyCalculator()

    def test_exact_match_is_case_insensitive(self):
        result = self.calculator.calculate(
            "machine learning ", ["Machine Learning", "Computer Vision"]
        )
        assert result.exact_match == 1.0
        assert result.found_position == 1
        assert result.f1_score == 1.0
        assert result.overall_score == pytest.approx(1.0)

    def test_third_position(self):
        result = self.calculator.calculate(
            "Robotics", ["Machine Learning", "Computer Vision", "Robotics"]
        )
        assert result.exact_match == 0.0
        assert result.top_n == 1.0
        assert result.position_score == pytest.approx(0.6)
        assert result.recall == 1.0
        assert result.f1_score == 0.0
        assert result.overall_score == pytest.approx(0.3 + 0.3 * 0.6)

    def test_fifth_position_outside_top_n(self):
        predictions = ["A", "B", "C", "D", "Robotics"]
        result = self.calculator.calculate("Robotics", predictions)
        assert result.top_n == 0.0
        assert result.position_score == pytest.approx(0.2)
        assert result.total_predictions == 5

    def test_not_found(self):
        result = self.calculator.calculate("Robotics", ["Biology"])
        assert result.found_position is None
        assert result.overall_score == 0.0

    def test_dict_predictions(self):
        predictions = [{"name": "Chemistry"}, {"field": "Physics"}]
        result = self.calculator.calculate("physics", predictions)
        assert result.found_position == 2

    def test_empty_inputs(self):
        result = self.calculator.calculate(None, None)
        assert result.total_predictions == 0
        assert result.overall_score == 0.0


class TestComposites:

    def test_weighted_component_score(self):
        score = weighted_component_score({"a": 1.0, "b": 0.0}, {"a": 0.75, "b": 0.25})
        assert score == pytest.approx(0.75)

    def test_weighted_component_score_skips_unweighted(self):
        score = weighted_component_score({"a": 0.4, "b": 0.9}, {"a": 1.0})
        assert score == pytest.approx(0.4)

    def test_weighted_component_score_no_weights(self):
        assert weighted_component_score({"a": 0.4}, {}) == 0.0

    def test_balanced_score_without_rating(self):
        result = balanced_overall_score(
            {"a": 1.0, "b": 0.0}, {"a": 0.75, "b": 0.25}, user_rating=None, importance_factor=0.5
        )
        assert result.automated_score == pytest.approx(0.75)
        assert result.blend.final_score == pytest.approx(0.75)
        assert result.final_score == pytest.approx(0.375)

    def test_balanced_score_is_clamped(self):
        result = balanced_overall_score(
            {"a": 0.8}, {"a": 1.0}, user_rating=4.0, expertise_multiplier=1.5,
            importance_factor=1.2, blender=ScoreBlender(),
        )
        assert result.blend.is_capped
        assert result.final_score == 1.0

    def test_balanced_record_nests_blend(self):
        record = balanced_overall_score({"a": 0.5}, {"a": 1.0}, user_rating=2.5).as_record()
        assert record["finalScore"] == pytest.approx(0.55)
        assert record["blend"]["automaticWeight"] == pytest.approx(0.4)
