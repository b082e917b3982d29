"""Tests for result models -- CategoryLikelihood, CategorizationResult."""

from __future__ import annotations

import math

from incremental_bayes.models import CategorizationResult, CategoryLikelihood


def _result() -> CategorizationResult:
    return CategorizationResult(
        likelihoods=[
            CategoryLikelihood("positive", -3.0, math.log(0.75), 0.75),
            CategoryLikelihood("negative", -4.1, math.log(0.25), 0.25),
        ],
        predicted_category="positive",
    )


class TestCategoryLikelihood:
    """Tests for the CategoryLikelihood dataclass."""

    def test_to_dict_uses_record_keys(self) -> None:
        item = CategoryLikelihood("spam", -1.5, -0.2, 0.8187)
        assert item.to_dict() == {
            "category": "spam",
            "logLikelihood": -1.5,
            "logProba": -0.2,
            "proba": 0.8187,
        }


class TestCategorizationResult:
    """Tests for the CategorizationResult dataclass."""

    def test_defaults_are_empty(self) -> None:
        result = CategorizationResult()
        assert result.likelihoods == []
        assert result.predicted_category is None
        assert result.confidence == 0.0
        assert result.probabilities == {}

    def test_confidence_is_top_probability(self) -> None:
        assert _result().confidence == 0.75

    def test_probabilities(self) -> None:
        assert _result().probabilities == {"positive": 0.75, "negative": 0.25}

    def test_to_dict(self) -> None:
        data = _result().to_dict()
        assert data["predictedCategory"] == "positive"
        assert [item["category"] for item in data["likelihoods"]] == ["positive", "negative"]
        assert data["likelihoods"][1]["proba"] == 0.25

    def test_empty_to_dict(self) -> None:
        assert CategorizationResult().to_dict() == {"likelihoods": [], "predictedCategory": None}

    def test_independent_default_lists(self) -> None:
        first = CategorizationResult()
        first.likelihoods.append(CategoryLikelihood("x", 0.0, 0.0, 1.0))
        assert CategorizationResult().likelihoods == []
