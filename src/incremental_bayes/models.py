"""Result types returned by the classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CategoryLikelihood:
    """Scores of one category for a categorized text.

    Attributes:
        category: Category name.
        log_likelihood: Log prior plus the summed log token probabilities.
        log_proba: Log posterior, normalized across all categories.
        proba: Posterior probability, ``exp(log_proba)``.
    """

    category: str
    log_likelihood: float
    log_proba: float
    proba: float

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "logLikelihood": self.log_likelihood,
            "logProba": self.log_proba,
            "proba": self.proba,
        }


@dataclass
class CategorizationResult:
    """Ranked categories for a single text.

    ``likelihoods`` is sorted by ``proba`` (highest first). Both fields are
    empty when the classifier has nothing to predict from.
    """

    likelihoods: list[CategoryLikelihood] = field(default_factory=list)
    predicted_category: Optional[str] = None

    @property
    def confidence(self) -> float:
        """Posterior probability of the predicted category."""
        if not self.likelihoods:
            return 0.0
        return self.likelihoods[0].proba

    @property
    def probabilities(self) -> dict[str, float]:
        return {item.category: item.proba for item in self.likelihoods}

    def to_dict(self) -> dict:
        return {
            "likelihoods": [item.to_dict() for item in self.likelihoods],
            "predictedCategory": self.predicted_category,
        }
