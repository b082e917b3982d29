"""Shared test fixtures for incremental-bayes tests."""

from __future__ import annotations

import pytest

from incremental_bayes import NaiveBayes

# Short reviews with distinctive vocabulary per category
REVIEWS = [
    ("amazing awesome movie, loved every minute", "positive"),
    ("a brilliant and delightful film with great acting", "positive"),
    ("wonderful story, awesome soundtrack and great cast", "positive"),
    ("horrible terrible film, a complete waste of time", "negative"),
    ("boring plot and awful acting, I hated it", "negative"),
    ("terrible script, dull characters, horrible ending", "negative"),
    ("the movie was fine, nothing special, an average evening", "neutral"),
]


@pytest.fixture
def classifier() -> NaiveBayes:
    """An untrained classifier with the default tokenizer."""
    return NaiveBayes()


@pytest.fixture
def sentiment_classifier() -> NaiveBayes:
    """Two documents, one per category."""
    return (
        NaiveBayes()
        .learn("amazing awesome movie", "positive")
        .learn("horrible terrible film", "negative")
    )


@pytest.fixture
def reviews() -> list[tuple[str, str]]:
    return list(REVIEWS)


@pytest.fixture
def review_classifier(reviews: list[tuple[str, str]]) -> NaiveBayes:
    """Classifier trained on the full review corpus."""
    nb = NaiveBayes()
    for text, category in reviews:
        nb.learn(text, category)
    return nb
