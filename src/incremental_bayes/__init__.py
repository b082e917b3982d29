"""Incremental Bayes -- incremental multinomial Naive Bayes text classification."""

import logging

__version__ = "1.0.0"

from .classifier import NaiveBayes
from .models import CategorizationResult, CategoryLikelihood
from .serialization import STATE_KEYS
from .state import ClassifierState
from .tokenizer import Tokenizer, default_tokenizer, frequency_table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Classifier
    "NaiveBayes",
    "ClassifierState",
    # Results
    "CategorizationResult",
    "CategoryLikelihood",
    # Tokenization
    "Tokenizer",
    "default_tokenizer",
    "frequency_table",
    # Serialization
    "STATE_KEYS",
]
