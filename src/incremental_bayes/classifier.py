"""Incremental multinomial Naive Bayes text classifier.

Learns one document at a time, can forget a document or a whole category,
and predicts categories with normalized posterior probabilities. Token
probabilities use Laplace (add-one) smoothing over the known vocabulary.

Vocabulary bookkeeping follows a single policy: a token's presence count is
the number of categories whose frequency table holds it. ``learn`` adds one
when a token is new to a category, ``unlearn`` removes one when a category's
count for the token drops to zero, and ``remove_category`` removes one for
every token the category held. ``vocabulary_size`` is therefore always the
number of distinct tokens known to any category.

Example::

    classifier = NaiveBayes()
    classifier.learn("amazing awesome movie", "positive")
    classifier.learn("horrible terrible film", "negative")

    result = classifier.categorize("awesome")
    print(result.predicted_category)  # "positive"

    restored = NaiveBayes.from_json(classifier.to_json())
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from .models import CategorizationResult, CategoryLikelihood
from .serialization import decode_state, dumps_state, encode_state
from .state import ClassifierState
from .tokenizer import Tokenizer, default_tokenizer, frequency_table

logger = logging.getLogger(__name__)


def _log_sum_exp(values: Sequence[float]) -> float:
    """Compute ``log(sum(exp(v)))`` without overflow or underflow."""
    peak = max(values)
    if peak == -math.inf:
        return -math.inf
    return peak + math.log(sum(math.exp(v - peak) for v in values))


class NaiveBayes:
    """Naive Bayes classifier with Laplace smoothing.

    Args:
        options: Optional configuration mapping. The recognized key is
            ``tokenizer``, a callable turning a string into a sequence of
            tokens; the default tokenizer is used when it is absent. Other
            keys are kept and serialized with the state.

    Raises:
        TypeError: If ``options`` is not a mapping, or its tokenizer is not
            callable.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None) -> None:
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise TypeError(f"NaiveBayes got invalid options: {options!r}. Pass in a mapping.")

        self._options: dict[str, Any] = dict(options)
        tokenizer = self._options.get("tokenizer") or default_tokenizer
        if not callable(tokenizer):
            raise TypeError(f"NaiveBayes tokenizer must be callable, got {tokenizer!r}")
        self._tokenizer: Tokenizer = tokenizer
        self._state = ClassifierState()

    def __repr__(self) -> str:
        return (
            f"NaiveBayes(categories={len(self._state.categories)}, "
            f"documents={self._state.total_documents}, "
            f"vocabulary_size={self._state.vocabulary_size})"
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def categories(self) -> list[str]:
        """Registered category names, in registration order."""
        return list(self._state.categories)

    @property
    def total_documents(self) -> int:
        return self._state.total_documents

    @property
    def vocabulary_size(self) -> int:
        return self._state.vocabulary_size

    @property
    def vocabulary(self) -> dict[str, int]:
        """Copy of the token -> presence count mapping."""
        return dict(self._state.vocabulary)

    def doc_count(self, category: str) -> int:
        """Number of documents learned under ``category``."""
        return self._state.doc_count.get(category, 0)

    def word_count(self, category: str) -> int:
        """Number of token occurrences learned under ``category``."""
        return self._state.word_count.get(category, 0)

    def word_frequencies(self, category: str) -> dict[str, int]:
        """Copy of the token -> occurrence count table of ``category``."""
        return dict(self._state.word_frequency_count.get(category, {}))

    def check_invariants(self) -> None:
        """Raise ``ValueError`` if the learned counters are inconsistent."""
        self._state.check_invariants()

    # ------------------------------------------------------------------
    # Category lifecycle
    # ------------------------------------------------------------------

    def initialize_category(self, category: str) -> "NaiveBayes":
        """Register ``category`` with zeroed counters.

        Idempotent. Counters that ``unlearn`` deleted from a registered
        category are recreated.
        """
        state = self._state
        state.categories.setdefault(category, True)
        state.doc_count.setdefault(category, 0)
        state.word_count.setdefault(category, 0)
        state.word_frequency_count.setdefault(category, {})
        return self

    def remove_category(self, category: str) -> "NaiveBayes":
        """Forget ``category`` and everything learned under it.

        Unknown categories are ignored.
        """
        state = self._state
        if category not in state.categories:
            return self

        removed_docs = state.doc_count.pop(category, 0)
        state.total_documents -= removed_docs
        for token in state.word_frequency_count.pop(category, {}):
            state.drop_presence(token)
        state.word_count.pop(category, None)
        del state.categories[category]

        logger.debug(
            "Removed category %r (%d documents); vocabulary size now %d",
            category, removed_docs, state.vocabulary_size,
        )
        return self

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def learn(self, text: str, category: str) -> "NaiveBayes":
        """Train on one document labeled ``category``.

        Args:
            text: Raw document text.
            category: Category name; created on first use.

        Returns:
            Self (for method chaining).
        """
        self.initialize_category(category)
        state = self._state
        state.doc_count[category] += 1
        state.total_documents += 1

        frequencies = self.frequency_table(self._tokenizer(text))
        category_counts = state.word_frequency_count[category]
        for token, count in frequencies.items():
            if token in category_counts:
                category_counts[token] += count
            else:
                state.add_presence(token)
                category_counts[token] = count
            state.word_count[category] += count

        logger.debug(
            "Learned document under %r (%d distinct tokens)", category, len(frequencies)
        )
        return self

    def unlearn(self, text: str, category: str) -> "NaiveBayes":
        """Reverse a previous ``learn(text, category)``.

        Token counts are only ever reduced by what the category actually
        holds, so unlearning a text that was never learned cannot push any
        counter below zero; such mismatches are logged.

        Returns:
            Self (for method chaining).

        Raises:
            ValueError: If no documents are learned under ``category``.
        """
        state = self._state
        if state.doc_count.get(category, 0) <= 0:
            raise ValueError(f"Cannot unlearn from category {category!r}: no documents learned")

        state.doc_count[category] -= 1
        if state.doc_count[category] == 0:
            del state.doc_count[category]
        state.total_documents -= 1

        frequencies = self.frequency_table(self._tokenizer(text))
        category_counts = state.word_frequency_count.get(category, {})
        for token, count in frequencies.items():
            held = category_counts.get(token, 0)
            removed = min(count, held)
            if removed < count:
                logger.warning(
                    "Token %r occurs %d time(s) in the text but %d time(s) in category %r",
                    token, count, held, category,
                )
            if removed == 0:
                continue

            if removed == held:
                del category_counts[token]
                state.drop_presence(token)
            else:
                category_counts[token] = held - removed
            state.word_count[category] -= removed

        if state.word_count.get(category) == 0:
            del state.word_count[category]
            state.word_frequency_count.pop(category, None)

        logger.debug("Unlearned document from %r", category)
        return self

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------

    def categorize(self, text: str) -> CategorizationResult:
        """Rank registered categories by posterior probability for ``text``.

        Returns:
            CategorizationResult sorted by probability. When there are no
            registered categories or no learned documents the result is
            empty and ``predicted_category`` is ``None``.
        """
        frequencies = self.frequency_table(self._tokenizer(text))
        state = self._state

        if not state.categories:
            return CategorizationResult()
        if state.total_documents <= 0:
            logger.warning("Cannot categorize: no documents have been learned")
            return CategorizationResult()

        scores: list[tuple[str, float]] = []
        for category in state.categories:
            log_likelihood = self._log_likelihood(frequencies, category)
            if log_likelihood == -math.inf:
                logger.warning("Category %r had -inf odds", category)
            scores.append((category, log_likelihood))

        log_prob_text = _log_sum_exp([score for _, score in scores])

        likelihoods = []
        for category, log_likelihood in scores:
            log_proba = log_likelihood - log_prob_text
            likelihoods.append(CategoryLikelihood(
                category=category,
                log_likelihood=log_likelihood,
                log_proba=log_proba,
                proba=math.exp(log_proba),
            ))

        likelihoods.sort(key=lambda item: item.proba, reverse=True)
        return CategorizationResult(
            likelihoods=likelihoods,
            predicted_category=likelihoods[0].category,
        )

    def categorize_batch(self, texts: Iterable[str]) -> list[CategorizationResult]:
        """Categorize several texts."""
        return [self.categorize(text) for text in texts]

    def token_probability(self, token: str, category: str) -> float:
        """Smoothed probability of ``token`` given ``category``.

        ``(occurrences in category + 1) / (category word count + vocabulary size)``

        With no tokens learned at all the denominator is zero and tokens carry
        no evidence, so every token gets probability 1.0.
        """
        state = self._state
        occurrences = state.word_frequency_count.get(category, {}).get(token, 0)
        word_count = state.word_count.get(category, 0)
        denominator = word_count + state.vocabulary_size
        if denominator <= 0:
            return 1.0
        return (occurrences + 1) / denominator

    def frequency_table(self, tokens: Iterable[str]) -> dict[str, int]:
        return frequency_table(tokens)

    def most_informative_tokens(
        self,
        category: str,
        top_n: int = 20,
    ) -> list[tuple[str, float]]:
        """Return the tokens that most favor ``category`` over the others.

        Each token the category holds is scored by the log ratio of its
        smoothed probability in ``category`` to its mean smoothed log
        probability across the other categories. With a single category
        the plain log probability is used.

        Args:
            category: Target category name.
            top_n: Number of tokens to return.

        Returns:
            List of (token, score) tuples, highest score first.

        Raises:
            ValueError: If ``category`` is not registered.
        """
        if category not in self._state.categories:
            raise ValueError(f"Unknown category: {category}. Known: {self.categories}")

        others = [c for c in self._state.categories if c != category]
        scored: list[tuple[str, float]] = []
        for token in self._state.word_frequency_count.get(category, {}):
            score = math.log(self.token_probability(token, category))
            if others:
                other_lps = [math.log(self.token_probability(token, c)) for c in others]
                score -= sum(other_lps) / len(other_lps)
            scored.append((token, round(score, 4)))

        scored.sort(key=lambda x: x[1], reverse=True)
        return scored[:top_n]

    def _log_likelihood(self, frequencies: Mapping[str, int], category: str) -> float:
        """Log prior of ``category`` plus the log probability of the tokens."""
        state = self._state
        docs = state.doc_count.get(category, 0)
        if docs <= 0:
            return -math.inf

        log_likelihood = math.log(docs / state.total_documents)
        for token, count in frequencies.items():
            log_likelihood += count * math.log(self.token_probability(token, category))
        return log_likelihood

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Export the learned state as a record keyed by ``STATE_KEYS``."""
        return encode_state(self._state, self._options)

    def to_json(self) -> str:
        """Export the learned state as a JSON string.

        A custom tokenizer cannot be encoded and is left out of ``options``;
        pass it again to :meth:`from_json` when restoring.
        """
        return dumps_state(self._state, self._options)

    @classmethod
    def from_json(
        cls,
        state: str | Mapping[str, Any],
        tokenizer: Optional[Tokenizer] = None,
    ) -> "NaiveBayes":
        """Restore a classifier from :meth:`to_json` or :meth:`to_dict` output.

        Args:
            state: JSON string or already decoded state record.
            tokenizer: Tokenizer to use instead of the one named in the
                record's options.

        Returns:
            A new NaiveBayes instance holding the restored counters.

        Raises:
            TypeError: If ``state`` is neither a string nor a mapping.
            ValueError: If ``state`` cannot be decoded or lacks a state key.
        """
        counters, options = decode_state(state)
        if tokenizer is not None:
            options["tokenizer"] = tokenizer

        classifier = cls(options)
        classifier._state = counters
        return classifier
