"""Learned counters of a Naive Bayes classifier."""

from __future__ import annotations

import copy
from collections import Counter
from dataclasses import dataclass, field


@dataclass
class ClassifierState:
    """Vocabulary and per-category frequency counters.

    One instance is owned by exactly one classifier. All mutation goes
    through the classifier's learn/unlearn/remove operations; the helpers
    here only keep the vocabulary presence counts and ``vocabulary_size``
    moving together.

    Attributes:
        categories: Registered category names (value is always ``True``).
        doc_count: Documents learned per category.
        total_documents: Documents learned across all categories.
        vocabulary: Token -> number of categories whose frequency table
            holds the token. Only positive counts are kept.
        vocabulary_size: Number of tokens with a positive presence count.
        word_count: Token occurrences per category, duplicates included.
        word_frequency_count: Per category, token -> occurrence count.
    """

    categories: dict[str, bool] = field(default_factory=dict)
    doc_count: dict[str, int] = field(default_factory=dict)
    total_documents: int = 0
    vocabulary: dict[str, int] = field(default_factory=dict)
    vocabulary_size: int = 0
    word_count: dict[str, int] = field(default_factory=dict)
    word_frequency_count: dict[str, dict[str, int]] = field(default_factory=dict)

    def add_presence(self, token: str) -> None:
        """Record that one more category holds ``token``."""
        if self.vocabulary.get(token, 0) > 0:
            self.vocabulary[token] += 1
        else:
            self.vocabulary[token] = 1
            self.vocabulary_size += 1

    def drop_presence(self, token: str) -> None:
        """Record that one fewer category holds ``token``."""
        presence = self.vocabulary.get(token, 0)
        if presence <= 0:
            return
        if presence == 1:
            del self.vocabulary[token]
            self.vocabulary_size -= 1
        else:
            self.vocabulary[token] = presence - 1

    def copy(self) -> "ClassifierState":
        return copy.deepcopy(self)

    def rebuild_vocabulary(self) -> bool:
        """Recount token presence from the registered categories' tables.

        Records written with a different presence rule (for example one unit
        per learned document) are brought in line with this one.

        Returns:
            True if ``vocabulary`` or ``vocabulary_size`` changed.
        """
        held_by: Counter[str] = Counter()
        for category in self.categories:
            held_by.update(self.word_frequency_count.get(category, {}).keys())

        vocabulary = dict(held_by)
        changed = vocabulary != self.vocabulary or len(vocabulary) != self.vocabulary_size
        self.vocabulary = vocabulary
        self.vocabulary_size = len(vocabulary)
        return changed

    def check_invariants(self) -> None:
        """Verify the bookkeeping invariants of the counters.

        Raises:
            ValueError: Naming the first invariant that does not hold.
        """
        positive = {t: n for t, n in self.vocabulary.items() if n > 0}
        if self.vocabulary_size != len(positive):
            raise ValueError(
                f"vocabulary_size is {self.vocabulary_size} but "
                f"{len(positive)} tokens have a positive presence count"
            )

        unregistered = set(self.doc_count) - set(self.categories)
        if unregistered:
            raise ValueError(f"doc_count holds unregistered categories: {sorted(unregistered)}")

        doc_total = sum(self.doc_count.get(c, 0) for c in self.categories)
        if self.total_documents != doc_total:
            raise ValueError(
                f"total_documents is {self.total_documents} but categories "
                f"hold {doc_total} documents"
            )

        for category in self.categories:
            frequencies = self.word_frequency_count.get(category, {})
            if any(count <= 0 for count in frequencies.values()):
                raise ValueError(f"category {category!r} holds non-positive token counts")
            if self.word_count.get(category, 0) != sum(frequencies.values()):
                raise ValueError(
                    f"word_count of category {category!r} is "
                    f"{self.word_count.get(category, 0)} but its tokens sum to "
                    f"{sum(frequencies.values())}"
                )

        held_by: Counter[str] = Counter()
        for category in self.categories:
            held_by.update(self.word_frequency_count.get(category, {}).keys())
        if dict(held_by) != positive:
            raise ValueError("vocabulary presence counts disagree with category token tables")
