"""Tokenization and per-document term counting.

The default tokenizer is deliberately simple: anything outside the kept
character set becomes a space, and the text is split on whitespace runs.
Callers with better tokenization needs pass their own callable to
:class:`~incremental_bayes.classifier.NaiveBayes`.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Iterable, Sequence

Tokenizer = Callable[[str], Sequence[str]]

# Kept characters: digits, "(", ")", "+", whitespace and the code point range
# U+0041 (Latin "A") .. U+044F (Cyrillic "я"). The range covers ASCII letters,
# Latin-1, Latin Extended, Greek and basic Cyrillic, and also the ASCII
# characters "[", "\", "]", "^", "_" and "`" that sit between "Z" and "a".
_PUNCTUATION_RE = re.compile(r"[^()+0-9A-я\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def default_tokenizer(text: str) -> list[str]:
    """Split text into word tokens.

    Punctuation is replaced with spaces before splitting, so text that starts
    or ends with punctuation or whitespace yields empty-string tokens at the
    edges::

        >>> default_tokenizer("Hello, world!")
        ['Hello', 'world', '']

    Tokens are not lowercased.
    """
    sanitized = _PUNCTUATION_RE.sub(" ", text)
    return _WHITESPACE_RE.split(sanitized)


def frequency_table(tokens: Iterable[str]) -> dict[str, int]:
    """Count occurrences of each token in one document."""
    return dict(Counter(tokens))
