"""Encoding and decoding of the classifier state record.

The record is a flat JSON object whose keys are exactly :data:`STATE_KEYS`.
Key names are part of the published format and stay camelCase so that
records written by other implementations of the same format load unchanged.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from typing import Any

from .state import ClassifierState

logger = logging.getLogger(__name__)

STATE_KEYS: tuple[str, ...] = (
    "categories",
    "docCount",
    "totalDocuments",
    "vocabulary",
    "vocabularySize",
    "wordCount",
    "wordFrequencyCount",
    "options",
)

# Record key -> ClassifierState attribute ("options" lives on the classifier)
_STATE_FIELDS: dict[str, str] = {
    "categories": "categories",
    "docCount": "doc_count",
    "totalDocuments": "total_documents",
    "vocabulary": "vocabulary",
    "vocabularySize": "vocabulary_size",
    "wordCount": "word_count",
    "wordFrequencyCount": "word_frequency_count",
}


def encodable_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Drop option values that have no JSON form (e.g. a custom tokenizer)."""
    return {key: value for key, value in options.items() if not callable(value)}


def encode_state(state: ClassifierState, options: Mapping[str, Any]) -> dict[str, Any]:
    """Build the state record from a classifier's counters and options.

    The returned record shares nothing with ``state``.
    """
    snapshot = state.copy()
    record: dict[str, Any] = {}
    for key in STATE_KEYS:
        if key == "options":
            record[key] = copy.deepcopy(encodable_options(options))
        else:
            record[key] = getattr(snapshot, _STATE_FIELDS[key])
    return record


def dumps_state(state: ClassifierState, options: Mapping[str, Any]) -> str:
    """Encode the state record as a JSON string."""
    return json.dumps(encode_state(state, options), ensure_ascii=False)


def decode_state(data: str | Mapping[str, Any]) -> tuple[ClassifierState, dict[str, Any]]:
    """Rebuild counters and options from a state record.

    Args:
        data: A JSON string produced by :func:`dumps_state`, or the already
            decoded record.

    Returns:
        Tuple of (state, options).

    Raises:
        TypeError: If ``data`` is neither a string nor a mapping.
        ValueError: If the string is not valid JSON, does not encode an
            object, or a state key is missing.
    """
    if isinstance(data, str):
        try:
            record = json.loads(data)
        except json.JSONDecodeError as exc:
            logger.warning("Rejected classifier state: %s", exc)
            raise ValueError(
                "NaiveBayes.from_json expects a valid JSON string or a mapping"
            ) from exc
        if not isinstance(record, Mapping):
            raise ValueError(
                f"NaiveBayes.from_json expects a JSON object, got {type(record).__name__}"
            )
    elif isinstance(data, Mapping):
        record = data
    else:
        logger.warning("Rejected classifier state of type %s", type(data).__name__)
        raise TypeError(
            f"NaiveBayes.from_json expects a valid JSON string or a mapping, "
            f"got {type(data).__name__}"
        )

    for key in STATE_KEYS:
        if key not in record:
            raise ValueError(f"NaiveBayes.from_json: state is missing an expected property: [{key}]")

    options = record["options"]
    if not isinstance(options, Mapping):
        raise ValueError(
            f"NaiveBayes.from_json: [options] must be an object, got {type(options).__name__}"
        )

    state = ClassifierState(
        **{attr: copy.deepcopy(record[key]) for key, attr in _STATE_FIELDS.items()}
    )
    if state.rebuild_vocabulary():
        logger.info("Rebuilt vocabulary presence counts from the category token tables")
    return state, copy.deepcopy(dict(options))
