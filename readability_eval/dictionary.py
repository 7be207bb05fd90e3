#!/usr/bin/env python3
"""Load a word frequency dictionary and normalize it into weights.

The dictionary is a JSON array of ``[word, count]`` pairs, typically sorted
by descending frequency, for example::

    [["the", 199660765], ["of", 104502003], ...]

Each word is weighted by ``count / max_count`` so the most frequent word
has weight 1.0. Dictionary words are used as given; no case-folding is
applied to them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .errors import DictionaryFormatError, EmptyDictionaryError

__all__ = [
    "FrequencyEntry",
    "WeightTable",
    "parse_frequency_entries",
    "build_weight_table",
    "load_frequency_dict",
]

logger = logging.getLogger(__name__)

FrequencyEntry = tuple[str, int]
WeightTable = dict[str, float]


def parse_frequency_entries(data: Any) -> list[FrequencyEntry]:
    """
    Validate decoded JSON content and return its (word, count) pairs in order.

    Args:
        data: Decoded JSON value, expected to be a list of [word, count] lists

    Returns:
        List of (word, count) tuples in source order

    Raises:
        DictionaryFormatError: If the top level is not an array, an entry is not
            a two-element array, the word is not a string, or the count is not
            a non-negative integer
    """
    if not isinstance(data, list):
        raise DictionaryFormatError(
            f"Frequency dictionary must be a JSON array, got {type(data).__name__}"
        )

    entries: list[FrequencyEntry] = []
    for index, item in enumerate(data):
        if not isinstance(item, list) or len(item) != 2:
            raise DictionaryFormatError(
                f"Dictionary entry {index} must be a two-element array [word, count], got {item!r}"
            )

        word, count = item
        if not isinstance(word, str):
            raise DictionaryFormatError(
                f"Dictionary entry {index}: first element must be a string, "
                f"got {type(word).__name__}: {word!r}"
            )
        # bool is an int subclass; true/false are not counts
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise DictionaryFormatError(
                f"Dictionary entry {index}: second element must be a non-negative integer, "
                f"got {type(count).__name__}: {count!r}"
            )

        entries.append((word, count))

    return entries


def build_weight_table(
    entries: Sequence[FrequencyEntry],
    top_k: int | None = None,
) -> WeightTable:
    """
    Turn raw counts into weights in [0, 1].

    When ``top_k`` is given only the first K entries are kept, in source
    order, before the maximum is taken. A word listed more than once keeps
    the weight of its last occurrence.

    Args:
        entries: (word, count) pairs in source order
        top_k: Optional number of leading entries to keep

    Returns:
        Mapping of word to ``count / max_count``

    Raises:
        EmptyDictionaryError: If no entries remain after truncation
    """
    if top_k is not None:
        entries = entries[:top_k]

    if not entries:
        raise EmptyDictionaryError("Frequency dictionary is empty")

    max_count = max(max(count for _, count in entries), 1)

    weights: WeightTable = {}
    for word, count in entries:
        weights[word] = count / max_count

    duplicates = len(entries) - len(weights)
    if duplicates:
        logger.debug("%d duplicate dictionary words overwritten by later entries", duplicates)
    logger.debug("Weight table built from %d entries (max count %d)", len(entries), max_count)

    return weights


def load_frequency_dict(path: Path, top_k: int | None = None) -> WeightTable:
    """
    Read a JSON frequency dictionary from disk and build its weight table.

    Args:
        path: Path to a JSON file of the form [["the", 199660765], ...]
        top_k: Optional number of leading entries to keep

    Returns:
        Mapping of word to normalized weight

    Raises:
        FileNotFoundError: If the dictionary file doesn't exist
        IsADirectoryError: If path is a directory
        DictionaryFormatError: If the file is not valid JSON or has the wrong shape
        EmptyDictionaryError: If no entries remain after truncation
    """
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Expected a dictionary file, got directory {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DictionaryFormatError(f"Invalid JSON in dictionary file {path}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise DictionaryFormatError(f"Dictionary file {path} is not valid UTF-8: {e.reason}") from e
    except ValueError as e:
        # e.g. integers beyond the interpreter's digit limit
        raise DictionaryFormatError(f"Invalid value in dictionary file {path}: {e}") from e
    except RecursionError as e:
        raise DictionaryFormatError(f"Dictionary file {path} is nested too deeply") from e

    entries = parse_frequency_entries(data)
    logger.debug("Loaded %d dictionary entries from %s", len(entries), path)

    return build_weight_table(entries, top_k)
