#!/usr/bin/env python3
"""Default settings and per-run scoring options."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

__all__ = ["DEFAULT_DICT_FILENAME", "ScoringOptions", "resolve_dict_path"]

DEFAULT_DICT_FILENAME = "word_frequencies.json"
DICT_PATH_ENV = "READABILITY_DICT"


@dataclass(frozen=True)
class ScoringOptions:
    """Optional truncation limits for a single run.

    Args:
        top_dict_entries: Keep only the first K dictionary entries before weighting.
        top_text_words: Score only the first N tokens of the text.
    """

    top_dict_entries: int | None = None
    top_text_words: int | None = None


def resolve_dict_path() -> Path:
    """Return the default dictionary path, honouring READABILITY_DICT from the environment or .env."""
    load_dotenv(find_dotenv(usecwd=True))

    value = os.getenv(DICT_PATH_ENV)
    if value:
        return Path(value)
    return Path(DEFAULT_DICT_FILENAME)
