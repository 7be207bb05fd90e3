#!/usr/bin/env python3
"""Word tokenizer for English text."""

from __future__ import annotations

import re

__all__ = ["WORD_RE", "tokenize_english_words"]

# Latin letter runs, with one inner apostrophe allowed (can't, I'm).
WORD_RE = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?")


def tokenize_english_words(text: str) -> list[str]:
    """
    Extract lowercase word tokens from raw text.

    Anything that is not an ASCII letter or an inner apostrophe separates
    tokens and is dropped, so digits and punctuation never become tokens.

    Args:
        text: Raw input text

    Returns:
        Tokens in order of occurrence, repeats included

    Example:
        >>> tokenize_english_words("Hello, World! Isn't it nice?")
        ['hello', 'world', "isn't", 'it', 'nice']
    """
    return [match.lower() for match in WORD_RE.findall(text)]
