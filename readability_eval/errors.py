#!/usr/bin/env python3
"""Exceptions raised by the readability pipeline."""

from __future__ import annotations

__all__ = [
    "ReadabilityError",
    "DictionaryFormatError",
    "EmptyDictionaryError",
    "NoWordsError",
    "InputReadError",
]


class ReadabilityError(Exception):
    """Base class for failures the CLI reports to the user."""


class DictionaryFormatError(ReadabilityError, ValueError):
    """Raised when the frequency dictionary does not have the [[word, count], ...] shape."""


class EmptyDictionaryError(ReadabilityError):
    """Raised when no dictionary entries remain after truncation."""


class NoWordsError(ReadabilityError):
    """Raised when the text yields no tokens to score."""


class InputReadError(ReadabilityError):
    """Raised when the input text cannot be decoded."""
