#!/usr/bin/env python3
"""Shared pytest fixtures for readability tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def write_dictionary(tmp_path: Path) -> Callable[[Any], Path]:
    """
    Factory fixture that writes a JSON frequency dictionary to a temp file.

    Usage:
        dict_file = write_dictionary([["the", 100], ["cat", 50]])
    """
    def create(entries: Any, name: str = "word_frequencies.json") -> Path:
        dict_file = tmp_path / name
        dict_file.write_text(json.dumps(entries), encoding="utf-8")
        return dict_file

    return create


@pytest.fixture
def sample_dictionary(write_dictionary: Callable[..., Path]) -> Path:
    """
    Create a small two-word dictionary.

    Returns:
        Path to a dictionary where "the" weighs 1.0 and "cat" weighs 0.5
    """
    return write_dictionary([["the", 100], ["cat", 50]])


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """
    Create a temporary text file with sample content.

    Args:
        tmp_path: pytest's built-in temporary directory fixture

    Returns:
        Path to the created temporary file
    """
    text_file = tmp_path / "sample.txt"
    text_file.write_text("The cat the", encoding="utf-8")
    return text_file
