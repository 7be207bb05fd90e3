#!/usr/bin/env python3
"""Mean frequency weight over a token sequence."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Mapping, Sequence

__all__ = ["compute_readability"]

logger = logging.getLogger(__name__)


def compute_readability(
    tokens: Sequence[str],
    weights: Mapping[str, float],
    top_text_words: int | None = None,
) -> float | None:
    """
    Average the dictionary weight of each token.

    Tokens missing from ``weights`` contribute 0.0 but still count toward
    the denominator.

    Args:
        tokens: Tokens in text order
        weights: Word -> weight table from the frequency dictionary
        top_text_words: Only score the first N tokens when given

    Returns:
        Mean weight in [0, 1], or None when there is nothing to score
    """
    considered = tokens if top_text_words is None else islice(tokens, top_text_words)

    total = 0.0
    count = 0
    misses = 0
    for token in considered:
        weight = weights.get(token)
        if weight is None:
            misses += 1
            weight = 0.0
        total += weight
        count += 1

    logger.debug("Scored %d tokens (%d not in dictionary)", count, misses)

    if count == 0:
        return None
    return total / count
