"""Quote Service - Closing quote selection for branded signatures.

This module handles:
- Splitting the two newline-delimited quote pools into candidate lines
- Picking one quote with a biased coin between the pools
- Minimal HTML escaping of the chosen quote

Interface Contract:
- select(pool1, pool2) -> str (empty string when no quote is available)
- Never raises for empty or blank pools
"""

from __future__ import annotations

import logging
import random

from set_signature.config import QUOTE_POOL_1_WEIGHT

logger = logging.getLogger(__name__)


def split_pool(pool: str | None) -> list[str]:
    """Return the usable lines of a quote pool, in order."""
    if not pool:
        return []
    lines = []
    for line in pool.split("\n"):
        line = line.rstrip("\r")
        if line.strip():
            lines.append(line)
    return lines


def escape_quote(quote: str) -> str:
    """Escape the first double quote and the first apostrophe only."""
    return quote.replace('"', "&quot;", 1).replace("'", "&apos;", 1)


class QuoteService:
    """Picks a closing quote from one of two pools."""

    def __init__(self, rng: random.Random | None = None, pool1_weight: float = QUOTE_POOL_1_WEIGHT):
        """Initialize with optional random source.

        Args:
            rng: Object with ``random()`` and ``choice()``. If None, a private
                ``random.Random`` is created.
            pool1_weight: Probability of trying the first pool before the second.
        """
        self._rng = rng or random.Random()
        self.pool1_weight = pool1_weight

    def select(self, pool1: str | None, pool2: str | None) -> str:
        """Pick one quote and escape it for HTML.

        Args:
            pool1: First group of quotes, one per line
            pool2: Second group of quotes, one per line

        Returns:
            str: The escaped quote, or "" when both pools are empty
        """
        first = split_pool(pool1)
        second = split_pool(pool2)

        prefer_first = self._rng.random() < self.pool1_weight
        if prefer_first and first:
            chosen = self._rng.choice(first)
        elif second:
            chosen = self._rng.choice(second)
        elif first:
            chosen = self._rng.choice(first)
        else:
            logger.debug("[quote] both pools empty")
            return ""

        return escape_quote(chosen)


def select_quote(pool1: str | None, pool2: str | None, rng: random.Random | None = None) -> str:
    """Convenience wrapper around ``QuoteService.select``."""
    return QuoteService(rng=rng).select(pool1, pool2)
