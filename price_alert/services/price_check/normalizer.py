"""Turn raw price text into a float."""

from __future__ import annotations

import logging
import re
from typing import Optional, Pattern

from .models import PriceParseError

logger = logging.getLogger("price_alert.normalizer")

# Digit groups with optional thousands separators and a mandatory fraction.
# Integer-only prices such as "$40" are deliberately not recognized.
PRICE_PATTERN = re.compile(r"\d+(?:,\d+)*\.\d+")
THOUSANDS_SEPARATOR = ","
FALLBACK_PRICE_TEXT = "0.00"


class PriceNormalizer:
    """Extract a decimal price from noisy page text."""

    def __init__(self, pattern: Pattern[str] = PRICE_PATTERN) -> None:
        self.pattern = pattern

    def find_price_text(self, raw_text: str) -> Optional[str]:
        """Return the leftmost price-looking substring, or None."""
        match = self.pattern.search(raw_text or "")
        return match.group(0) if match else None

    def normalize(self, raw_text: str, store_key: Optional[str] = None) -> float:
        """Return the price contained in ``raw_text``.

        When nothing matches, "0.00" is used instead and 0.0 is returned, so
        callers always receive a price.
        """
        candidate = self.find_price_text(raw_text)
        if candidate is None:
            logger.warning("No price found in '%s', using %s.", raw_text, FALLBACK_PRICE_TEXT)
            candidate = FALLBACK_PRICE_TEXT

        cleaned = candidate.replace(THOUSANDS_SEPARATOR, "").strip()
        try:
            return float(cleaned)
        except ValueError as exc:
            raise PriceParseError(candidate, store_key) from exc
