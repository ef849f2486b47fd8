"""Utilities shared by the price check stages."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Dict, Optional, Union


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
        "image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}


def build_headers(user_agent: Optional[str] = None) -> Dict[str, str]:
    """Return request headers, overriding the client identity if given."""
    headers = dict(DEFAULT_HEADERS)
    if user_agent:
        headers["User-Agent"] = user_agent
    return headers


def normalize_whitespace(value: str) -> str:
    """Collapse repeated spaces and newlines."""
    return re.sub(r"\s+", " ", value).strip()


def format_price(value: Union[float, Decimal]) -> str:
    """Format a price with two decimal places."""
    return f"{value:.2f}"
