"""Find the price element on a parsed page and read its raw value."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag
from soupsieve import SoupSieve

from price_alert.models.config_models import Attribute, ExtractionMode, InnerText

from .models import MissingAttributeError, NoMatchError
from .utils import normalize_whitespace


def locate(
    document: BeautifulSoup,
    compiled: SoupSieve,
    mode: ExtractionMode,
    store_key: Optional[str] = None,
) -> str:
    """Return the raw price value from the first element matching ``compiled``.

    Later matches are ignored. With ``Attribute`` the named attribute is read,
    otherwise the element's text content with whitespace collapsed.
    """
    element: Optional[Tag] = compiled.select_one(document)
    if element is None:
        raise NoMatchError(compiled.pattern, store_key)

    if isinstance(mode, Attribute):
        value = element.get(mode.name)
        if value is None:
            # HTML parsers lowercase attribute names.
            value = element.get(mode.name.lower())
        if value is None:
            raise MissingAttributeError(mode.name, compiled.pattern, store_key)
        # Multi-valued attributes such as class come back as lists.
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    if isinstance(mode, InnerText):
        return normalize_whitespace(element.get_text())

    raise TypeError(f"Unknown extraction mode: {mode!r}")
