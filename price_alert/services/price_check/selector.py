"""Compile store selectors ahead of any page fetch."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

import soupsieve
from soupsieve import SelectorSyntaxError, SoupSieve

from price_alert.models.config_models import StoreTemplate

from .models import ResolvedTemplate, SelectorError

logger = logging.getLogger("price_alert.selector")


def compile_selector(selector_text: str) -> SoupSieve:
    """Compile a CSS selector, raising SelectorError when it is not valid.

    Validation happens without a document, so a selector that is well formed
    but matches nothing on a page is not an error here.
    """
    if not selector_text or not selector_text.strip():
        raise SelectorError(selector_text, "Selector is empty.")

    try:
        return soupsieve.compile(selector_text)
    except SelectorSyntaxError as exc:
        raise SelectorError(
            selector_text, f"Invalid selector '{selector_text}': {exc}"
        ) from exc


def resolve_template(template: StoreTemplate) -> ResolvedTemplate:
    """Compile a template's selector and pick its extraction mode once."""
    try:
        compiled = compile_selector(template.selector)
    except SelectorError as exc:
        exc.store_key = template.store_key
        logger.warning(
            "Store %s has an invalid selector: %s", template.store_key, exc.message
        )
        return ResolvedTemplate(
            store_key=template.store_key,
            selector=template.selector,
            compiled=None,
            mode=template.extraction_mode,
            error=exc,
        )

    return ResolvedTemplate(
        store_key=template.store_key,
        selector=template.selector,
        compiled=compiled,
        mode=template.extraction_mode,
    )


def resolve_templates(templates: Iterable[StoreTemplate]) -> Dict[str, ResolvedTemplate]:
    """Resolve all templates keyed by store key; the first of duplicates wins."""
    resolved: Dict[str, ResolvedTemplate] = {}
    for template in templates:
        if template.store_key in resolved:
            logger.warning(
                "Duplicate store key '%s' ignored, keeping the first template.",
                template.store_key,
            )
            continue
        resolved[template.store_key] = resolve_template(template)
    return resolved
