"""Fetch a product page and extract its current price."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from price_alert.models.config_models import ProductDetail

from .locator import locate
from .models import (
    DocumentParseError,
    FetchError,
    PipelineStage,
    PriceCheckError,
    PriceCheckResult,
    ResolvedTemplate,
    SelectorError,
)
from .normalizer import PriceNormalizer
from .utils import build_headers

logger = logging.getLogger("price_alert.pipeline")


class PriceFetchPipeline:
    """Run fetch, parse, resolve, locate and normalize for one product.

    Each call performs a single GET request; there are no retries.
    """

    def __init__(
        self,
        normalizer: Optional[PriceNormalizer] = None,
        user_agent: Optional[str] = None,
        timeout: float = 15.0,
        parser: str = "html.parser",
    ) -> None:
        self.normalizer = normalizer or PriceNormalizer()
        self.headers: Dict[str, str] = build_headers(user_agent)
        self.timeout = timeout
        self.parser = parser

    def fetch_price(
        self, product: ProductDetail, template: ResolvedTemplate
    ) -> PriceCheckResult:
        """Public entry point; failures are returned, never raised."""
        result = PriceCheckResult(product=product)
        try:
            self._run(result, template)
        except PriceCheckError as exc:
            if exc.store_key is None:
                exc.store_key = template.store_key
            result.error = exc
            logger.warning(
                "Price check for %s failed while %s: %s",
                product.product_name,
                result.stage.value,
                exc.message,
            )
        except Exception as exc:
            logger.exception(
                "Unexpected error checking %s while %s",
                product.product_name,
                result.stage.value,
            )
            result.error = PriceCheckError(template.store_key, str(exc))
        return result

    def _run(self, result: PriceCheckResult, template: ResolvedTemplate) -> None:
        product = result.product

        result.stage = PipelineStage.FETCHING
        body = self._fetch(product.product_url, template.store_key)

        result.stage = PipelineStage.PARSING
        document = self._parse(body, template.store_key)

        result.stage = PipelineStage.RESOLVING
        if template.error is not None:
            raise SelectorError(
                template.selector, template.error.message, template.store_key
            ) from template.error
        assert template.compiled is not None

        result.stage = PipelineStage.LOCATING
        raw_text = locate(document, template.compiled, template.mode, template.store_key)
        result.raw_text = raw_text

        result.stage = PipelineStage.NORMALIZING
        result.matched = self.normalizer.find_price_text(raw_text) is not None
        result.price = self.normalizer.normalize(raw_text, template.store_key)

        result.stage = PipelineStage.DONE
        logger.info("%s costs %.2f", product.product_name, result.price)

    def _fetch(self, url: str, store_key: str) -> str:
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            raise FetchError(store_key, f"Timeout fetching {url}: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise FetchError(store_key, f"Request to {url} failed: {exc}") from exc

        if response.status_code != 200:
            raise FetchError(store_key, f"HTTP {response.status_code} fetching {url}.")
        return response.text

    def _parse(self, body: str, store_key: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(body, self.parser)
        except ParserRejectedMarkup as exc:
            raise DocumentParseError(store_key, f"Page could not be parsed: {exc}") from exc
