"""High-level service that checks every configured product."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Optional

from price_alert.models.config_models import ConfigRoot, ProductDetail
from price_alert.services.notifications.base import BaseNotifier

from .models import NotificationError, PriceCheckResult, ResolvedTemplate, RunSummary
from .pipeline import PriceFetchPipeline
from .selector import resolve_templates
from .utils import format_price

logger = logging.getLogger("price_alert.service")


def render_alert_body(product: ProductDetail, price: float) -> str:
    """Build the notification body for a price below target."""
    return (
        f"{product.product_name} has a lower price. "
        f"Set price {format_price(product.target_price)}, New {format_price(price)}"
    )


class PriceCheckService:
    """Check products one after another and alert on price drops.

    A failure on one product is logged and never stops the remaining ones.
    """

    def __init__(
        self,
        config: ConfigRoot,
        pipeline: PriceFetchPipeline,
        notifier: BaseNotifier,
        notification_title: str = "Price Alert",
        skip_unmatched: bool = False,
    ) -> None:
        self.config = config
        self.pipeline = pipeline
        self.notifier = notifier
        self.notification_title = notification_title
        self.skip_unmatched = skip_unmatched
        self.templates: Dict[str, ResolvedTemplate] = resolve_templates(config.stores)

    def run(self) -> RunSummary:
        """Execute the price check for all products."""
        summary = RunSummary()
        for product in self.config.products:
            template = self.templates.get(product.store_key)
            if template is None:
                logger.info(
                    "No store template for '%s', skipping %s.",
                    product.store_key,
                    product.product_name,
                )
                summary.skipped += 1
                continue

            result = self.pipeline.fetch_price(product, template)
            summary.results.append(result)
            if not result.ok:
                continue

            if not result.matched and self.skip_unmatched:
                logger.warning(
                    "No price recognized for %s, skipping comparison.",
                    product.product_name,
                )
                result.skipped = True
                summary.skipped += 1
                continue

            self._compare(result, summary)

        logger.info(
            "Run finished: %d checked, %d skipped, %d failed, %d alerts.",
            summary.checked,
            summary.skipped,
            summary.failed,
            summary.alerts,
        )
        return summary

    def _compare(self, result: PriceCheckResult, summary: RunSummary) -> None:
        product = result.product
        price: Optional[float] = result.price
        assert price is not None
        if Decimal(str(price)) >= product.target_price:
            logger.debug(
                "%s at %s is not below %s.",
                product.product_name,
                format_price(price),
                format_price(product.target_price),
            )
            return

        body = render_alert_body(product, price)
        try:
            self.notifier.notify(self.notification_title, body)
        except NotificationError as exc:
            logger.error("Could not notify about %s: %s", product.product_name, exc)
            summary.notification_failures += 1
            return
        summary.alerts += 1
