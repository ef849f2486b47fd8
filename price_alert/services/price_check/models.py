"""Domain models for price checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from soupsieve import SoupSieve

from price_alert.models.config_models import ExtractionMode, ProductDetail


class PipelineStage(str, Enum):
    """Stages a single price check goes through."""

    FETCHING = "fetching"
    PARSING = "parsing"
    RESOLVING = "resolving"
    LOCATING = "locating"
    NORMALIZING = "normalizing"
    DONE = "done"


class PriceCheckError(RuntimeError):
    """Raised when the price of a product cannot be determined."""

    def __init__(self, store_key: Optional[str], message: str) -> None:
        super().__init__(message)
        self.store_key = store_key
        self.message = message


class FetchError(PriceCheckError):
    """The product page could not be downloaded."""


class DocumentParseError(PriceCheckError):
    """The downloaded page could not be parsed as HTML."""


class SelectorError(PriceCheckError):
    """A store selector is not valid CSS."""

    def __init__(self, selector: str, message: str, store_key: Optional[str] = None) -> None:
        super().__init__(store_key, message)
        self.selector = selector


class LocateError(PriceCheckError):
    """The price element or value is not on the page."""

    def __init__(self, selector: str, message: str, store_key: Optional[str] = None) -> None:
        super().__init__(store_key, message)
        self.selector = selector


class NoMatchError(LocateError):
    """No element matched the store selector."""

    def __init__(self, selector: str, store_key: Optional[str] = None) -> None:
        super().__init__(
            selector, f"No element matches selector '{selector}'.", store_key
        )


class MissingAttributeError(LocateError):
    """The matched element lacks the configured attribute."""

    def __init__(
        self, attribute: str, selector: str, store_key: Optional[str] = None
    ) -> None:
        super().__init__(
            selector,
            f"Element matched by '{selector}' has no attribute '{attribute}'.",
            store_key,
        )
        self.attribute = attribute


class PriceParseError(PriceCheckError):
    """The matched price text could not be converted to a number."""

    def __init__(self, text: str, store_key: Optional[str] = None) -> None:
        super().__init__(store_key, f"Could not parse price from '{text}'.")
        self.text = text


class ConfigurationError(RuntimeError):
    """The configuration file is missing or invalid."""


class NotificationError(RuntimeError):
    """A notification could not be delivered."""


@dataclass(frozen=True, slots=True)
class ResolvedTemplate:
    """A store template with its selector compiled and mode chosen."""

    store_key: str
    selector: str
    compiled: Optional[SoupSieve]
    mode: ExtractionMode
    error: Optional[SelectorError] = None


@dataclass(slots=True)
class PriceCheckResult:
    """Outcome of checking one product."""

    product: ProductDetail
    price: Optional[float] = None
    raw_text: Optional[str] = None
    matched: bool = False
    skipped: bool = False
    stage: PipelineStage = PipelineStage.FETCHING
    error: Optional[PriceCheckError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.price is not None


@dataclass(slots=True)
class RunSummary:
    """Aggregated result of a batch run."""

    results: List[PriceCheckResult] = field(default_factory=list)
    skipped: int = 0
    alerts: int = 0
    notification_failures: int = 0

    @property
    def checked(self) -> int:
        return sum(1 for result in self.results if result.ok and not result.skipped)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if result.error is not None)
