"""Models for the products and store templates read from the JSON config."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


@dataclass(frozen=True, slots=True)
class InnerText:
    """Read the matched element's text content."""


@dataclass(frozen=True, slots=True)
class Attribute:
    """Read a named attribute of the matched element."""

    name: str


ExtractionMode = Union[InnerText, Attribute]


class ProductDetail(BaseModel):
    """One tracked product and the price under which an alert is raised."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    target_price: Decimal = Field(
        ..., alias="price", description="Alert when the observed price is below this."
    )
    product_name: str = Field(..., description="Name shown in the notification.")
    product_url: str = Field(..., description="Product page to fetch.")
    store_key: str = Field(..., description="Key of the store template to apply.")


class StoreTemplate(BaseModel):
    """Describes where the price lives on a given store's product page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    store_key: str = Field(..., description="Unique identifier of the store layout.")
    selector: str = Field(..., description="CSS selector of the price element.")
    from_attribute: bool = Field(
        default=False,
        alias="from_attr",
        description="Read an attribute instead of the element text.",
    )
    attribute_name: Optional[str] = Field(
        default=None,
        alias="attr",
        description="Attribute holding the price when from_attr is true.",
    )

    @model_validator(mode="after")
    def _require_attribute_name(self) -> "StoreTemplate":
        if self.from_attribute and not (self.attribute_name or "").strip():
            raise ValueError(
                f"store '{self.store_key}' sets from_attr but names no attr"
            )
        return self

    @property
    def extraction_mode(self) -> ExtractionMode:
        """Return the tagged extraction mode for this template."""
        if self.from_attribute:
            return Attribute(name=self.attribute_name)  # type: ignore[arg-type]
        return InnerText()


class ConfigRoot(BaseModel):
    """The whole configuration document, loaded once per run."""

    model_config = ConfigDict(frozen=True)

    products: List[ProductDetail] = Field(..., description="Tracked products.")
    stores: List[StoreTemplate] = Field(..., description="Store templates.")
