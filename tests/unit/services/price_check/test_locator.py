"""Test locating the price value on a page."""

import pytest
from bs4 import BeautifulSoup

from price_alert.models.config_models import Attribute, InnerText
from price_alert.services.price_check.locator import locate
from price_alert.services.price_check.models import (
    LocateError,
    MissingAttributeError,
    NoMatchError,
)
from price_alert.services.price_check.selector import compile_selector

PAGE = """
<html><body>
  <div class="price" data-amount="19.99">
    <span class="currency">$</span>
    <span class="amount">19.99</span>
  </div>
  <div class="price" data-amount="5.00"><span class="amount">5.00</span></div>
  <meta itemprop="price" content="1,299.00">
  <span id="no-attr">12.50</span>
</body></html>
"""


class TestLocate:
    """Test cases for locate."""

    def setup_method(self) -> None:
        """Set up test fixtures before each test method."""
        self.document = BeautifulSoup(PAGE, "html.parser")

    def test_reads_inner_text_of_first_match(self) -> None:
        """Test that the first element in document order wins."""
        value = locate(self.document, compile_selector("div.price"), InnerText())

        assert value == "$ 19.99"

    def test_reads_named_attribute(self) -> None:
        """Test attribute extraction."""
        value = locate(
            self.document, compile_selector("meta[itemprop=price]"), Attribute("content")
        )

        assert value == "1,299.00"

    def test_attribute_of_first_match(self) -> None:
        """Test that attribute extraction also uses the first match."""
        value = locate(self.document, compile_selector("div.price"), Attribute("data-amount"))

        assert value == "19.99"

    def test_no_match_raises_no_match_error(self) -> None:
        """Test that an unmatched selector fails instead of defaulting."""
        with pytest.raises(NoMatchError) as exc_info:
            locate(self.document, compile_selector("#productPrice"), InnerText(), "brick")

        assert exc_info.value.selector == "#productPrice"
        assert exc_info.value.store_key == "brick"

    def test_missing_attribute_names_attribute_and_selector(self) -> None:
        """Test that a missing attribute is reported with both names."""
        with pytest.raises(MissingAttributeError) as exc_info:
            locate(self.document, compile_selector("#no-attr"), Attribute("content"))

        error = exc_info.value
        assert error.attribute == "content"
        assert error.selector == "#no-attr"
        assert "content" in error.message
        assert "#no-attr" in error.message
        assert isinstance(error, LocateError)

    def test_multi_valued_attribute_is_joined(self) -> None:
        """Test that list attributes such as class are returned as text."""
        value = locate(self.document, compile_selector("span.amount"), Attribute("class"))

        assert value == "amount"

    def test_mixed_case_attribute_name_matches_parsed_attribute(self) -> None:
        """Test that attribute names are matched the way the parser stores them."""
        document = BeautifulSoup('<meta name="sale" data-Price="9.99">', "html.parser")

        value = locate(document, compile_selector("meta[name=sale]"), Attribute("data-Price"))

        assert value == "9.99"
