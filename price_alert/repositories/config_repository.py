"""Load the products and store templates from the JSON config file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from price_alert.models.config_models import ConfigRoot
from price_alert.services.price_check.models import ConfigurationError

logger = logging.getLogger("price_alert.config")


class ConfigRepository:
    """Read-only access to the configuration document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> ConfigRoot:
        """Read and validate the configuration.

        Raises:
            ConfigurationError: the file is missing, unreadable, not JSON, or
                does not match the expected schema.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {self.path}: {exc}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Config file {self.path} is not valid JSON: {exc}") from exc

        try:
            root = ConfigRoot.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Config file {self.path} is invalid: {exc}") from exc

        logger.info(
            "Loaded %d products and %d stores from %s",
            len(root.products),
            len(root.stores),
            self.path,
        )
        return root
