"""Desktop notifications through the OS notification service."""

from __future__ import annotations

import logging

from plyer import notification

from price_alert.services.price_check.models import NotificationError

from .base import BaseNotifier


class DesktopNotifier(BaseNotifier):
    """Show alerts with the platform's native notification backend."""

    def __init__(self, app_name: str = "price-alert", timeout: int = 10) -> None:
        self.app_name = app_name
        self.timeout = timeout
        self.logger = logging.getLogger("price_alert.notifier")

    def notify(self, title: str, body: str) -> None:
        """Show a desktop notification."""
        try:
            notification.notify(
                title=title,
                message=body,
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except NotImplementedError as exc:
            self.logger.error("No desktop notification backend available: %s", exc)
            raise NotificationError("No desktop notification backend available.") from exc
        except Exception as exc:
            self.logger.error("Failed to show desktop notification: %s", exc)
            raise NotificationError(f"Notification failed: {exc}") from exc
        self.logger.debug("Notification shown: %s", title)


class LogNotifier(BaseNotifier):
    """Write alerts to the log instead of the desktop (dry runs)."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("price_alert.notifier")

    def notify(self, title: str, body: str) -> None:
        """Log the notification."""
        self.logger.info("%s: %s", title, body)
