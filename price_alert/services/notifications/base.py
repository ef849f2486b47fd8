"""Base class for price alert notifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """Deliver a title and body to the user."""

    @abstractmethod
    def notify(self, title: str, body: str) -> None:
        """Show the notification, raising NotificationError on failure."""
        raise NotImplementedError
