"""Sending notifications through a pluggable service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotificationService(ABC):
    @abstractmethod
    def notify(self, message: str) -> None:
        """Deliver a message."""


class NotificationAdapter(NotificationService):
    """Delivers notifications by printing them."""

    def notify(self, message: str) -> None:
        print(f"Notification sent: {message}")