"""Notification adapters implementing NotificationPort."""

from __future__ import annotations

import logging

from domain.ports import NotificationPort

logger = logging.getLogger(__name__)


class LoggingNotifier(NotificationPort):
    """NotificationPort implementation that writes toasts to the log."""

    def notify(self, title: str, description: str) -> None:
        logger.info("%s: %s", title, description)


class InMemoryNotifier(NotificationPort):
    """NotificationPort implementation that records notifications.

    Intended for testing.
    """

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def notify(self, title: str, description: str) -> None:
        self.messages.append((title, description))

    @property
    def titles(self) -> list[str]:
        return [title for title, _ in self.messages]
