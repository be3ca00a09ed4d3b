"""Domain ports — abstract interfaces for infrastructure.

Only stdlib (abc) imports allowed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


# ── Infrastructure Ports ──────────────────────────────────────────────────


class NotificationPort(ABC):
    """Port for user-facing notifications (toasts). Fire-and-forget."""

    @abstractmethod
    def notify(self, title: str, description: str) -> None: ...
