"""Transient user notifications.

The toaster collects notifications raised while handling an interaction;
the page shell drains and renders them once.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class Toast:
    level: str  # "success" or "error"
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class Toaster:
    def __init__(self) -> None:
        self.toasts: list[Toast] = []

    def success(self, message: str) -> None:
        self.toasts.append(Toast(level="success", message=message))

    def error(self, message: str) -> None:
        self.toasts.append(Toast(level="error", message=message))

    @property
    def last(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None

    def drain(self) -> list[Toast]:
        """Return pending notifications and forget them."""
        toasts, self.toasts = self.toasts, []
        return toasts
