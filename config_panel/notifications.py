"""Transient success/error messages shown at the top of the panel."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from . import config

SUCCESS = "success"
ERROR = "error"
SEVERITIES = (SUCCESS, ERROR)

CLICKAWAY = "clickaway"


@dataclass
class Notification:
    message: str
    severity: str
    opened_at: float


class NotificationCenter:
    """Holds at most one notification and closes it after a fixed duration.

    ``clock`` returns seconds; the duration is configured in milliseconds.
    Expiry is evaluated lazily whenever the current notification is read.
    """

    def __init__(
        self,
        duration_ms: int = config.NOTIFICATION_DURATION_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration_ms = duration_ms
        self._clock = clock
        self._current: Optional[Notification] = None

    def notify(self, message: str, severity: str) -> Notification:
        """Replace whatever is showing with a new open notification."""
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown severity: {severity!r}")
        self._current = Notification(message=message, severity=severity, opened_at=self._clock())
        return self._current

    def close(self, reason: Optional[str] = None) -> bool:
        """Close the notification unless the request came from a clickaway.

        Returns True when a notification was actually closed.
        """
        if reason == CLICKAWAY:
            return False
        was_open = self.current is not None
        self._current = None
        return was_open

    @property
    def current(self) -> Optional[Notification]:
        if self._current is not None and self._expired(self._current):
            self._current = None
        return self._current

    @property
    def is_open(self) -> bool:
        return self.current is not None

    def remaining_ms(self) -> float:
        notification = self.current
        if notification is None:
            return 0.0
        elapsed_ms = (self._clock() - notification.opened_at) * 1000.0
        return max(0.0, self.duration_ms - elapsed_ms)

    def _expired(self, notification: Notification) -> bool:
        return (self._clock() - notification.opened_at) * 1000.0 >= self.duration_ms
