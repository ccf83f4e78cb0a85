"""
Notification service for the Patient Adherence Dashboard

Transient toast messages with a single display slot: showing a new toast
drops the current one, there is no queue. A toast stays visible for the
display delay and then leaves through a short exit transition.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TOAST_ICONS = {
    'success': '✓',
    'error': '✕',
    'warning': '⚠',
    'info': 'ℹ',
}

DISPLAY_SECONDS = 3.0
EXIT_SECONDS = 0.3

@dataclass
class Toast:
    message: str
    severity: str
    shown_at: float

    @property
    def icon(self) -> str:
        return TOAST_ICONS[self.severity]

class Notifier:
    """Single-slot toast notifier"""

    def __init__(self, display_seconds: float = DISPLAY_SECONDS,
                 exit_seconds: float = EXIT_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.display_seconds = display_seconds
        self.exit_seconds = exit_seconds
        self.clock = clock
        self.current: Optional[Toast] = None
        self.history: List[Toast] = []

    def show_toast(self, message: str, severity: str = 'info') -> Toast:
        """
        Display a toast, replacing any toast currently shown

        Args:
            message: Text to show
            severity: One of success, error, warning, info

        Returns:
            The toast now occupying the slot
        """
        if severity not in TOAST_ICONS:
            raise ValueError(f"Unknown toast severity: {severity}")

        if self.current is not None:
            logger.debug(f"Replacing toast: {self.current.message}")

        toast = Toast(message=message, severity=severity, shown_at=self.clock())
        self.current = toast
        self.history.append(toast)

        log_level = logging.WARNING if severity in ('error', 'warning') else logging.INFO
        logger.log(log_level, f"Toast [{severity}]: {message}")
        return toast

    def active(self, now: Optional[float] = None) -> Optional[Toast]:
        """Return the visible toast, clearing it once its exit transition ends"""
        if self.current is None:
            return None

        now = self.clock() if now is None else now
        if now >= self.current.shown_at + self.display_seconds + self.exit_seconds:
            self.current = None
        return self.current

    def remaining_display(self, now: Optional[float] = None) -> float:
        """Seconds left before the active toast starts its exit transition"""
        toast = self.active(now)
        if toast is None:
            return 0.0
        now = self.clock() if now is None else now
        return max(0.0, toast.shown_at + self.display_seconds - now)
