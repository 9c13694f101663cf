"""
extkit Debounce Gate
====================

Suppresses rapid repeated triggering of an action, letting through the first
trigger and every trigger spaced at least `min_interval_ms` after the last
accepted one.

Example:
    gate = DebounceGate(300)

    def on_click():
        gate.attempt(submit_form)

    # Or guard a handler directly
    @safe_click(delay_ms=500)
    def on_submit():
        ...
"""

from __future__ import annotations

import functools
import threading
import time
from typing import Any, Callable, Optional, TypeVar

from extkit.core.config import Settings, get_settings
from extkit.core.exceptions import InvalidConfigurationError
from extkit.utils.logger import get_logger


F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_INTERVAL_MS = 300

logger = get_logger("extkit.debounce")


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


class DebounceGate:
    """
    Single-binding debounce gate.

    Holds the timestamp of the last accepted attempt. Each gate belongs to
    one logical binding (one button, one handler) and is never shared
    between bindings. `attempt` performs its check-and-update under a lock,
    so concurrent callers cannot both pass within the same window.

    Attributes:
        min_interval_ms: Suppression window in milliseconds
        last_accepted_at: Time of the last accepted attempt, None before the first
    """

    def __init__(
        self,
        min_interval_ms: int = DEFAULT_INTERVAL_MS,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            min_interval_ms: Suppression window in milliseconds
            clock: Time source in milliseconds (monotonic by default).
                Must stay consistent across calls to one gate.

        Raises:
            InvalidConfigurationError: If min_interval_ms is negative
        """
        self._lock = threading.Lock()
        self._clock = clock or monotonic_ms
        self.min_interval_ms = DEFAULT_INTERVAL_MS
        self.last_accepted_at: Optional[float] = None
        self.configure(min_interval_ms)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> "DebounceGate":
        """Create a gate using the configured EXTKIT_DEBOUNCE_MS window."""
        settings = settings or get_settings()
        return cls(settings.debounce_ms, clock=clock)

    def configure(self, min_interval_ms: int = DEFAULT_INTERVAL_MS) -> "DebounceGate":
        """
        Set the suppression window.

        Raises:
            InvalidConfigurationError: If min_interval_ms is not a non-negative integer
        """
        if isinstance(min_interval_ms, bool) or not isinstance(min_interval_ms, int):
            raise InvalidConfigurationError(
                f"min_interval_ms must be an integer, got {min_interval_ms!r}"
            )
        if min_interval_ms < 0:
            raise InvalidConfigurationError(
                f"min_interval_ms must be non-negative, got {min_interval_ms}"
            )

        with self._lock:
            self.min_interval_ms = min_interval_ms
        return self

    def _try_accept(self, now: float) -> bool:
        with self._lock:
            last = self.last_accepted_at
            if last is not None and now - last < self.min_interval_ms:
                return False
            # now >= last here, so the timestamp never moves backwards
            self.last_accepted_at = now
            return True

    def attempt(
        self,
        action: Callable[[], Any],
        now: Optional[float] = None,
    ) -> bool:
        """
        Run `action` unless it falls inside the current window.

        The guarded action comes first and the timestamp second, so that
        `now` can be left out and read from the gate's clock:
        `gate.attempt(handler)` or `gate.attempt(handler, now=1300.0)`.

        Args:
            action: Zero-argument callable to guard
            now: Current time in milliseconds (read from the clock when None)

        Returns:
            True if the attempt was accepted and `action` ran, False if suppressed
        """
        if now is None:
            now = self._clock()

        if not self._try_accept(now):
            logger.debug(
                "Attempt suppressed",
                remaining_ms=self.remaining_ms(now),
            )
            return False

        action()
        return True

    def remaining_ms(self, now: Optional[float] = None) -> float:
        """Milliseconds until the next attempt would be accepted (0 when open)."""
        if now is None:
            now = self._clock()

        with self._lock:
            if self.last_accepted_at is None:
                return 0.0
            return max(0.0, float(self.last_accepted_at + self.min_interval_ms - now))

    def reset(self) -> None:
        """Forget the last accepted attempt."""
        with self._lock:
            self.last_accepted_at = None

    def __repr__(self) -> str:
        return (
            f"DebounceGate(min_interval_ms={self.min_interval_ms}, "
            f"last_accepted_at={self.last_accepted_at})"
        )


def safe_click(
    delay_ms: int = DEFAULT_INTERVAL_MS,
    clock: Optional[Callable[[], float]] = None,
) -> Callable[[F], F]:
    """
    Guard a handler with its own debounce gate.

    Calls inside the window are dropped and return None; accepted calls
    return the handler's result. The gate is available as `wrapper.gate`.

    Args:
        delay_ms: Suppression window in milliseconds
        clock: Time source in milliseconds

    Returns:
        Decorator

    Example:
        @safe_click(delay_ms=300)
        def on_pay_clicked(order_id):
            ...
    """
    def decorator(func: F) -> F:
        gate = DebounceGate(delay_ms, clock=clock)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            result = []
            gate.attempt(lambda: result.append(func(*args, **kwargs)))
            return result[0] if result else None

        wrapper.gate = gate
        return wrapper

    return decorator
