"""
Elapsed-time tickers.

A ticker calls its callback once per interval while running. ``Ticker``
does so on a chain of daemon ``threading.Timer`` objects; ``ManualTicker``
never fires on its own and is meant for callers that advance time
themselves.
"""
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class Ticker:
    """
    Periodic callback on a background timer.

    ``start`` and ``stop`` are idempotent; at most one timer is pending
    at any time.
    """

    def __init__(self, callback: TickCallback, interval: float = 1.0) -> None:
        self.callback = callback
        self.interval = interval
        self._timer: Optional[threading.Timer] = None
        self._running = False
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            self._schedule()
        logger.debug("Ticker started (interval=%.2fs)", self.interval)

    def stop(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.debug("Ticker stopped")

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.interval, self._fire)
        self._timer.daemon = True
        self._timer.start()

    def _fire(self) -> None:
        timer = threading.current_thread()
        with self._lock:
            if not self._running or timer is not self._timer:
                return
        self.callback()
        # Only the current timer may schedule the next tick; a stop/start
        # during the callback has already replaced it.
        with self._lock:
            if self._running and timer is self._timer:
                self._schedule()


class ManualTicker:
    """Ticker with no thread; ``fire`` delivers a tick when running."""

    def __init__(self, callback: TickCallback, interval: float = 1.0) -> None:
        self.callback = callback
        self.interval = interval
        self._running = False
        self.starts = 0
        self.stops = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self.starts += 1

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self.stops += 1

    def fire(self) -> None:
        if self._running:
            self.callback()
