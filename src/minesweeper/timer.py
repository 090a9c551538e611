"""
Timer port for Minesweeper game.

The engine never schedules anything itself. A Timer is injected when a
game is started or loaded, and transitions call start() when the game
begins running and stop() when it ends. What a tick does is up to the
caller's callback, typically dispatching a TickTimer action.
"""
import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional


# ============================================================================
# Timer Interface
# ============================================================================

class Timer(ABC):
    """Abstract one-second ticker driven by the game lifecycle."""

    @abstractmethod
    def start(self) -> None:
        """Begin issuing ticks. Calling start on a running timer is a no-op."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop issuing ticks. Calling stop on a stopped timer is a no-op."""
        pass

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Check if the timer is currently ticking."""
        pass


# ============================================================================
# Thread-based Implementation
# ============================================================================

class IntervalTimer(Timer):
    """
    Calls a callback every interval seconds on a daemon thread.

    The callback runs on the timer thread, so it should only hand the tick
    over to the thread that owns the game (for example through a queue).
    """

    def __init__(self, callback: Callable[[], None], interval: float = 1.0) -> None:
        """
        Initialize the timer.

        Args:
            callback: Invoked once per interval while running.
            interval: Seconds between ticks.
        """
        self.callback = callback
        self.interval = interval
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._thread is not None:
                return
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event,), daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        with self._lock:
            if self._thread is None:
                return
            self._stop_event.set()
            if self._thread is not threading.current_thread():
                self._thread.join()
            self._thread = None
            self._stop_event = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            self.callback()
