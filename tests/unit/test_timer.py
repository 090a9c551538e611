"""
Unit tests for the thread-based interval timer.
"""
import threading

from minesweeper import IntervalTimer


class TestIntervalTimer:
    """Test start/stop of the real-time timer."""

    def test_ticks_until_stopped(self) -> None:
        ticked = threading.Event()
        timer = IntervalTimer(ticked.set, interval=0.01)

        timer.start()
        assert timer.is_running is True
        assert ticked.wait(timeout=2.0) is True

        timer.stop()
        assert timer.is_running is False

    def test_start_twice_keeps_one_thread(self) -> None:
        timer = IntervalTimer(lambda: None, interval=0.01)
        timer.start()
        thread = timer._thread
        timer.start()
        assert timer._thread is thread
        timer.stop()

    def test_stop_when_not_running_is_noop(self) -> None:
        timer = IntervalTimer(lambda: None)
        timer.stop()
        assert timer.is_running is False

    def test_no_ticks_after_stop(self) -> None:
        count = []
        timer = IntervalTimer(lambda: count.append(1), interval=0.01)
        timer.start()
        timer.stop()
        after_stop = len(count)
        threading.Event().wait(0.05)
        assert len(count) == after_stop
