import time
from typing import Any, Dict, Optional


class Timer:
    def __init__(self):
        self._start_time: Optional[float] = None
        self._stop_time: Optional[float] = None

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._stop_time = None

    def stop(self) -> float:
        if self._start_time is None:
            raise ValueError("Timer was not started")
        self._stop_time = time.perf_counter()
        return self.elapsed()

    def elapsed(self) -> float:
        if self._start_time is None:
            raise ValueError("Timer was not started")
        end_time = self._stop_time if self._stop_time is not None else time.perf_counter()
        return end_time - self._start_time

    def elapsed_ms(self) -> float:
        return self.elapsed() * 1000.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False


class CallStats:
    """Running count and cumulative wall time of a repeated operation."""

    def __init__(self) -> None:
        self.calls = 0
        self.total_time = 0.0

    def record(self, elapsed: float) -> None:
        self.calls += 1
        self.total_time += elapsed

    @property
    def average_time(self) -> float:
        return self.total_time / self.calls if self.calls > 0 else 0.0

    def reset(self) -> None:
        self.calls = 0
        self.total_time = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calls": self.calls,
            "total_time": self.total_time,
            "avg_time": self.average_time
        }
