"""
Timer Module

Measures request latency for debug logging.
"""

import time
from typing import Optional


class Timer:
    """
    High-precision Timer

    Uses time.perf_counter().

    Example:
        timer = Timer().start()
        # ... send request ...
        timer.stop()
        print(f"Total: {timer.elapsed_ms}ms")
    """

    def __init__(self):
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None

    def start(self) -> "Timer":
        """
        Start timing

        Returns:
            Timer: Returns self for chaining
        """
        self._start_time = time.perf_counter()
        self._end_time = None
        return self

    def stop(self) -> "Timer":
        """
        Stop timing

        Returns:
            Timer: Returns self for chaining
        """
        self._end_time = time.perf_counter()
        return self

    @property
    def elapsed_ms(self) -> Optional[int]:
        """Elapsed time in milliseconds, or None if timing not completed"""
        if self._start_time is None or self._end_time is None:
            return None
        return int((self._end_time - self._start_time) * 1000)
