"""
Repeated wall-clock timing with a median estimate
"""

from typing import Any, Callable, Optional, Tuple
import logging
import time
import numpy as np

from ..core.errors import CaseTimeoutError

logger = logging.getLogger(__name__)


class Timer:
    """
    Runs an operation repeatedly and reports the median duration

    The median is used instead of the mean so that a single cold-cache
    or scheduling outlier does not dominate a small sample.

    Engine calls run synchronously and cannot be interrupted, so the
    timeout is checked when each call returns. It applies to every call
    made through the timer: warmup, timed repetitions and ``call``.
    """

    def __init__(self,
                 warmup: int = 0,
                 timeout: Optional[float] = None,
                 clock: Callable[[], float] = time.perf_counter):
        """
        Parameters
        ----------
        warmup : int
            Untimed calls made before measuring
        timeout : float, optional
            Budget in seconds for any single call
        clock : callable
            Monotonic clock returning seconds
        """
        if warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {warmup}")
        self.warmup = warmup
        self.timeout = timeout
        self.clock = clock

    def _timed(self, op: Callable[[], Any], label: str) -> Tuple[Any, float]:
        start = self.clock()
        result = op()
        elapsed = self.clock() - start
        if self.timeout is not None and elapsed > self.timeout:
            raise CaseTimeoutError(
                f"{label} took {elapsed:.3f}s, "
                f"exceeding the {self.timeout:.3f}s timeout"
            )
        return result, elapsed

    def call(self, op: Callable[[], Any], label: str = "call") -> Any:
        """
        Run ``op`` once under the timeout and return its result

        Raises
        ------
        CaseTimeoutError
            If the call runs longer than ``timeout``
        """
        result, _ = self._timed(op, label)
        return result

    def measure(self, op: Callable[[], Any], repetitions: int) -> float:
        """
        Median wall-clock duration of ``op`` over ``repetitions`` calls

        Parameters
        ----------
        op : callable
            Zero-argument operation; its return value is discarded
        repetitions : int
            Number of timed calls, at least 1

        Returns
        -------
        float
            Median duration in seconds

        Raises
        ------
        CaseTimeoutError
            If a warmup call or repetition runs longer than ``timeout``
        """
        if repetitions < 1:
            raise ValueError(f"repetitions must be >= 1, got {repetitions}")

        for i in range(self.warmup):
            self._timed(op, f"warmup call {i + 1}")

        samples = []
        for i in range(repetitions):
            _, elapsed = self._timed(op, f"repetition {i + 1}")
            samples.append(elapsed)
            logger.debug(f"repetition {i + 1}/{repetitions}: {elapsed:.6f}s")

        return float(np.median(samples))
