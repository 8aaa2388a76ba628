"""
Process Sampler Module

This module polls a process at a fixed interval and records its memory
footprint and thread count into a Collection.
"""
import logging
import math
import time
from datetime import datetime
from typing import Callable

from memplot.errors import ConfigurationError
from memplot.models.collection import Collection
from memplot.models.sample import Sample
from memplot.monitor.process_handle import ProcessHandle, PsutilProcessHandle

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000
MIN_SAMPLES = 2


def _to_nanos(seconds: float) -> int:
    return int(round(seconds * NANOS_PER_SECOND))


class ProcessSampler:
    """Sample the memory usage of a process"""

    def __init__(self,
                 pid: int,
                 interval: float = 0.1,
                 duration: float = 0.0,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep,
                 handle_factory: Callable[[int], ProcessHandle] = PsutilProcessHandle.resolve,
                 now: Callable[[], datetime] = datetime.now):
        """
        Initialize process sampler.

        Args:
            pid: Process ID to sample
            interval: Time between samples in seconds (default: 0.1s = 100ms)
            duration: Total observation window in seconds, 0 samples until the process exits
            clock: Monotonic clock used to measure elapsed time
            sleep: Blocking sleep called between samples
            handle_factory: Resolves a pid into a ProcessHandle
            now: Wall-clock source for the collection's start time
        """
        self.pid = pid
        self.interval = interval
        self.duration = duration
        self._clock = clock
        self._sleep = sleep
        self._handle_factory = handle_factory
        self._now = now

    def validate(self):
        """
        Check the sampling window before any process is touched.

        The implied sample count is the integer quotient of the two durations
        at nanosecond resolution, so 1s / 100ms gives exactly 10.

        Raises:
            ConfigurationError: If the parameters cannot produce a valid run
        """
        if not math.isfinite(self.interval) or not math.isfinite(self.duration):
            raise ConfigurationError(
                f"configuration invalid: interval and duration must be finite, "
                f"got {self.interval}s and {self.duration}s"
            )
        interval_ns = _to_nanos(self.interval)
        if interval_ns <= 0:
            raise ConfigurationError(
                f"configuration invalid: interval must be at least 1ns, got {self.interval}"
            )
        if self.duration < 0:
            raise ConfigurationError(f"configuration invalid: duration must not be negative, got {self.duration}")

        if self.duration != 0:
            num_samples = _to_nanos(self.duration) // interval_ns
            if num_samples < MIN_SAMPLES:
                raise ConfigurationError(
                    f"configuration invalid: sampling window too short "
                    f"({self.duration}s / {self.interval}s gives {num_samples} sample(s), "
                    f"at least {MIN_SAMPLES} required)"
                )

    def run(self) -> Collection:
        """
        Sample the process until the duration elapses or the process exits.

        Blocks the caller for the whole run. Any failed query aborts the run
        and the samples gathered so far are dropped.

        Returns:
            Collection holding the samples in time order

        Raises:
            ConfigurationError: If the sampling window is invalid
            ProcessNotFoundError: If the pid does not resolve to a process
            IntrospectionError: If a query fails during the run
        """
        self.validate()

        handle = self._handle_factory(self.pid)

        collection = Collection(
            pid=self.pid,
            start_time=self._now(),
            sample_interval=self.interval,
        )
        start = self._clock()
        unbounded = self.duration == 0
        logger.debug(f"Sampling pid {self.pid} every {self.interval}s "
                     f"for {'ever' if unbounded else f'{self.duration}s'}")

        running = handle.is_running()
        elapsed = self._clock() - start
        while (unbounded or elapsed <= self.duration) and running:
            mem_info = handle.memory_info()
            num_threads = handle.num_threads()

            collection.add_sample(Sample(
                elapsed=elapsed,
                rss=mem_info.rss,
                vms=mem_info.vms,
                num_threads=num_threads,
            ))

            # Sleep until next sample
            self._sleep(self.interval)
            running = handle.is_running()
            elapsed = self._clock() - start

        logger.debug(f"Collected {len(collection)} samples from pid {self.pid} "
                     f"({'process exited' if not running else 'duration elapsed'})")
        return collection


def sample_process(pid: int, interval: float = 0.1, duration: float = 0.0) -> Collection:
    """
    Sample a process with the real clock and psutil.

    Args:
        pid: Process ID to sample
        interval: Sampling interval in seconds
        duration: Observation window in seconds, 0 for unbounded

    Returns:
        Collection of samples
    """
    return ProcessSampler(pid, interval=interval, duration=duration).run()
