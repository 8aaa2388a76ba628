import subprocess
import sys
from datetime import datetime

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from memplot.errors import IntrospectionError  # noqa: E402
from memplot.models.collection import Collection  # noqa: E402
from memplot.models.sample import Sample  # noqa: E402
from memplot.monitor.process_handle import MemoryStat, ProcessHandle  # noqa: E402

START_TIME = datetime(2024, 1, 2, 3, 4, 5)


class FakeClock:
    """Monotonic clock whose sleep just moves time forward"""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeHandle(ProcessHandle):
    """
    Scripted process.

    Reports running for the first `lifetime` liveness checks (forever when
    None), grows memory by one page per query and can fail the n-th memory
    query.
    """

    def __init__(self, lifetime=None, fail_on_query=None, threads=4):
        self.lifetime = lifetime
        self.fail_on_query = fail_on_query
        self.threads = threads
        self.liveness_checks = 0
        self.memory_queries = 0

    def is_running(self) -> bool:
        self.liveness_checks += 1
        return self.lifetime is None or self.liveness_checks <= self.lifetime

    def memory_info(self) -> MemoryStat:
        self.memory_queries += 1
        if self.fail_on_query is not None and self.memory_queries == self.fail_on_query:
            raise IntrospectionError("process went away")
        return MemoryStat(rss=4096 * self.memory_queries, vms=8192 * self.memory_queries)

    def num_threads(self) -> int:
        return self.threads


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_collection():
    def _make(rss_vms_pairs, pid=42, interval=0.5):
        collection = Collection(pid=pid, start_time=START_TIME, sample_interval=interval)
        for i, (rss, vms) in enumerate(rss_vms_pairs):
            collection.add_sample(Sample(elapsed=i * interval, rss=rss, vms=vms, num_threads=1))
        return collection
    return _make


@pytest.fixture
def spawn_sleeper():
    """Start `python -c "time.sleep(s)"` children, killed and reaped on teardown"""
    children = []

    def _spawn(seconds: float) -> subprocess.Popen:
        child = subprocess.Popen([sys.executable, "-c", f"import time; time.sleep({seconds})"])
        children.append(child)
        return child

    yield _spawn

    for child in children:
        if child.poll() is None:
            child.kill()
        child.wait()


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
