"""
Process Handle Module

Capability interface over a live OS process, plus the psutil-backed
implementation used outside of tests.
"""
from abc import ABC, abstractmethod
from typing import NamedTuple

import psutil

from memplot.errors import IntrospectionError, ProcessNotFoundError


class MemoryStat(NamedTuple):
    rss: int  # bytes
    vms: int  # bytes


class ProcessHandle(ABC):
    """What the sampler needs to know about a process"""

    @abstractmethod
    def is_running(self) -> bool:
        ...

    @abstractmethod
    def memory_info(self) -> MemoryStat:
        ...

    @abstractmethod
    def num_threads(self) -> int:
        ...


class PsutilProcessHandle(ProcessHandle):
    """ProcessHandle backed by a psutil.Process"""

    def __init__(self, process: psutil.Process):
        self.process = process

    @classmethod
    def resolve(cls, pid: int) -> 'PsutilProcessHandle':
        """
        Look up a process by pid.

        Raises:
            ProcessNotFoundError: If no process with that pid exists
            IntrospectionError: If the process exists but cannot be opened
        """
        try:
            return cls(psutil.Process(pid))
        except psutil.NoSuchProcess as e:
            raise ProcessNotFoundError(pid) from e
        except psutil.Error as e:
            raise IntrospectionError(f"Cannot open process {pid}: {e}") from e

    @property
    def pid(self) -> int:
        return self.process.pid

    def is_running(self) -> bool:
        """
        True while the process is alive.

        psutil still reports an exited but unreaped child as running, so a
        zombie counts as stopped here.
        """
        if not self.process.is_running():
            return False
        try:
            return self.process.status() != psutil.STATUS_ZOMBIE
        except psutil.NoSuchProcess:
            return False
        except psutil.Error as e:
            raise IntrospectionError(f"Cannot read status of process {self.pid}: {e}") from e

    def memory_info(self) -> MemoryStat:
        try:
            mem_info = self.process.memory_info()
        except psutil.Error as e:
            raise IntrospectionError(f"Cannot read memory info of process {self.pid}: {e}") from e
        return MemoryStat(rss=mem_info.rss, vms=mem_info.vms)

    def num_threads(self) -> int:
        try:
            return self.process.num_threads()
        except psutil.Error as e:
            raise IntrospectionError(f"Cannot read thread count of process {self.pid}: {e}") from e
