"""Process introspection and the sampling loop."""

from .process_handle import MemoryStat, ProcessHandle, PsutilProcessHandle
from .process_sampler import ProcessSampler, sample_process

__all__ = ["MemoryStat", "ProcessHandle", "PsutilProcessHandle", "ProcessSampler", "sample_process"]
