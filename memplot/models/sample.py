from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    """Process data for a single instant of a sampling run"""
    elapsed: float  # seconds since the run started
    rss: int  # Resident Set Size in bytes
    vms: int  # virtual memory size in bytes
    num_threads: int
