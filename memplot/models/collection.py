from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from memplot.models.sample import Sample


@dataclass
class Collection:
    """
    Samples gathered from one process during one sampling run.

    Samples are kept in insertion order, which is also time order. The
    sampler is the only writer; once the run returns the collection is
    treated as read-only.
    """
    pid: int
    start_time: datetime
    sample_interval: float  # seconds between samples
    samples: List[Sample] = field(default_factory=list)

    def add_sample(self, sample: Sample):
        if self.samples and sample.elapsed < self.samples[-1].elapsed:
            raise ValueError(
                f"Sample at {sample.elapsed:.6f}s is older than the last one "
                f"({self.samples[-1].elapsed:.6f}s)"
            )
        self.samples.append(sample)

    def __len__(self) -> int:
        return len(self.samples)

    def __str__(self):
        return (f"Collection(\n"
                f"  pid={self.pid},\n"
                f"  start_time={self.start_time.isoformat()},\n"
                f"  sample_interval={self.sample_interval},\n"
                f"  samples={len(self.samples)}\n"
                f")")
