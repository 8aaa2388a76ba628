from dataclasses import dataclass
from typing import List

from memplot.consts.metric_type import MetricType


@dataclass
class ExtractionOptions:
    """Which metrics get extracted and drawn"""
    plot_rss: bool = True
    plot_vsz: bool = True

    def enabled_metrics(self) -> List[MetricType]:
        metrics = []
        if self.plot_rss:
            metrics.append(MetricType.RSS)
        if self.plot_vsz:
            metrics.append(MetricType.VSZ)
        return metrics
