"""
Convert a Collection into (elapsed seconds, kilobytes) points.

All functions here are pure: one point per sample, same order, no
filtering or resampling.
"""
from typing import List, NamedTuple

from memplot.consts.metric_type import MetricType
from memplot.models.collection import Collection

BYTES_PER_KB = 1024


class XY(NamedTuple):
    x: float
    y: float


def gather_rss_points(collection: Collection) -> List[XY]:
    """Gather RSS points from a collection"""
    return [XY(float(s.elapsed), s.rss / BYTES_PER_KB) for s in collection.samples]


def gather_vsz_points(collection: Collection) -> List[XY]:
    """Gather VSZ points from a collection"""
    return [XY(float(s.elapsed), s.vms / BYTES_PER_KB) for s in collection.samples]


_GATHERERS = {
    MetricType.RSS: gather_rss_points,
    MetricType.VSZ: gather_vsz_points,
}


def gather_points(collection: Collection, metric: MetricType) -> List[XY]:
    return _GATHERERS[metric](collection)
