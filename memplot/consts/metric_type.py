from enum import Enum


class MetricType(Enum):
    RSS = "rss"
    VSZ = "vsz"

    @property
    def label(self) -> str:
        """Legend entry for the metric's line"""
        return self.name

    @property
    def color(self) -> str:
        return METRIC_COLORS[self]


# Fixed line colors per metric: RSS -> black, VSZ -> blue
METRIC_COLORS = {
    MetricType.RSS: '#000000',
    MetricType.VSZ: '#0000ff',
}
