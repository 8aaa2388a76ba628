"""Series extraction and chart rendering."""

from .chart import build_chart, save_chart
from .series import XY, gather_points, gather_rss_points, gather_vsz_points

__all__ = ["XY", "build_chart", "gather_points", "gather_rss_points", "gather_vsz_points", "save_chart"]
