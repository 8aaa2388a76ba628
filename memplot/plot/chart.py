"""
Memory chart rendering.

Draws the series of a Collection as matplotlib lines and writes the
figure to an image file.
"""
from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from memplot.models.collection import Collection
from memplot.models.extraction_options import ExtractionOptions
from memplot.plot.series import gather_points

LINE_WIDTH = 1  # points
DEFAULT_DPI = 160


def build_chart(collection: Collection, options: ExtractionOptions) -> Figure:
    """
    Plot a memory collection.

    Args:
        collection: Sampled process data
        options: Metrics to draw

    Returns:
        Figure with one line per enabled metric. With no metric enabled
        the figure only holds the grid and has no legend.
    """
    fig, ax = plt.subplots()
    try:
        ax.set_title(f"Memory Plot of PID {collection.pid}")
        ax.set_xlabel("Time (Seconds)")
        ax.set_ylabel("KiloBytes")
        # Draw a grid behind the area
        ax.set_axisbelow(True)
        ax.grid(True)

        metrics = options.enabled_metrics()
        for metric in metrics:
            pts = np.asarray(gather_points(collection, metric), dtype=float).reshape(-1, 2)
            ax.plot(pts[:, 0], pts[:, 1],
                    linewidth=LINE_WIDTH,
                    color=metric.color,
                    label=metric.label)

        if metrics:
            ax.legend()
    except Exception:
        plt.close(fig)
        raise

    return fig


def save_chart(fig: Figure,
               width: float,
               height: float,
               output_path: Union[str, Path],
               dpi: int = DEFAULT_DPI):
    """
    Save a chart to an image file.

    The format follows the file extension. Nothing is created on the way:
    a missing directory or an unknown extension fails as matplotlib or the
    OS reports it.

    Args:
        fig: Figure returned by build_chart
        width: Width in inches
        height: Height in inches
        output_path: Destination file
        dpi: Resolution for raster formats
    """
    fig.set_size_inches(width, height)
    fig.savefig(output_path, dpi=dpi)
