from dataclasses import dataclass
from typing import Optional

from memplot.models.extraction_options import ExtractionOptions

DEFAULT_OUTPUT_TEMPLATE = "memplot_{pid}.png"


@dataclass
class MemplotConfig:
    interval: float = 0.1  # seconds
    duration: float = 0.0  # seconds, 0 = until the process exits
    plot_rss: bool = True
    plot_vsz: bool = True
    width: float = 8.0  # inches
    height: float = 4.0  # inches
    dpi: int = 160
    output: Optional[str] = None

    def extraction_options(self) -> ExtractionOptions:
        return ExtractionOptions(plot_rss=self.plot_rss, plot_vsz=self.plot_vsz)

    def output_path(self, pid: int) -> str:
        """Configured output path, or memplot_<pid>.png when unset"""
        return self.output or DEFAULT_OUTPUT_TEMPLATE.format(pid=pid)
