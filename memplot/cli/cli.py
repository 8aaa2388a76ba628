#!/usr/bin/env python3
"""
memplot command line.

Samples a process, prints a short run summary and saves the memory chart.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
from tabulate import tabulate

from memplot import __version__
from memplot.config.config_loader import ConfigLoader
from memplot.config.memplot_config import MemplotConfig
from memplot.errors import MemplotError
from memplot.models.collection import Collection
from memplot.monitor.process_sampler import sample_process
from memplot.plot.chart import build_chart, save_chart
from memplot.util.log_config import setup_logger

logger = logging.getLogger("memplot.cli")


def build_parser() -> argparse.ArgumentParser:
    """
    Create the memplot argument parser.

    Sampling and chart options default to None so that values from the
    configuration file are only overridden when given explicitly.
    """
    parser = argparse.ArgumentParser(
        prog="memplot",
        description="Sample a process's memory usage and plot it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sample pid 1234 every 100ms until it exits
  memplot 1234

  # Sample for 30 seconds every half second, RSS only, as SVG
  memplot 1234 --interval 0.5 --duration 30 --no-vsz --output rss.svg
        """
    )
    parser.add_argument('pid', type=int, help='Process ID to sample')
    parser.add_argument('--interval', type=float, default=None,
                        help='Seconds between samples (default: 0.1)')
    parser.add_argument('--duration', type=float, default=None,
                        help='Seconds to sample for, 0 samples until the process exits (default: 0)')
    parser.add_argument('--rss', dest='plot_rss', action=argparse.BooleanOptionalAction, default=None,
                        help='Plot the resident set size (default: on)')
    parser.add_argument('--vsz', dest='plot_vsz', action=argparse.BooleanOptionalAction, default=None,
                        help='Plot the virtual memory size (default: on)')
    parser.add_argument('--output', '-o', default=None,
                        help='Chart file, format follows the extension (default: memplot_<pid>.png)')
    parser.add_argument('--width', type=float, default=None, help='Chart width in inches (default: 8)')
    parser.add_argument('--height', type=float, default=None, help='Chart height in inches (default: 4)')
    parser.add_argument('--dpi', type=int, default=None, help='Resolution of raster output (default: 160)')
    parser.add_argument('--config', type=Path, default=None,
                        help='Directory holding config.yaml with default options')
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev', 'prod'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    parser.add_argument('--log-level', type=str.upper, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Console logging level (default: INFO)')
    parser.add_argument('--log-file', type=Path, default=None,
                        help='Also append log records to this file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging, same as --log-level DEBUG')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> MemplotConfig:
    """Load the configuration file, then apply explicit command line options"""
    config = ConfigLoader(args.config, env=args.env).config
    for key in ('interval', 'duration', 'plot_rss', 'plot_vsz', 'output', 'width', 'height', 'dpi'):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)
    return config


def print_summary(collection: Collection, output_path: str):
    """Print what was sampled and where the chart went"""
    last_elapsed = collection.samples[-1].elapsed if collection.samples else 0.0
    table_data = [
        ["PID", collection.pid],
        ["Started", collection.start_time.strftime('%Y-%m-%d %H:%M:%S')],
        ["Interval", f"{collection.sample_interval:g} s"],
        ["Samples", len(collection)],
        ["Last sample", f"{last_elapsed:.3f} s"],
        ["Chart", output_path],
    ]
    print(tabulate(table_data, tablefmt="heavy_grid", stralign="left", numalign="left"))


def run(config: MemplotConfig, pid: int) -> Collection:
    """Sample the process and write its chart"""
    output_path = config.output_path(pid)

    collection = sample_process(pid, interval=config.interval, duration=config.duration)
    logger.debug(str(collection))
    if not collection.samples:
        logger.warning(f"Process {pid} was not running, the chart will be empty")

    fig = build_chart(collection, config.extraction_options())
    try:
        save_chart(fig, config.width, config.height, output_path, dpi=config.dpi)
    finally:
        plt.close(fig)

    logger.info(f"✓ Saved: {output_path}")
    print_summary(collection, output_path)
    return collection


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger("memplot",
                 level=logging.DEBUG if args.verbose else args.log_level,
                 log_file=args.log_file)

    try:
        config = resolve_config(args)
        run(config, args.pid)
    except (MemplotError, OSError, ValueError) as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted, no chart written")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
