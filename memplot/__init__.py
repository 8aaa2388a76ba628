"""Sample a process's memory footprint over time and plot it."""

__version__ = "0.1.0"
