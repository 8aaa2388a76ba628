"""Command line interface for memplot."""
