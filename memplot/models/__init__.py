"""Models for sampled process data."""

from .collection import Collection
from .extraction_options import ExtractionOptions
from .sample import Sample

__all__ = ["Collection", "ExtractionOptions", "Sample"]
