"""
Exceptions raised by memplot.

Every failure is terminal for the operation that raised it; nothing in the
core retries or recovers. Rendering and persistence failures come straight
from matplotlib or the OS and are not wrapped.
"""


class MemplotError(Exception):
    """Base class for all memplot errors"""


class ConfigurationError(MemplotError, ValueError):
    """Invalid sampling parameters or configuration file"""


class ProcessNotFoundError(MemplotError, LookupError):
    """The requested pid does not resolve to a live process"""

    def __init__(self, pid: int):
        super().__init__(f"process not found: pid {pid}")
        self.pid = pid


class IntrospectionError(MemplotError):
    """A process query failed after sampling started"""
