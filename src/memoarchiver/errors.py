"""Exceptions raised by memoarchiver.

Fatal errors subclass OSError so callers that only care about I/O failures
can catch them uniformly; per-item classification errors subclass ValueError.
"""


class MemoDirError(OSError):
    """The memo directory cannot be resolved, created, or listed."""


class MemoCreateError(OSError):
    """A new memo file cannot be created."""


class ClassifyError(ValueError):
    """A timestamp filename matched the pattern but holds an invalid date."""
