"""Application-level exception types.

Convention:
- ``PageConfigError``: a page description could not be loaded (missing file,
  malformed JSON, schema violation).  The message is meant for the person who
  wrote the config and is printed by the CLI before exiting non-zero.
- ``PostFetchError``: the post store could not deliver posts (network
  failure, bad status, unexpected payload).
- ``ValueError``: for invalid arguments to library functions (unsafe output
  names, incomplete settings).
"""

from __future__ import annotations


class PageConfigError(ValueError):
    """Raised when a page configuration file cannot be turned into a PageConfig."""


class PostFetchError(RuntimeError):
    """Raised when published posts cannot be fetched from the post store."""
