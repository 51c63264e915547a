"""cleanups: run every cleanup, even when some of them fail.

Primary API:
    Cleanups - ordered batch of closeables and callables
    CleanupError - raised by Cleanups.run_all() when any cleanup failed
    CleanupConfig - messages and log severities used by a batch

Example:
    from cleanups import Cleanups

    batch = Cleanups.of(connection, temp_file).and_(worker.stop)
    batch.run_all()          # raises CleanupError after running all three
    batch.run_all_quietly()  # logs the aggregate failure instead
"""

from __future__ import annotations

from cleanups import logging
from cleanups._version import __version__
from cleanups.batch import Cleanups
from cleanups.config import CLEANUP_CONFIG, CleanupConfig
from cleanups.errors import CleanupError
from cleanups.operation import CleanupOperation, Closeable, as_operation
from cleanups.outcome import Outcome

__all__ = [
    # Version
    "__version__",
    # Batch
    "Cleanups",
    "CleanupError",
    # Operations
    "CleanupOperation",
    "Closeable",
    "as_operation",
    "Outcome",
    # Configuration
    "CleanupConfig",
    "CLEANUP_CONFIG",
    # Utilities
    "logging",
]
