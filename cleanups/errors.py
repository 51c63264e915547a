"""Aggregate error raised when a batch could not run every cleanup."""

from __future__ import annotations

from typing import Optional


class CleanupError(Exception):
    """One or more cleanup operations failed.

    Only the first failure of the run is kept, as ``cause`` and as the
    exception's ``__cause__``. Later failures are reported through logging.

    Attributes:
        cause: Exception raised by the first failing operation.
        failure_count: Number of operations that failed during the run.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        failure_count: int = 1,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.failure_count = failure_count
