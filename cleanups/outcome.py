"""Per-operation results of a cleanup pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from cleanups.operation import CleanupOperation


@dataclass(frozen=True)
class Outcome:
    """Result of attempting one cleanup operation.

    Attributes:
        index: Position of the operation in its batch (0-based).
        operation: The operation that was invoked.
        error: Exception raised by the operation, None if it succeeded.
    """

    index: int
    operation: CleanupOperation
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def attempt(index: int, operation: CleanupOperation) -> Outcome:
    """Invoke ``operation`` once and capture how it ended.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt`` and
    ``SystemExit`` propagate to the caller.
    """
    try:
        operation()
    except Exception as exc:
        return Outcome(index=index, operation=operation, error=exc)
    return Outcome(index=index, operation=operation)


def first_failure(outcomes: List[Outcome]) -> Optional[Outcome]:
    """Return the lowest-index failed outcome, or None if all succeeded."""
    for outcome in outcomes:
        if not outcome.succeeded:
            return outcome
    return None
