"""Run a batch of cleanup operations with a single call.

`Cleanups` collects closeables and zero-argument callables and runs all of
them on :meth:`Cleanups.run_all`. A failing operation never stops the ones
after it: every failure is logged when it happens, and once the pass is over
the first failure is raised as the cause of a single :class:`CleanupError`.

Typical use:

    (
        Cleanups.of(consumer, producer)
        .and_(server.stop)
        .and_(tmp_dir.cleanup)
        .run_all()
    )

Operations run synchronously in the order they were added. The batch is not
cleared after a run, so running it again invokes every operation again.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from cleanups.config import CLEANUP_CONFIG, CleanupConfig
from cleanups.errors import CleanupError
from cleanups.logging import get_logger
from cleanups.operation import CleanupOperation, describe, iter_operations
from cleanups.outcome import Outcome, attempt, first_failure

logger = get_logger(__name__)


class Cleanups:
    """Ordered batch of cleanup operations.

    Entries are adapted by :func:`cleanups.operation.as_operation` when added;
    ``None`` entries are skipped without any trace. The batch is not
    thread-safe and callers must serialize appends and runs.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        config: Optional[CleanupConfig] = None,
    ) -> None:
        """Create an empty batch.

        Args:
            logger: Logger receiving failure records. Defaults to the
                ``cleanups.batch`` logger.
            config: Messages and severities. Defaults to ``CLEANUP_CONFIG``.
        """
        self._operations: List[CleanupOperation] = []
        self._logger = logger if logger is not None else _default_logger()
        self._config = config if config is not None else CLEANUP_CONFIG

    # ---- Construction -----------------------------------------------------
    @classmethod
    def empty(
        cls,
        *,
        logger: Optional[logging.Logger] = None,
        config: Optional[CleanupConfig] = None,
    ) -> Cleanups:
        """Create a batch with no operations."""
        return cls(logger=logger, config=config)

    @classmethod
    def of(
        cls,
        *operations: Any,
        logger: Optional[logging.Logger] = None,
        config: Optional[CleanupConfig] = None,
    ) -> Cleanups:
        """Create a batch holding ``operations``, in order."""
        return cls(logger=logger, config=config).and_all(operations)

    @classmethod
    def of_all(
        cls,
        operations: Iterable[Any],
        *,
        logger: Optional[logging.Logger] = None,
        config: Optional[CleanupConfig] = None,
    ) -> Cleanups:
        """Create a batch from a collection of operations.

        Raises:
            TypeError: If ``operations`` is None or holds an unusable entry.
        """
        return cls(logger=logger, config=config).and_all(operations)

    # ---- Appending --------------------------------------------------------
    def and_(self, *operations: Any) -> Cleanups:
        """Append ``operations`` and return this batch for chaining."""
        return self.and_all(operations)

    def and_all(self, operations: Iterable[Any]) -> Cleanups:
        """Append every non-None entry of ``operations`` and return this batch.

        Entries are validated before any of them is appended, so a rejected
        call leaves the batch unchanged.

        Raises:
            TypeError: If ``operations`` is None or holds an entry that is
                neither callable, closeable, nor a context manager.
        """
        self._operations.extend(list(iter_operations(operations)))
        return self

    # ---- Running ----------------------------------------------------------
    def run_all(self) -> None:
        """Run every operation, then raise if any of them failed.

        Raises:
            CleanupError: At least one operation failed. Its ``__cause__`` is
                the exception of the first failing operation.
        """
        outcomes = self._run_pass()
        first = first_failure(outcomes)
        if first is None:
            return

        failure_count = sum(1 for outcome in outcomes if not outcome.succeeded)
        raise CleanupError(
            self._config.failure_message,
            cause=first.error,
            failure_count=failure_count,
        ) from first.error

    def run_all_quietly(self) -> None:
        """Run every operation and log, rather than raise, an aggregate failure."""
        try:
            self.run_all()
        except CleanupError as exc:
            self._logger.log(
                self._config.quiet_failure_level,
                self._config.quiet_failure_message,
                exc_info=exc,
            )

    def close(self) -> None:
        """Same as :meth:`run_all`; lets a batch be nested in another one."""
        self.run_all()

    def _run_pass(self) -> List[Outcome]:
        outcomes: List[Outcome] = []
        for index, operation in enumerate(self._operations):
            outcome = attempt(index, operation)
            if not outcome.succeeded:
                self._log_failure(outcome)
            outcomes.append(outcome)
        return outcomes

    def _log_failure(self, outcome: Outcome) -> None:
        config = self._config
        if config.describe_operations:
            self._logger.log(
                config.operation_failure_level,
                "%s [#%d %s]",
                config.operation_failure_message,
                outcome.index,
                describe(outcome.operation),
                exc_info=outcome.error,
            )
        else:
            self._logger.log(
                config.operation_failure_level,
                "%s [#%d]",
                config.operation_failure_message,
                outcome.index,
                exc_info=outcome.error,
            )

    # ---- Python protocols -------------------------------------------------
    def __len__(self) -> int:
        return len(self._operations)

    def __enter__(self) -> Cleanups:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        # Keep an in-flight exception from being replaced by CleanupError.
        if exc_type is None:
            self.run_all()
        else:
            self.run_all_quietly()
        return False

    def __repr__(self) -> str:
        return f"Cleanups(operations={len(self._operations)})"


def _default_logger() -> logging.Logger:
    # Module logger; Cleanups.__init__ shadows the name with its parameter.
    return logger
