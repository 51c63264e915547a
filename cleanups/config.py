"""Configuration for cleanup batches."""

import logging
from dataclasses import dataclass


@dataclass
class CleanupConfig:
    """Messages and log severities used when running a batch."""

    # Message of the aggregate error raised by Cleanups.run_all()
    failure_message: str = "Failed to clean up all resources."

    # Logged once for every operation that fails
    operation_failure_message: str = "Failed to run clean up operation."

    # Logged once when run_all_quietly() swallows the aggregate error
    quiet_failure_message: str = "Failed to clean up all of the given operations."

    operation_failure_level: int = logging.ERROR
    quiet_failure_level: int = logging.WARNING

    # Append the failing operation's repr to each failure record
    describe_operations: bool = True


# Global configuration instance
CLEANUP_CONFIG = CleanupConfig()
