"""Global pytest configuration.

Every test starts and finishes with an unconfigured ``cleanups`` logger, so
handlers and levels set by one test never leak into the next. Batch tests
read records through ``caplog``, which sees them by propagation.
"""

from __future__ import annotations

import pytest

from cleanups.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()
