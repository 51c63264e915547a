"""Package-wide logging setup.

Every module logs through a child of the ``cleanups`` logger, so a single
handler configured here covers all failure records emitted by batches.
Records still propagate to the process root logger, which keeps them visible
to applications that configure logging themselves and to pytest's ``caplog``.
Applications tune verbosity the usual way, e.g.
``logging.getLogger("cleanups").setLevel(logging.ERROR)``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "cleanups"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the ``cleanups`` logger.

    Only the first call has an effect; later calls return immediately so
    handlers never pile up. Use :func:`reset_logging` to start over.

    Args:
        level: Level for the package logger.
        format_string: Format for the handler, ``DEFAULT_FORMAT`` if omitted.
        handler: Handler to install, a stdout ``StreamHandler`` if omitted.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``cleanups`` hierarchy.

    The level of the returned logger is left alone, so settings an
    application made on it survive repeated lookups.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
    """
    setup_root_logger()
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop the package handler and forget the setup (used by tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
