"""Logging configuration for nodelight.

Logs to stderr so that CLI output on stdout stays machine-readable JSON.
"""

import logging
import os
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

_LEVEL = getattr(logging, os.getenv("NODELIGHT_LOG_LEVEL", "INFO").upper(), logging.INFO)

# Create logger that outputs to stderr
logger = logging.getLogger("nodelight")
logger.setLevel(_LEVEL)

# Only add handler if not already configured
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_LEVEL)
    formatter = logging.Formatter(
        "[nodelight] %(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


@contextmanager
def log_operation(operation: str, details: dict[str, Any] | None = None) -> Iterator[None]:
    """Log the start, completion time or failure of a CLI operation.

    Args:
        operation: Name of the operation.
        details: Optional key/value pairs appended to the start message.
    """
    details_str = "".join(f" {k}={v}" for k, v in (details or {}).items())
    logger.info("▶ Starting %s%s", operation, details_str)

    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        logger.error("✗ %s failed after %.2fms: %s", operation, _elapsed_ms(start), e)
        raise
    logger.info("✓ Completed %s in %.2fms", operation, _elapsed_ms(start))


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
