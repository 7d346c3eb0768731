"""
Pipeline dispatcher.

Runs every declared processor against one uploader instance, in declaration
order. Failures are not caught: the first exception stops the run and reaches
the caller unchanged, and steps already applied are not rolled back.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from uploadkit.processing.registry import ProcessorRegistry, registry_for
from uploadkit.processing.types import ProcessorEntry
from uploadkit.utils.logging import get_logger

logger = get_logger("uploadkit.processing.dispatcher")


def _format_duration(elapsed: float) -> str:
    """Format duration in human-readable format."""
    if elapsed < 1.0:
        return f"{elapsed*1000:.0f}ms"
    elif elapsed < 60.0:
        return f"{elapsed:.2f}s"
    else:
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        return f"{minutes}m{seconds:.1f}s"


def run_processors(
    instance: Any,
    registry: ProcessorRegistry | None = None,
    *,
    before_step: Callable[[int, ProcessorEntry], None] | None = None,
) -> None:
    """
    Apply all declared processors to ``instance``.

    Each entry's operation is looked up on the instance and called with the
    entry's arguments spread positionally. Return values are discarded.

    Args:
        instance: Uploader instance the operations are called on
        registry: Registry to run (default: the registry of ``type(instance)``)
        before_step: Called with ``(position, entry)`` before each operation is
            looked up; exceptions it raises propagate like step failures

    Raises:
        AttributeError: An operation is not defined on the instance
        TypeError: An operation was declared with the wrong number of arguments
        Exception: Whatever an operation itself raises
    """
    if registry is None:
        registry = registry_for(type(instance))

    entries = registry.list()
    if not entries:
        return

    owner = type(instance).__name__
    logger.debug(f"Running {len(entries)} processor(s) on {owner}")
    for position, entry in enumerate(entries):
        operation, arguments = entry
        start_time = time.time()
        try:
            logger.debug(f"Processor #{position} '{operation}' started")
            if before_step is not None:
                before_step(position, entry)
            getattr(instance, operation)(*arguments)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.debug(f"Processor #{position} '{operation}' failed after {_format_duration(elapsed)}: {e}")
            raise
        elapsed = time.time() - start_time
        logger.debug(f"Processor #{position} '{operation}' completed in {_format_duration(elapsed)}")
