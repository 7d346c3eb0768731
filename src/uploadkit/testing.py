"""
Testing utilities for uploader pipelines.

Runs an uploader's real pipeline while recording each step, and reports the
outcome instead of raising, so tests can assert on what ran.

Usage:
    from uploadkit.testing import trace_processors

    result = trace_processors(AvatarUploader(file))
    assert result.status == "success"
    assert result.operations == ["sepiatone", "scale"]
"""

import time
from dataclasses import dataclass, field
from typing import Any

from uploadkit.processing.dispatcher import run_processors
from uploadkit.processing.registry import registry_for
from uploadkit.processing.types import ProcessorEntry


@dataclass
class TraceResult:
    """Result of a traced pipeline run."""

    status: str = "success"
    error: Exception | None = None
    failed_operation: str | None = None
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    duration: float = 0.0

    @property
    def operations(self) -> list[str]:
        """Names of the operations that were started, in order."""
        return [operation for operation, _ in self.calls]


def trace_processors(uploader: Any) -> TraceResult:
    """
    Run the pipeline of ``type(uploader)`` against ``uploader``, recording steps.

    The uploader itself is dispatched on, exactly as ``run_processors`` would.
    Every step that was started is recorded, including the one that failed,
    whether it raised or did not exist. Methods an operation calls on ``self``
    are not recorded.

    Args:
        uploader: Uploader instance

    Returns:
        TraceResult with status, error, failed operation, calls, and duration
    """
    calls: list[tuple[str, tuple[Any, ...]]] = []

    def record(position: int, entry: ProcessorEntry) -> None:
        calls.append((entry.operation, entry.arguments))

    start = time.time()
    try:
        run_processors(uploader, registry_for(type(uploader)), before_step=record)
    except Exception as e:
        return TraceResult(
            status="error",
            error=e,
            failed_operation=calls[-1][0] if calls else None,
            calls=calls,
            duration=time.time() - start,
        )
    return TraceResult(status="success", calls=calls, duration=time.time() - start)
