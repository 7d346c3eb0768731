"""
Type definitions for processing pipelines.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple, Union


class ProcessorEntry(NamedTuple):
    """
    One declared processing step.

    ``operation`` names a method on the uploader; ``arguments`` are passed to
    it positionally, in the order declared.
    """

    operation: str
    arguments: tuple[Any, ...] = ()


# What a declaration accepts: a bare operation name, a mapping of
# operation name -> arguments, or an already-built entry.
ProcessorStep = Union[str, Mapping[str, Any], ProcessorEntry]


def normalize_arguments(value: Any) -> tuple[Any, ...]:
    """
    Turn a declared argument value into a positional argument tuple.

    Lists and tuples are spread, ``None`` means no arguments, anything else is
    a single argument.
    """
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def expand_step(step: Any) -> list[ProcessorEntry]:
    """Expand one declared step into the entries it stands for."""
    if isinstance(step, ProcessorEntry):
        return [ProcessorEntry(step.operation, normalize_arguments(step.arguments))]
    if isinstance(step, Mapping):
        return [ProcessorEntry(operation, normalize_arguments(args)) for operation, args in step.items()]
    return [ProcessorEntry(step)]
