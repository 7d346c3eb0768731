"""
Processor registry for uploader types.

Each uploader type owns one registry, created lazily the first time it is
looked up. Entries are only ever appended; the order they were declared in is
the order the dispatcher runs them in.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from uploadkit.processing.types import ProcessorEntry, expand_step
from uploadkit.utils.logging import get_logger

logger = get_logger("uploadkit.processing.registry")

# Attribute holding a type's own registry. Looked up in the type's __dict__
# so a subclass never picks up its parent's registry through the MRO.
REGISTRY_ATTR = "__uploadkit_processors__"


class ProcessorRegistry:
    """Ordered, append-only list of processor entries."""

    def __init__(self, entries: Any = ()) -> None:
        self._entries: list[ProcessorEntry] = []
        for entry in entries:
            self._entries.extend(expand_step(entry))

    def declare(self, *steps: Any) -> None:
        """
        Append processing steps.

        Each step is an operation name, a mapping of operation name to
        arguments, or a ``ProcessorEntry``. Steps are expanded left to right,
        mapping pairs in the mapping's own order. Nothing is validated here:
        unknown operations and bad arity only surface when the pipeline runs.

        Examples:
            registry.declare("sepiatone", "vignette")
            registry.declare({"scale": [200, 200]})
        """
        for step in steps:
            expanded = expand_step(step)
            self._entries.extend(expanded)
            for entry in expanded:
                logger.debug(f"Declared processor '{entry.operation}' with arguments {list(entry.arguments)}")

    def list(self) -> tuple[ProcessorEntry, ...]:
        """Return the declared entries, in execution order."""
        return tuple(self._entries)

    def copy(self) -> ProcessorRegistry:
        return ProcessorRegistry(self._entries)

    def __iter__(self) -> Iterator[ProcessorEntry]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessorRegistry):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        steps = ", ".join(f"{e.operation}{e.arguments!r}" for e in self._entries)
        return f"ProcessorRegistry([{steps}])"


def registry_for(owner: type) -> ProcessorRegistry:
    """
    Get the registry owned by ``owner``, creating an empty one on first use.

    Args:
        owner: Uploader type (a class, not an instance)

    Returns:
        The type's own ProcessorRegistry
    """
    registry = owner.__dict__.get(REGISTRY_ATTR)
    if registry is None:
        registry = ProcessorRegistry()
        setattr(owner, REGISTRY_ATTR, registry)
    return registry


def process(owner: type, *steps: Any) -> None:
    """Declare processing steps on ``owner``'s registry."""
    registry_for(owner).declare(*steps)


def processors(owner: type) -> tuple[ProcessorEntry, ...]:
    """List the processing steps declared on ``owner``."""
    return registry_for(owner).list()
