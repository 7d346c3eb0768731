"""
Static checks for declared pipelines.

Declaring a processor never validates anything; these checks let an uploader
author find typos and arity mistakes before an upload hits them. Nothing is
called while checking.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass

from uploadkit.processing.registry import registry_for

_MISSING = object()


@dataclass(frozen=True)
class ProcessorIssue:
    """A problem found with one pipeline entry."""

    position: int
    operation: str
    problem: str

    def __str__(self) -> str:
        return f"#{self.position} {self.operation}: {self.problem}"


def check_processors(uploader_cls: type) -> list[ProcessorIssue]:
    """
    Check every declared processor of ``uploader_cls`` against the class.

    Reports operations that are missing, not callable, or whose declared
    arguments do not bind to the method signature. Only class attributes are
    seen; callables assigned per instance in ``__init__`` are reported missing.

    Args:
        uploader_cls: Uploader type to check

    Returns:
        List of issues, empty if the pipeline looks runnable
    """
    issues: list[ProcessorIssue] = []
    for position, (operation, arguments) in enumerate(registry_for(uploader_cls).list()):
        if not isinstance(operation, str):
            issues.append(ProcessorIssue(position, repr(operation), "operation name must be a string"))
            continue

        attr = inspect.getattr_static(uploader_cls, operation, _MISSING)
        if attr is _MISSING:
            issues.append(ProcessorIssue(position, operation, f"{uploader_cls.__name__} has no method '{operation}'"))
            continue

        method = getattr(uploader_cls, operation)
        if not callable(method):
            issues.append(ProcessorIssue(position, operation, "is not callable"))
            continue

        try:
            signature = inspect.signature(method)
        except (TypeError, ValueError):
            # Builtins without introspectable signatures
            continue

        # Plain functions looked up on the class still expect ``self``
        params = list(signature.parameters.values())
        if inspect.isfunction(attr):
            params = params[1:]
            signature = signature.replace(parameters=params)

        try:
            signature.bind(*arguments)
        except TypeError as e:
            issues.append(ProcessorIssue(position, operation, f"arguments {list(arguments)} do not match: {e}"))

    return issues
