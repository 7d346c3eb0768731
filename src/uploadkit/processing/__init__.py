"""
Declarative processing pipelines for uploaders.
"""

from uploadkit.processing.checks import ProcessorIssue, check_processors
from uploadkit.processing.dispatcher import run_processors
from uploadkit.processing.registry import ProcessorRegistry, process, processors, registry_for
from uploadkit.processing.types import ProcessorEntry, ProcessorStep

__all__ = [
    "ProcessorEntry",
    "ProcessorStep",
    "ProcessorRegistry",
    "registry_for",
    "process",
    "processors",
    "run_processors",
    "check_processors",
    "ProcessorIssue",
]
