"""
uploadkit exception hierarchy.

These exceptions are raised by the configuration and discovery layers only.
Failures inside a processing pipeline (unknown operation, wrong arity, an
operation raising) propagate to the caller of ``run_processors`` unchanged
and are never wrapped in one of these.

Hierarchy::

    UploadKitError
    ├── ConfigurationError   - config loading, parsing, shape errors
    └── DiscoveryError       - uploader target cannot be imported/resolved
"""

from __future__ import annotations


class UploadKitError(Exception):
    """Base exception for all uploadkit errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- Configuration -----------------------------------------------------------


class ConfigurationError(UploadKitError):
    """Raised when configuration loading, parsing, or validation fails."""


# --- Discovery ---------------------------------------------------------------


class DiscoveryError(UploadKitError):
    """Raised when an uploader target such as ``pkg.mod:Cls`` cannot be loaded."""

    def __init__(self, target: str, message: str) -> None:
        super().__init__(f"Cannot load uploader '{target}': {message}", details={"target": target})
        self.target = target
