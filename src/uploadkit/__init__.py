"""
uploadkit - declarative processing pipelines for file uploaders.
"""

__version__ = "0.1.0"

# Processing pipeline
from uploadkit.processing import (
    ProcessorEntry,
    ProcessorIssue,
    ProcessorRegistry,
    ProcessorStep,
    check_processors,
    process,
    processors,
    registry_for,
    run_processors,
)
from uploadkit.uploader import Uploader

# Config
from uploadkit.config import Config, get_config, load_config, set_config
from uploadkit.config.pipelines import apply_processor_config

# Exceptions
from uploadkit.exceptions import ConfigurationError, DiscoveryError, UploadKitError

# Testing utilities
from uploadkit.testing import TraceResult, trace_processors

# Logging utilities
from uploadkit.utils.logging import get_logger, setup_logging, setup_logging_from_config

__all__ = [
    # Pipeline
    "Uploader",
    "ProcessorEntry",
    "ProcessorStep",
    "ProcessorRegistry",
    "registry_for",
    "process",
    "processors",
    "run_processors",
    "check_processors",
    "ProcessorIssue",
    # Config
    "Config",
    "set_config",
    "get_config",
    "load_config",
    "apply_processor_config",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    # Testing
    "trace_processors",
    "TraceResult",
    # Exceptions
    "UploadKitError",
    "ConfigurationError",
    "DiscoveryError",
]
