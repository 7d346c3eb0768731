"""
Declare uploader pipelines from configuration.

A config file can add processing steps to an uploader type::

    uploaders:
      AvatarUploader:
        processors:
          - strip_metadata
          - scale: [200, 200]

Steps use the same forms as ``Uploader.process``: a bare operation name, or a
mapping of operation name to arguments.
"""

from __future__ import annotations

from uploadkit.config.loader import Config
from uploadkit.config.singleton import get_config
from uploadkit.exceptions import ConfigurationError
from uploadkit.processing.registry import registry_for
from uploadkit.utils.logging import get_logger

logger = get_logger("uploadkit.config.pipelines")


def apply_processor_config(uploader_cls: type, config: Config | None = None, name: str | None = None) -> int:
    """
    Declare the processors configured for ``uploader_cls``.

    Args:
        uploader_cls: Uploader type to declare on
        config: Config to read (default: the global config, if set)
        name: Key under ``uploaders`` (default: the class name)

    Returns:
        Number of entries declared

    Raises:
        ConfigurationError: The ``processors`` value is not a list
    """
    if config is None:
        config = get_config()
        if config is None:
            return 0

    key = name or uploader_cls.__name__
    uploaders = config.get("uploaders", {})
    if not isinstance(uploaders, dict):
        raise ConfigurationError(f"'uploaders' must be a mapping, got {type(uploaders).__name__}")
    section = uploaders.get(key)
    if section is None:
        return 0
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'uploaders.{key}' must be a mapping, got {type(section).__name__}",
            details={"uploader": key},
        )

    steps = section.get("processors")
    if steps is None:
        return 0
    if not isinstance(steps, list):
        raise ConfigurationError(
            f"'uploaders.{key}.processors' must be a list, got {type(steps).__name__}",
            details={"uploader": key},
        )

    registry = registry_for(uploader_cls)
    before = len(registry)
    registry.declare(*steps)
    added = len(registry) - before
    logger.info(f"Declared {added} processor(s) on {uploader_cls.__name__} from config")
    return added
