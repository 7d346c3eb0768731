"""
Configuration management.

Pipeline declaration from config lives in ``uploadkit.config.pipelines``;
it is not imported here because it depends on the processing package.
"""

from uploadkit.config.loader import Config, load_config
from uploadkit.config.singleton import get_config, reset_config, set_config

__all__ = [
    "load_config",
    "Config",
    "set_config",
    "get_config",
    "reset_config",
]
