"""
Process-wide configuration.

The application sets the Config it loaded once; logging auto-setup and
``apply_processor_config`` fall back to it when no config is passed.
"""

import threading

from uploadkit.config.loader import Config

_current: Config | None = None
_lock = threading.Lock()


def set_config(config: Config) -> None:
    """Make ``config`` the process-wide configuration."""
    global _current
    with _lock:
        _current = config


def get_config() -> Config | None:
    """Return the process-wide configuration, or None if none was set."""
    return _current


def reset_config() -> None:
    """Forget the process-wide configuration (for tests)."""
    global _current
    with _lock:
        _current = None
