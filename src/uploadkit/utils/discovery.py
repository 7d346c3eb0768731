"""
Uploader discovery.

Resolves targets like ``myapp.uploaders:AvatarUploader`` or
``uploaders/avatar.py:AvatarUploader`` to the uploader class.
"""

import importlib
import importlib.util
import sys
from pathlib import Path

from uploadkit.exceptions import DiscoveryError
from uploadkit.utils.logging import get_logger

logger = get_logger("uploadkit.utils.discovery")


def _load_module_from_file(target: str, path: Path):
    if not path.is_file():
        raise DiscoveryError(target, f"file not found: {path}")

    module_name = f"_uploadkit_target_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise DiscoveryError(target, f"cannot import {path}")

    module = importlib.util.module_from_spec(spec)
    # Module must be in sys.modules while it executes (dataclasses look it up)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise DiscoveryError(target, f"error importing {path}: {e}") from e
    return module


def load_uploader(target: str, base_dir: Path | None = None) -> type:
    """
    Load the uploader class named by ``target``.

    Args:
        target: ``module.path:ClassName`` or ``path/to/file.py:ClassName``
        base_dir: Directory relative file paths are resolved against (default: cwd)

    Returns:
        The class object

    Raises:
        DiscoveryError: The module or class cannot be loaded
    """
    module_ref, sep, attr_path = target.rpartition(":")
    if not sep or not module_ref or not attr_path:
        raise DiscoveryError(target, "expected 'module:ClassName' or 'file.py:ClassName'")

    if module_ref.endswith(".py"):
        path = Path(module_ref)
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        module = _load_module_from_file(target, path)
    else:
        try:
            module = importlib.import_module(module_ref)
        except ImportError as e:
            raise DiscoveryError(target, f"cannot import module '{module_ref}': {e}") from e

    obj = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise DiscoveryError(target, f"'{module_ref}' has no attribute '{attr_path}'") from None

    if not isinstance(obj, type):
        raise DiscoveryError(target, f"'{attr_path}' is not a class")

    logger.debug(f"Loaded uploader {obj.__module__}.{obj.__qualname__} from '{target}'")
    return obj
