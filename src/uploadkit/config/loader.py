"""
Configuration file loading.

Loads ``uploadkit.yaml`` from a project directory, merges the optional
``uploadkit.{env}.yaml`` on top, and resolves ``${VAR}``, ``${VAR:-default}``
and ``{env}`` placeholders. Unset variables without a default are errors.
"""

import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from uploadkit.exceptions import ConfigurationError

DEFAULT_CONFIG_FILENAME = "uploadkit.yaml"


class Config:
    """uploadkit configuration container with dict-like access."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        value = self.data
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def __getitem__(self, key: str) -> Any:
        """Dict-like access: config['key'] or config['nested.key']."""
        if isinstance(key, str) and "." in key:
            return self.get(key)
        if key in self.data:
            value = self.data[key]
            # Nested dicts come back as Config objects for chaining
            if isinstance(value, dict):
                return Config(value)
            return value
        raise KeyError(f"Config key '{key}' not found")

    def __contains__(self, key: str) -> bool:
        if isinstance(key, str) and "." in key:
            value = self.data
            for k in key.split("."):
                if not isinstance(value, dict) or k not in value:
                    return False
                value = value[k]
            return True
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def keys(self):
        return self.data.keys()

    def values(self):
        return self.data.values()

    def items(self):
        return self.data.items()

    def validate(self) -> None:
        """Validate configuration structure."""
        if not isinstance(self.data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(self.data).__name__}")

        errors = []
        uploaders = self.data.get("uploaders")
        if uploaders is not None:
            if not isinstance(uploaders, dict):
                errors.append(f"'uploaders' must be a mapping, got {type(uploaders).__name__}")
            else:
                for name, section in uploaders.items():
                    if not isinstance(section, dict):
                        errors.append(f"'uploaders.{name}' must be a mapping, got {type(section).__name__}")
                        continue
                    steps = section.get("processors")
                    if steps is not None and not isinstance(steps, list):
                        errors.append(f"'uploaders.{name}.processors' must be a list, got {type(steps).__name__}")

        logging_section = self.data.get("logging")
        if logging_section is not None and not isinstance(logging_section, dict):
            errors.append(f"'logging' must be a mapping, got {type(logging_section).__name__}")

        if errors:
            raise ConfigurationError("\n".join(errors), details={"errors": errors})


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read one YAML file, turning parse failures into ConfigurationError."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            raise ConfigurationError(
                f"Error parsing {path.name} at line {mark.line + 1}, column {mark.column + 1}:\n"
                f"  {e}\n"
                f"  File: {path}",
                details={"file": str(path), "line": mark.line + 1, "column": mark.column + 1},
            ) from e
        raise ConfigurationError(f"Error parsing {path.name}: {e}\n  File: {path}", details={"file": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path.name} must contain a mapping at the top level, got {type(data).__name__}",
            details={"file": str(path)},
        )
    return data


def load_config(
    project_path: Path | None = None,
    env: str | None = None,
    filename: str = DEFAULT_CONFIG_FILENAME,
) -> Config:
    """
    Load uploadkit configuration.

    Args:
        project_path: Directory holding the config file (default: current directory)
        env: Environment name; ``uploadkit.{env}.yaml`` is merged over the base file
        filename: Base config file name

    Returns:
        Config instance with merged configuration

    Raises:
        FileNotFoundError: The base config file does not exist
        ConfigurationError: A config file cannot be parsed, has the wrong shape,
            or references an unset environment variable without a default
    """
    if project_path is None:
        project_path = Path.cwd()
    project_path = Path(project_path)

    base_config_path = project_path / filename
    if not base_config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {base_config_path}\n"
            f"  Suggestion: Create a {filename} file in your project root"
        )
    if not base_config_path.is_file():
        raise FileNotFoundError(f"Configuration path is not a file: {base_config_path}")

    config_data = _read_yaml(base_config_path)

    if env:
        base_name = Path(filename)
        env_config_path = project_path / f"{base_name.stem}.{env}{base_name.suffix}"
        if env_config_path.exists():
            _merge_dict(config_data, _read_yaml(env_config_path))

    config_data = _substitute(config_data, env or "dev", "")
    config = Config(config_data)
    config.validate()
    return config


def _merge_dict(base: dict, override: dict):
    """Recursively merge override into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value


_ENV_VAR = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


def _substitute(value: Any, env: str, path: str) -> Any:
    """
    Resolve ``${VAR}``, ``${VAR:-default}`` and ``{env}`` in string values.

    An unset variable without a default raises ConfigurationError naming
    the key it appears under.
    """
    if isinstance(value, dict):
        return {k: _substitute(v, env, f"{path}.{k}" if path else str(k)) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute(item, env, f"{path}[{i}]") for i, item in enumerate(value)]
    if not isinstance(value, str):
        return value

    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        resolved = os.environ.get(name, default)
        if resolved is None:
            raise ConfigurationError(
                f"Environment variable '{name}' is not set (used at '{path}')\n"
                f"  Suggestion: export {name} or write ${{{name}:-default}}",
                details={"variable": name, "key": path},
            )
        return resolved

    return _ENV_VAR.sub(replace, value).replace("{env}", env)
