"""
Config Manager - project configuration access
Access .redwood.yaml settings using dot notation
"""

import threading
from pathlib import Path
from typing import Any, Optional, Dict, Union

import yaml

from redwood.exceptions import ConfigException


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Load the project file
        Config.load('/path/to/site/.redwood.yaml')

        # Get config value
        root = Config.get('view.root')

        # With default
        layout = Config.get('view.default_layout', None)

        # Set runtime value
        Config.set('app.env', 'production')

        # Check existence
        if Config.has('logging.file'):
            ...

    The config file is YAML:
        app:
          name: my-site
        view:
          root: src
          output: build
    """

    _lock = threading.Lock()
    _data: Dict[str, Any] = {}
    _path: Optional[Path] = None
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def load(cls, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a YAML config file, replacing any previously loaded values
        and runtime overrides

        Args:
            path: Path to the config file

        Returns:
            The parsed config

        Raises:
            ConfigException: If the file cannot be read or is not a mapping
        """
        path = Path(path).resolve()
        try:
            with path.open('r', encoding='utf-8') as handle:
                data = yaml.safe_load(handle)
        except OSError as e:
            raise ConfigException(f"Could not read config file: {e.strerror}", path=path) from e
        except yaml.YAMLError as e:
            raise ConfigException(f"Config file is not valid YAML: {e}", path=path) from e

        # An empty file is a valid, empty config
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException("Config file must contain a mapping", path=path)

        with cls._lock:
            cls._data = data
            cls._path = path
            cls._runtime_overrides.clear()
        return data

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.root', 'logging.level')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            root = Config.get('view.root', 'src')
            root = Config.get('VIEW.Root', 'src')  # Same result
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        value: Any = cls._data
        for part in key_lower.split('.'):
            if not isinstance(value, dict):
                return default

            # Dict lookup (case-insensitive)
            for dict_key in value.keys():
                if str(dict_key).lower() == part:
                    value = value[dict_key]
                    break
            else:
                return default

        return default if value is None else value

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('app.env', 'testing')
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def base_path(cls, *paths: str) -> Optional[Path]:
        """
        Directory holding the loaded config file

        Relative paths in the config (view.root, view.output) resolve against it.
        """
        if cls._path is None:
            return None
        return cls._path.parent.joinpath(*paths)

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()

    @classmethod
    def reset(cls):
        """Forget the loaded file and all overrides"""
        with cls._lock:
            cls._data = {}
            cls._path = None
            cls._runtime_overrides.clear()

    @classmethod
    def as_object(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration as an object with attribute access

        Example:
            view = Config.as_object('view')
            view.root
        """
        value = cls.get(key, default)

        if isinstance(value, dict):
            return ConfigObject(**value)

        return value


class ConfigObject:
    """
    Simple object wrapper for dict configs
    Allows attribute access to config values
    """

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            # Recursively convert nested dicts to ConfigObjects
            if isinstance(value, dict):
                setattr(self, key, ConfigObject(**value))
            else:
                setattr(self, key, value)

    def __repr__(self):
        attrs = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'ConfigObject({attrs})'

    def __getattr__(self, name):
        raise AttributeError(f"Config has no attribute '{name}'")
