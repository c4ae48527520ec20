"""
EnvHelper - Read/Write .env files programmatically
Environment variable management for Redwood projects
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv, set_key


class EnvHelper:
    """
    Environment variable manager with .env file read/write support

    Usage:
        # Load the project's .env
        EnvHelper.load(Path('/site/.env'))

        # Read
        env = EnvHelper.get('APP_ENV', 'local')

        # Write
        EnvHelper.set('APP_ENV', 'production')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to the previously loaded path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was loaded
        """
        with cls._lock:
            if env_path is not None:
                cls._env_path = Path(env_path)

            if cls._env_path is None or not cls._env_path.exists():
                return False

            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            app_env = EnvHelper.get('APP_ENV', 'local')
        """
        return os.getenv(key, default)

    @classmethod
    def set(cls, key: str, value: Any, env_path: Union[str, Path, None] = None,
            quote_mode: str = 'never', apply: bool = True) -> bool:
        """
        Set environment variable and write it to a .env file

        Args:
            key: Environment variable name
            value: Value to set
            env_path: File to write (defaults to the loaded .env)
            quote_mode: Quote mode ('auto', 'always', 'never')
            apply: Also set the variable in the current process

        Returns:
            bool: True if set successfully
        """
        with cls._lock:
            target = Path(env_path) if env_path is not None else cls._env_path
            if target is None:
                raise ValueError("No .env file has been loaded or given")

            if not target.exists():
                target.touch()

            str_value = str(value) if not isinstance(value, str) else value
            result = set_key(str(target), key, str_value, quote_mode=quote_mode)

            if apply:
                os.environ[key] = str_value

            return result[0] is True
