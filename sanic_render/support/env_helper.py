"""
EnvHelper - Read environment variables with .env support
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        # Read
        env = EnvHelper.get('APP_ENV', 'development')

        # Load a specific file
        EnvHelper.load(Path('/srv/app/.env'))
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Optional[Path] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls._env_path = Path.cwd() / '.env'

            # Mark as loaded even without a file so lookups stay cheap
            cls._loaded = True

            if not cls._env_path.exists():
                return False

            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            app_env = EnvHelper.get('APP_ENV', 'development')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def reset(cls):
        """Forget the loaded state so the next lookup reloads the .env file"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False
