# Path: order_config/config_loader.py
"""
Configuration Loader for order_config

Loads configuration from a .env file for the manifest resolver.
One shared instance, so the CLI and library callers see the same settings.

All paths and switches come from environment variables prefixed with
ORDER_CONFIG_. A .env file in the project root is read first when present.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import IDENTITY_COLUMN


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

ENV_PREFIX: str = 'ORDER_CONFIG_'

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Table Defaults
DEFAULT_MANIFEST_FILE: str = 'input_files/manifest.csv'
DEFAULT_VALUES_FILE: str = 'input_files/cfgs.csv'


class ConfigLoader:
    """
    Singleton configuration loader for order_config.

    Loads configuration from environment variables with type
    conversion and sensible defaults. Relative table paths are
    resolved against the project root.

    Example:
        config = ConfigLoader()
        manifest_file = config.get('manifest_file')  # Returns Path object
        strict = config.get('strict_load')  # Returns bool
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # order_config/config_loader.py -> .env is in the project root
        self.project_root = Path(__file__).resolve().parent.parent
        env_path = self.project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', 'development'),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # TABLE SOURCES
            # ================================================================
            'manifest_file': self._get_path('MANIFEST_FILE', DEFAULT_MANIFEST_FILE),
            'values_file': self._get_path('VALUES_FILE', DEFAULT_VALUES_FILE),
            'identity_column': self._get_env('IDENTITY_COLUMN', IDENTITY_COLUMN),
            'strict_load': self._get_bool('STRICT_LOAD', False),
            'dump_table': self._get_bool('DUMP_TABLE', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', True),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up one loaded setting.

        Args:
            key: Setting name (e.g., 'manifest_file')
            default: Returned when the setting is unknown

        Returns:
            Typed setting value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, default: Optional[str] = None) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name without prefix
            default: Fallback path string when the variable is unset

        Returns:
            Path object (relative paths anchored at the project root) or None
        """
        value = os.getenv(ENV_PREFIX + key, default)

        if not value:
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        path = Path(value)
        if not path.is_absolute():
            path = self.project_root / path
        return path

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing table paths."""
        return (
            f"ConfigLoader("
            f"manifest_file={self._config.get('manifest_file')}, "
            f"values_file={self._config.get('values_file')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
