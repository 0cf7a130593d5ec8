"""
CLI Configuration Management

Provides configuration loading and validation for the Music Catalog CLI.
Values are layered: built-in defaults, then an optional JSON config file,
then environment variables (a .env file is loaded first), then command
line flags.
"""

import os
import json
from typing import Dict, Any, Optional
from pathlib import Path

from dotenv import load_dotenv

from ..core.exceptions import ConfigurationError
from ..core.models import CatalogOptions, OutputShape


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Environment variable -> (section, key, converter)
ENV_OVERRIDES = {
    'MUSIC_CATALOG_INPUT_DIR': ('catalog', 'input_dir', str),
    'MUSIC_CATALOG_OUTPUT': ('catalog', 'output_path', str),
    'MUSIC_CATALOG_GENRE': ('catalog', 'genre', str),
    'MUSIC_CATALOG_BASE_DIR': ('catalog', 'base_dir', str),
    'MUSIC_CATALOG_SHAPE': ('catalog', 'output_shape', str),
    'MUSIC_CATALOG_WORKERS': ('processing', 'workers', int),
    'MUSIC_CATALOG_LOG_LEVEL': ('logging', 'console_level', str),
    'MUSIC_CATALOG_LOG_DIR': ('logging', 'log_dir', str),
}


class CLIConfig:
    """
    CLI configuration manager

    Features:
    - Multiple configuration sources (file, environment, defaults)
    - .env discovery in the working directory and its parents
    - Configuration validation
    """

    def __init__(self, config_path: Optional[str] = None, load_env_file: bool = True):
        """Initialize configuration manager"""
        self.config_path = config_path
        self._defaults = self._get_default_config()

        # Load .env file if present
        if load_env_file:
            env_path = self._find_env_file()
            if env_path:
                load_dotenv(env_path)

    def _find_env_file(self) -> Optional[str]:
        """Find .env file in current directory or parent directories"""
        current_dir = Path.cwd()

        # Check current directory and up to 3 parent directories
        for _ in range(4):
            env_file = current_dir / '.env'
            if env_file.exists():
                return str(env_file)
            if current_dir == current_dir.parent:  # Reached root
                break
            current_dir = current_dir.parent

        return None

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values"""
        defaults = CatalogOptions()
        return {
            "catalog": {
                "input_dir": defaults.input_dir,
                "output_path": defaults.output_path,
                "genre": defaults.genre,
                "base_dir": defaults.base_dir,
                "output_shape": defaults.output_shape.value,
                "extensions": list(defaults.extensions),
            },
            "processing": {
                "workers": defaults.workers,
                "show_progress": defaults.show_progress,
            },
            "logging": {
                "console_level": "INFO",
                "file_level": "DEBUG",
                "log_dir": None,
                "enable_console": True,
            },
        }

    def load_config(self) -> Dict[str, Any]:
        """
        Load the merged configuration (defaults, file, environment)

        Raises:
            ConfigurationError: If the config file is unreadable or values are invalid
        """
        config = json.loads(json.dumps(self._defaults))

        if self.config_path:
            self._merge(config, self._load_config_file(self.config_path))

        self._apply_env_overrides(config)
        self.validate(config)
        return config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from JSON file"""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                "Error loading config file",
                details=str(e),
                filepath=config_path
            )

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a JSON object", filepath=config_path)
        return data

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Merge override sections into base (one level deep)"""
        for section, values in override.items():
            if isinstance(values, dict) and isinstance(base.get(section), dict):
                base[section].update(values)
            else:
                base[section] = values

    def _apply_env_overrides(self, config: Dict[str, Any]):
        """Apply MUSIC_CATALOG_* environment variables"""
        for env_name, (section, key, converter) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or raw == '':
                continue
            try:
                config.setdefault(section, {})[key] = converter(raw)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid value for {env_name}: {raw!r}"
                )

    def validate(self, config: Dict[str, Any]):
        """Validate configuration values"""
        catalog = config.get('catalog', {})
        processing = config.get('processing', {})

        shapes = {shape.value for shape in OutputShape}
        shape = str(catalog.get('output_shape', '')).lower()
        if shape not in shapes:
            raise ConfigurationError(
                f"Unknown output shape: {catalog.get('output_shape')!r}",
                details=f"Expected one of: {', '.join(sorted(shapes))}"
            )

        workers = processing.get('workers')
        if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
            raise ConfigurationError(f"Workers must be a positive integer, got {workers!r}")

        extensions = catalog.get('extensions')
        if not extensions or not isinstance(extensions, (list, tuple)):
            raise ConfigurationError("At least one audio file extension is required")

        logging_section = config.get('logging', {})
        for key in ('console_level', 'file_level'):
            level = logging_section.get(key)
            if str(level).upper() not in LOG_LEVELS:
                raise ConfigurationError(
                    f"Unknown log level for {key}: {level!r}",
                    details=f"Expected one of: {', '.join(LOG_LEVELS)}"
                )


def create_catalog_options(config: Dict[str, Any], args=None) -> CatalogOptions:
    """Create CatalogOptions from configuration, letting CLI args win when given"""
    catalog = dict(config.get('catalog', {}))
    processing = dict(config.get('processing', {}))

    # Helper: CLI value if explicitly supplied, otherwise the config value
    def get_value(arg_name: str, section: Dict[str, Any], key: str):
        if args is not None:
            cli_value = getattr(args, arg_name, None)
            if cli_value is not None:
                return cli_value
        return section.get(key)

    return CatalogOptions(
        input_dir=get_value('input_dir', catalog, 'input_dir'),
        output_path=get_value('output', catalog, 'output_path'),
        genre=get_value('genre', catalog, 'genre'),
        base_dir=get_value('base_dir', catalog, 'base_dir'),
        output_shape=get_value('shape', catalog, 'output_shape'),
        extensions=tuple(get_value('extensions', catalog, 'extensions')),
        workers=get_value('workers', processing, 'workers'),
        show_progress=get_value('show_progress', processing, 'show_progress'),
    )
