"""
Configuration management for egograph
"""

import copy
import os
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from .exceptions import ConfigurationError

class Config:
    """Configuration manager with environment-specific settings"""

    def __init__(self, config_path: Optional[str] = None, environment: str = "default"):
        self.environment = environment
        self._config = self._load_config(config_path)

    def _load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from YAML files"""

        # Default configuration
        default_config = {
            'logging': {
                'level': os.getenv('EGOGRAPH_LOG_LEVEL', 'WARNING'),
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            },
            'loader': {
                'comment_prefix': '#',
                'strict': True
            },
            'scc': {
                'min_size': 1
            }
        }

        if config_path:
            config_file = Path(config_path)
            if not config_file.exists():
                raise ConfigurationError(f"Config file {config_file} does not exist")
        else:
            # Look for config files in standard locations
            possible_paths = [
                Path('config') / f'{self.environment}.yaml',
                Path('config') / 'default.yaml',
            ]

            config_file = None
            for path in possible_paths:
                if path.exists():
                    config_file = path
                    break

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to load config from {config_file}: {e}") from e
            if file_config:
                if not isinstance(file_config, dict):
                    raise ConfigurationError(f"Config file {config_file} must contain a mapping")
                default_config = self._deep_merge(default_config, file_config)

        return default_config

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, path: str, default: Any = None) -> Any:
        """Get config value using dot notation (e.g., 'loader.strict')"""
        keys = path.split('.')
        value = self._config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, path: str, value: Any) -> None:
        """Set config value using dot notation"""
        keys = path.split('.')
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

    @property
    def logging_config(self) -> Dict[str, str]:
        """Logging configuration"""
        return self.get('logging', {})

    @property
    def loader_config(self) -> Dict[str, Any]:
        """Edge-list loader configuration"""
        return self.get('loader', {})

    def to_dict(self) -> Dict[str, Any]:
        """Return full configuration as dictionary"""
        return copy.deepcopy(self._config)
