"""Configuration management for the safe backup tool."""

import os
import yaml
from typing import Dict, Any, Optional

from .config_validator import ConfigValidator
from ..core.errors import ConfigurationError


class ConfigManager:
    """Manages configuration loading and validation for safe backup."""
    
    DEFAULT_CONFIG_LOCATIONS = [
        "safe-backup.yaml",
        "safe-backup.yml",
        os.path.expanduser("~/.safe-backup/config.yaml"),
        os.path.expanduser("~/.safe-backup/config.yml"),
        "/etc/safe-backup/config.yaml",
        "/etc/safe-backup/config.yml"
    ]
    
    DEFAULTS = {
        'audit': {
            'log_file': 'logfile.txt'
        },
        'input': {
            'max_length': 255
        },
        'operations': {
            'atomic_writes': False
        },
        'logging': {
            'level': 'WARNING',
            'file': None
        }
    }
    
    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.
        
        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()
        
    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults.
        
        Returns:
            Dictionary containing configuration data.
            
        Raises:
            ConfigurationError: If an explicit config file is missing, or
                any config file found is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}
        
        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file {config_file}: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Error reading config file {config_file}: {e}") from e
        
        # Validate configuration
        self.validator.validate(self.config_data)
        
        # Set defaults
        self._set_defaults()
        
        return self.config_data
    
    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.
        
        Returns:
            Path to configuration file, or None if no file is found and
            no explicit path was given.
            
        Raises:
            ConfigurationError: If an explicit config path does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise ConfigurationError(f"Config file not found: {self.config_path}")
        
        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location
        
        return None
    
    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        for section, section_defaults in self.DEFAULTS.items():
            if section not in self.config_data:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value
    
    def get_audit_config(self) -> Dict[str, Any]:
        """Get audit log configuration.
        
        Returns:
            Audit configuration dictionary.
        """
        return self.config_data.get('audit', {})
    
    def get_input_config(self) -> Dict[str, Any]:
        return self.config_data.get('input', {})
    
    def get_operations_config(self) -> Dict[str, Any]:
        return self.config_data.get('operations', {})
    
    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.
        
        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})
