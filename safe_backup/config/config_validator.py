"""Configuration validation for safe backup."""

from typing import Dict, Any

from ..core.errors import ConfigurationError


class ConfigValidator:
    """Validates safe backup configuration."""
    
    KNOWN_SECTIONS = ['audit', 'input', 'operations', 'logging']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    
    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.
        
        Args:
            config: Configuration dictionary to validate.
            
        Raises:
            ConfigurationError: If configuration is invalid.
        """
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration must be a mapping")
        
        self._validate_structure(config)
        
        if 'audit' in config:
            self._validate_audit_config(config['audit'])
        if 'input' in config:
            self._validate_input_config(config['input'])
        if 'operations' in config:
            self._validate_operations_config(config['operations'])
        if 'logging' in config:
            self._validate_logging_config(config['logging'])
    
    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate that every known section present is a mapping.
        
        Args:
            config: Configuration dictionary.
            
        Raises:
            ConfigurationError: If a section is not a dictionary.
        """
        invalid_sections = []
        for section in self.KNOWN_SECTIONS:
            if section in config and not isinstance(config[section], dict):
                invalid_sections.append(section)
        
        if invalid_sections:
            raise ConfigurationError(f"Configuration sections must be dictionaries: {invalid_sections}")
    
    def _validate_audit_config(self, audit_config: Dict[str, Any]) -> None:
        log_file = audit_config.get('log_file', 'logfile.txt')
        if not isinstance(log_file, str) or not log_file.strip():
            raise ConfigurationError("Audit log_file must be a non-empty string")
    
    def _validate_input_config(self, input_config: Dict[str, Any]) -> None:
        max_length = input_config.get('max_length', 255)
        # bool is an int subclass
        if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
            raise ConfigurationError(f"Input max_length must be a positive integer: {max_length!r}")
    
    def _validate_operations_config(self, operations_config: Dict[str, Any]) -> None:
        atomic_writes = operations_config.get('atomic_writes', False)
        if not isinstance(atomic_writes, bool):
            raise ConfigurationError(f"Operations atomic_writes must be true or false: {atomic_writes!r}")
    
    def _validate_logging_config(self, logging_config: Dict[str, Any]) -> None:
        """Validate logging configuration.
        
        Args:
            logging_config: Logging configuration dictionary.
            
        Raises:
            ConfigurationError: If the level or file is invalid.
        """
        level = logging_config.get('level', 'WARNING')
        if not isinstance(level, str) or level.upper() not in self.LOG_LEVELS:
            raise ConfigurationError(f"Logging level must be one of {self.LOG_LEVELS}: {level!r}")
        
        log_file = logging_config.get('file')
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigurationError(f"Logging file must be a string: {log_file!r}")
