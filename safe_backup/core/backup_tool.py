"""Main safe backup coordinator."""

import logging
import os
from typing import Callable, Optional

import click

from .audit_log import AuditLog
from .errors import AuditLogError, SafeBackupError
from .file_operations import FileOperations
from .models import Command
from .path_validator import PathValidator
from ..config.config_manager import ConfigManager


class SafeBackup:
    """Validates a filename once and dispatches the requested operation."""
    
    def __init__(self, config_path: Optional[str] = None, root: Optional[str] = None,
                 confirm: Optional[Callable[[str], str]] = None):
        """Initialize safe backup.
        
        Args:
            config_path: Optional path to configuration file.
            root: Directory operations are confined to. Defaults to the
                current working directory.
            confirm: Optional replacement for the delete confirmation prompt.
        """
        self.config_manager = ConfigManager(config_path)
        self.config = self.config_manager.load_config()
        self.root = os.path.abspath(root if root is not None else os.getcwd())
        self.validator = None
        self.audit_log = None
        self.operations = None
        self.max_input_length = 255
        self.logger = logging.getLogger(__name__)
        
        # Initialize components
        self._initialize_components(confirm)
    
    def _initialize_components(self, confirm: Optional[Callable[[str], str]]):
        """Initialize validator, audit log and operations from config."""
        audit_config = self.config_manager.get_audit_config()
        operations_config = self.config_manager.get_operations_config()
        input_config = self.config_manager.get_input_config()
        
        self.validator = PathValidator(self.root)
        self.audit_log = AuditLog(audit_config.get('log_file', 'logfile.txt'), root=self.root)
        self.operations = FileOperations(
            self.validator,
            self.audit_log,
            confirm=confirm,
            atomic_writes=operations_config.get('atomic_writes', False)
        )
        self.max_input_length = input_config.get('max_length', 255)
        
        self.logger.debug(f"Root directory: {self.root}")
        self.logger.debug(f"Audit log: {self.audit_log.log_file}")
    
    def run(self, filename: str, command: str) -> bool:
        """Validate ``filename`` and run ``command`` on it.
        
        Args:
            filename: Filename as entered by the user.
            command: Command name as entered by the user.
            
        Returns:
            True if a known command ran, False for an unknown command.
            
        Raises:
            SafeBackupError: If validation or the operation fails.
        """
        self.validator.validate(filename)
        
        parsed = Command.parse(command)
        if parsed is None:
            click.echo(f"Unknown command: '{command}'")
            self.logger.info(f"Unknown command: {command!r}")
            try:
                self.audit_log.append(f"Unknown command attempted: '{command}'")
            except AuditLogError as e:
                self.logger.warning(f"Could not record unknown command in audit log: {e}")
            return False
        
        self.logger.info(f"Running {parsed.value} on {filename}")
        if parsed is Command.BACKUP:
            self.operations.backup(filename)
        elif parsed is Command.RESTORE:
            self.operations.restore(filename)
        else:
            self.operations.delete(filename)
        return True
    
    def record_error(self, error: SafeBackupError) -> bool:
        """Append a best-effort audit record for a failed run.
        
        Returns:
            True if the record was written.
        """
        try:
            self.audit_log.append(f"Error occurred: {error}")
            return True
        except AuditLogError as e:
            self.logger.warning(f"Could not record error in audit log: {e}")
            return False
