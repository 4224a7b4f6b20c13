"""Core safe backup functionality."""

from .backup_tool import SafeBackup
from .path_validator import PathValidator
from .file_operations import FileOperations
from .audit_log import AuditLog
from .models import ValidatedPath, AuditRecord, Command

__all__ = ["SafeBackup", "PathValidator", "FileOperations", "AuditLog",
           "ValidatedPath", "AuditRecord", "Command"]
