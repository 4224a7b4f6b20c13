"""
Safe Backup - Backup, restore or delete a single file with audit logging.

This package validates user-supplied filenames against path traversal and
absolute-path attacks before touching the filesystem, and appends every
action to an audit log.
"""

__version__ = "1.0.0"

from .core.backup_tool import SafeBackup
from .core.path_validator import PathValidator
from .core.file_operations import FileOperations
from .core.audit_log import AuditLog

__all__ = ["SafeBackup", "PathValidator", "FileOperations", "AuditLog"]
