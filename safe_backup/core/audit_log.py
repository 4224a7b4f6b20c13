"""Append-only audit log of every action taken."""

import logging
import os
from typing import Optional

from .errors import AuditLogError
from .models import AuditRecord

DEFAULT_LOG_FILE = "logfile.txt"


class AuditLog:
    """Appends timestamped action records to a fixed log file."""

    def __init__(self, log_file: str = DEFAULT_LOG_FILE, root: Optional[str] = None):
        """Initialize audit log.

        Args:
            log_file: Path of the audit log. Relative paths are taken
                relative to ``root``.
            root: Base directory for a relative ``log_file``. Defaults to
                the current working directory.
        """
        base = os.path.abspath(root if root is not None else os.getcwd())
        self.log_file = os.path.join(base, log_file)
        self.logger = logging.getLogger(__name__)

    def append(self, action: str) -> AuditRecord:
        """Append one record for ``action``.

        The file is created if missing and flushed before returning.

        Raises:
            AuditLogError: If the log file cannot be opened or written.
        """
        record = AuditRecord(action=action)
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(record.format_line())
                f.flush()
        except OSError as e:
            raise AuditLogError(f"Could not write audit log {self.log_file}", e) from e

        self.logger.debug(f"Audit: {action}")
        return record
