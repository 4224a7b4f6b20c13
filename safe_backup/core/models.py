"""Data models for safe backup operations."""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..utils.formatters import format_timestamp

BACKUP_SUFFIX = ".bak"


def backup_name_for(filename: str) -> str:
    """Return the backup filename paired with ``filename``."""
    return f"{filename}{BACKUP_SUFFIX}"


@dataclass(frozen=True)
class ValidatedPath:
    """A filename that passed every path safety check."""
    name: str
    path: str


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class AuditRecord:
    """One timestamped line of the audit log."""
    action: str
    timestamp: datetime = field(default_factory=_utc_now)

    def format_line(self) -> str:
        return f"[{format_timestamp(self.timestamp)}] {self.action}\n"


class Command(enum.Enum):
    """Operations that can be requested at the command prompt."""
    BACKUP = "backup"
    RESTORE = "restore"
    DELETE = "delete"

    @classmethod
    def parse(cls, text: str) -> Optional["Command"]:
        """Parse a command name case-insensitively, or return None."""
        value = text.strip().lower()
        for command in cls:
            if command.value == value:
                return command
        return None
