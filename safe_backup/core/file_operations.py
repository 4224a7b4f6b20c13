"""Backup, restore and delete of a single file under the root."""

import logging
import os
import tempfile
from typing import Callable, Optional

import click

from .audit_log import AuditLog
from .errors import AuditLogError, FileMissingError, InvalidPathError, OperationIOError
from .models import ValidatedPath, backup_name_for
from .path_validator import PathValidator
from ..utils.formatters import format_file_size


def prompt_line(text: str) -> str:
    """Read one line of confirmation input.

    End of input, an aborted prompt, or a read failure yields an empty
    response, which callers treat as a refusal.
    """
    try:
        return click.prompt(text, default="", show_default=False, prompt_suffix="")
    except (click.Abort, EOFError, OSError):
        return ""


class FileOperations:
    """Performs the three file operations, each followed by an audit record.

    Every operation validates its filename again even when the caller
    already did.
    """

    def __init__(self, validator: PathValidator, audit_log: AuditLog,
                 confirm: Optional[Callable[[str], str]] = None,
                 atomic_writes: bool = False):
        """Initialize file operations.

        Args:
            validator: Validator bound to the root directory.
            audit_log: Destination for audit records.
            confirm: Callable that shows a prompt and returns the response
                line. Defaults to an interactive prompt on standard input.
            atomic_writes: Write through a temporary file and rename it into
                place instead of overwriting the destination directly.
        """
        self.validator = validator
        self.audit_log = audit_log
        self.confirm = confirm or prompt_line
        self.atomic_writes = atomic_writes
        self.logger = logging.getLogger(__name__)

    def backup(self, filename: str) -> ValidatedPath:
        """Copy ``filename`` to ``filename.bak``, replacing any old backup.

        Returns:
            The validated backup path.

        Raises:
            InvalidPathError: If either name is rejected or the source is
                not a regular file.
            FileMissingError: If the source does not exist.
            OperationIOError: If reading or writing fails.
        """
        source = self.validator.validate(filename)
        self._require_regular_file(source, f"Source file '{filename}' does not exist")

        backup_name = backup_name_for(filename)
        backup = self.validator.validate(backup_name)

        contents = self._read(source)
        self._write(backup, contents)

        self.logger.info(f"Backed up {filename} ({format_file_size(len(contents))})")
        click.echo(f"Backup created: {backup_name}")
        self._audit(f"Performed backup of '{filename}'")
        return backup

    def restore(self, filename: str) -> ValidatedPath:
        """Overwrite ``filename`` with the contents of ``filename.bak``.

        The target is created if it does not exist.

        Returns:
            The validated target path.

        Raises:
            InvalidPathError: If either name is rejected or the backup is
                not a regular file.
            FileMissingError: If the backup does not exist.
            OperationIOError: If reading or writing fails.
        """
        target = self.validator.validate(filename)
        backup_name = backup_name_for(filename)
        backup = self.validator.validate(backup_name)
        self._require_regular_file(backup, f"Backup file '{backup_name}' does not exist")

        contents = self._read(backup)
        self._write(target, contents)

        self.logger.info(f"Restored {filename} ({format_file_size(len(contents))})")
        click.echo(f"File restored from: {backup_name}")
        self._audit(f"Performed restore to '{filename}'")
        return target

    def delete(self, filename: str) -> bool:
        """Delete ``filename`` after an interactive confirmation.

        Only a response of ``yes`` (trimmed, any case) deletes the file.

        Returns:
            True if the file was deleted, False if the user cancelled.

        Raises:
            InvalidPathError: If the name is rejected or is not a regular file.
            FileMissingError: If the file does not exist.
            OperationIOError: If the deletion fails.
        """
        target = self.validator.validate(filename)
        self._require_regular_file(target, f"File '{filename}' does not exist")

        response = self.confirm(f"Are you sure you want to delete '{filename}'? (yes/no): ")
        if (response or "").strip().lower() != "yes":
            click.echo("File deletion cancelled.")
            self._audit(f"Delete operation cancelled for '{filename}'")
            return False

        try:
            os.remove(target.path)
        except OSError as e:
            raise OperationIOError(f"Could not delete '{filename}'", e) from e

        self.logger.info(f"Deleted {filename}")
        click.echo("File deleted successfully.")
        self._audit(f"Performed delete on '{filename}'")
        return True

    def _require_regular_file(self, validated: ValidatedPath, missing_message: str):
        if not os.path.exists(validated.path):
            raise FileMissingError(validated.name, missing_message)
        if not os.path.isfile(validated.path):
            raise InvalidPathError(validated.name, "not a regular file",
                                   f"'{validated.name}' is not a regular file")

    def _read(self, validated: ValidatedPath) -> bytes:
        try:
            with open(validated.path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise OperationIOError(f"Could not read '{validated.name}'", e) from e

    def _write(self, validated: ValidatedPath, contents: bytes):
        if self.atomic_writes:
            self._write_atomic(validated, contents)
            return
        try:
            with open(validated.path, 'wb') as f:
                f.write(contents)
        except OSError as e:
            raise OperationIOError(f"Could not write '{validated.name}'", e) from e

    def _write_atomic(self, validated: ValidatedPath, contents: bytes):
        directory = os.path.dirname(validated.path)
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile('wb', dir=directory, prefix='.safe-backup-',
                                             delete=False) as tmp:
                tmp_path = tmp.name
                tmp.write(contents)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, validated.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise OperationIOError(f"Could not write '{validated.name}'", e) from e

    def _audit(self, action: str):
        # Non-fatal: the filesystem change stands even if the record is lost
        try:
            self.audit_log.append(action)
        except AuditLogError as e:
            self.logger.warning(f"Audit record not written for '{action}': {e}")
