"""Filename validation guarding every filesystem operation."""

import logging
import os
from typing import Optional

from .errors import InvalidPathError
from .models import ValidatedPath
from ..utils.formatters import truncate_string


class PathValidator:
    """Decides whether a user-supplied filename is safe to act on.

    Rules are checked in a fixed order and the first failing rule wins:
    empty input, ``..`` anywhere, reserved characters, absolute paths, and
    finally containment of ``root`` joined with the filename inside ``root``.

    Symlinks are never followed. A symlink inside the root that points
    elsewhere is accepted; that residual risk is documented, not patched.
    """

    INVALID_CHARACTERS = frozenset('<>:"|?*\0')

    def __init__(self, root: Optional[str] = None):
        """Initialize path validator.

        Args:
            root: Directory all filenames are resolved against. Defaults to
                the current working directory at construction time.
        """
        self.root = os.path.abspath(root if root is not None else os.getcwd())
        self.logger = logging.getLogger(__name__)

    def validate(self, filename: str) -> ValidatedPath:
        """Validate a raw filename.

        Args:
            filename: Untrusted filename as typed by the user.

        Returns:
            ValidatedPath carrying the original filename, unmodified, and
            its location under the root.

        Raises:
            InvalidPathError: If any rule rejects the filename.
        """
        if not filename or not filename.strip():
            self._reject(filename, "empty", "Filename cannot be empty")

        if ".." in filename:
            self._reject(filename, "traversal", "Path traversal sequences are not allowed")

        if any(char in self.INVALID_CHARACTERS for char in filename):
            self._reject(filename, "invalid characters", "Filename contains invalid characters")

        if self._is_absolute(filename):
            self._reject(filename, "absolute", "Absolute paths are not allowed")

        full_path = os.path.join(self.root, filename)
        if not self.is_within_root(full_path):
            self._reject(filename, "escapes root", "Path escapes current directory")

        return ValidatedPath(name=filename, path=full_path)

    def is_within_root(self, full_path: str) -> bool:
        """Check that an absolute path is the root or a descendant of it.

        Pure path-segment comparison; the filesystem is not consulted.
        """
        try:
            return os.path.commonpath([self.root, os.path.abspath(full_path)]) == self.root
        except ValueError:
            # Different drives on Windows
            return False

    @staticmethod
    def _is_absolute(filename: str) -> bool:
        drive, _ = os.path.splitdrive(filename)
        return os.path.isabs(filename) or bool(drive)

    def _reject(self, filename: str, reason: str, message: str):
        self.logger.warning(f"Rejected filename {truncate_string(repr(filename), 80)}: {reason}")
        raise InvalidPathError(filename, reason, message)
