"""Shared fixtures for safe backup tests."""

import logging

import pytest

from safe_backup.core.audit_log import AuditLog
from safe_backup.core.file_operations import FileOperations
from safe_backup.core.path_validator import PathValidator


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by the CLI's logging setup."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def validator(tmp_path):
    return PathValidator(str(tmp_path))


@pytest.fixture
def audit_log(tmp_path):
    return AuditLog("logfile.txt", root=str(tmp_path))


@pytest.fixture
def audit_lines(tmp_path):
    """Return a callable reading the audit log lines written so far."""
    def read():
        log_file = tmp_path / "logfile.txt"
        if not log_file.exists():
            return []
        return log_file.read_text(encoding="utf-8").splitlines()
    return read


@pytest.fixture
def make_operations(validator, audit_log):
    """Build FileOperations with a scripted confirmation response."""
    def build(response="no", atomic_writes=False):
        return FileOperations(validator, audit_log,
                              confirm=lambda prompt: response,
                              atomic_writes=atomic_writes)
    return build
