"""
Unit tests for the audit log and its record format.
"""

import re
from datetime import datetime, timedelta, timezone

import pytest

from safe_backup.core.audit_log import AuditLog
from safe_backup.core.errors import AuditLogError, OperationIOError
from safe_backup.core.models import AuditRecord


class TestAuditRecord:
    """Tests for AuditRecord."""

    def test_format_line(self):
        record = AuditRecord("Performed backup of 'a.txt'",
                             timestamp=datetime(2024, 1, 31, 9, 15, 0, tzinfo=timezone.utc))
        assert record.format_line() == "[2024-01-31 09:15:00 UTC] Performed backup of 'a.txt'\n"

    def test_non_utc_timestamp_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        record = AuditRecord("x", timestamp=datetime(2024, 1, 31, 11, 15, 0, tzinfo=plus_two))
        assert record.format_line().startswith("[2024-01-31 09:15:00 UTC]")

    def test_default_timestamp_has_second_precision(self):
        record = AuditRecord("x")
        assert record.timestamp.microsecond == 0
        assert record.timestamp.tzinfo is timezone.utc


class TestAuditLog:
    """Tests for AuditLog."""

    def test_creates_log_file(self, tmp_path):
        AuditLog("logfile.txt", root=str(tmp_path)).append("first")
        content = (tmp_path / "logfile.txt").read_text(encoding="utf-8")
        assert re.match(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} UTC\] first\n$", content)

    def test_appends_without_rewriting(self, tmp_path):
        (tmp_path / "logfile.txt").write_text("existing line\n", encoding="utf-8")
        log = AuditLog("logfile.txt", root=str(tmp_path))
        log.append("second")
        log.append("third")

        lines = (tmp_path / "logfile.txt").read_text(encoding="utf-8").splitlines()
        assert lines[0] == "existing line"
        assert lines[1].endswith("] second")
        assert lines[2].endswith("] third")

    def test_returns_record(self, tmp_path):
        record = AuditLog("logfile.txt", root=str(tmp_path)).append("hello")
        assert record.action == "hello"

    def test_utf8_actions(self, tmp_path):
        AuditLog("logfile.txt", root=str(tmp_path)).append("Performed backup of 'résumé.txt'")
        assert "résumé.txt" in (tmp_path / "logfile.txt").read_text(encoding="utf-8")

    def test_relative_path_uses_root(self, tmp_path):
        log = AuditLog("logs/audit.txt", root=str(tmp_path))
        assert log.log_file == str(tmp_path / "logs" / "audit.txt")

    def test_absolute_path_is_kept(self, tmp_path):
        target = tmp_path / "elsewhere.log"
        log = AuditLog(str(target), root=str(tmp_path / "unused"))
        assert log.log_file == str(target)

    def test_write_failure_raises(self, tmp_path):
        log = AuditLog("missing-dir/logfile.txt", root=str(tmp_path))
        with pytest.raises(AuditLogError) as exc_info:
            log.append("lost")
        assert isinstance(exc_info.value, OperationIOError)
        assert str(exc_info.value).startswith("IO error: Could not write audit log")
