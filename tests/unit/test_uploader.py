from __future__ import annotations
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

from event_pipeline.logging.error_log import ErrorLogBuffer
from event_pipeline.models.error_record import LOCAL_FILE_ERROR
from event_pipeline.services.uploader import normalize_upload_list, upload_all


def test_normalize_upload_list():
    files, skipped = normalize_upload_list([" report.pdf ", "", "notes.txt", "   ", "\tindex.html\n"])
    assert files == ["report.pdf", "notes.txt", "index.html"]
    assert skipped == 2


def test_normalize_keeps_duplicates_and_order():
    files, _ = normalize_upload_list(["b.txt", "a.txt", "b.txt"])
    assert files == ["b.txt", "a.txt", "b.txt"]


def test_upload_all_example_attempts_two_files(temp_workdir: Path):
    (temp_workdir / "report.pdf").write_bytes(b"pdf")
    (temp_workdir / "notes.txt").write_bytes(b"notes")
    conn = MagicMock()

    result = upload_all(conn, "/www", [" report.pdf ", "", "notes.txt"])

    stor_cmds = [c.args[0] for c in conn.storbinary.call_args_list]
    assert stor_cmds == ["STOR report.pdf", "STOR notes.txt"]
    assert [c.args[0] for c in conn.voidcmd.call_args_list] == ["CWD /www", "CWD /www"]
    assert result.attempted_files == 2
    assert result.uploaded_files == 2
    assert result.failed_files == 0
    assert result.skipped_entries == 1
    assert result.total_bytes == len(b"pdf") + len(b"notes")


def test_empty_entries_never_open_anything(temp_workdir: Path):
    conn = MagicMock()
    with patch("event_pipeline.ftp.client.open", create=True) as mock_open:
        result = upload_all(conn, "/www", ["", "  "])
    mock_open.assert_not_called()
    assert result.attempted_files == 0
    assert result.skipped_entries == 2


def test_failure_does_not_stop_following_files(temp_workdir: Path):
    (temp_workdir / "b.txt").write_bytes(b"b")
    conn = MagicMock()
    errors = ErrorLogBuffer(logs_dir=temp_workdir / "logs")

    result = upload_all(conn, "/www", ["missing.txt", "b.txt"], errors)

    assert [s.status for s in result.file_stats] == ["failed", "success"]
    assert result.file_stats[0].error_type == LOCAL_FILE_ERROR
    assert [c.args[0] for c in conn.storbinary.call_args_list] == ["STOR b.txt"]
    assert len(errors) == 1

    path = errors.flush()
    record = json.loads(path.read_text(encoding="utf-8").strip())
    assert record["file"] == "missing.txt"
    assert record["remote_dir"] == "/www"
    assert record["error_type"] == LOCAL_FILE_ERROR


def test_failure_is_logged(temp_workdir: Path, capsys):
    from event_pipeline.logging.init import setup_logging

    setup_logging()
    upload_all(MagicMock(), "/www", ["missing.txt"])
    out = capsys.readouterr().out
    assert "ERROR upload of 'missing.txt' failed:" in out
