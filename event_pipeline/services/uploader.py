from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from ftplib import FTP

from ..ftp.client import UploadError, upload_file
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.upload_result import STATUS_FAILED, STATUS_SUCCESS, FileStat, UploadResult
from .progress import UploadProgress

"""Upload loop over the configured file list.

Per-file failures (local open, remote CWD, STOR) are logged, recorded in the
error log buffer and skipped; the loop always reaches the end of the list.
"""

logger = logging.getLogger(__name__)


def normalize_upload_list(entries: Iterable[str]) -> tuple[list[str], int]:
    """Trim entries and drop the empty ones.

    Returns:
        (files in original order, number of dropped entries)
    """
    files: list[str] = []
    skipped = 0
    for entry in entries:
        name = entry.strip()
        if not name:
            skipped += 1
            continue
        files.append(name)
    return files, skipped


def upload_all(
    conn: FTP,
    remote_dir: str,
    entries: Iterable[str],
    error_log: ErrorLogBuffer | None = None,
) -> UploadResult:
    """Upload every non-empty entry to ``remote_dir`` over ``conn``."""
    files, skipped = normalize_upload_list(entries)
    if skipped:
        logger.debug(f"skipping {skipped} empty entries in files_to_upload")

    start = time.perf_counter()
    stats: list[FileStat] = []
    with UploadProgress(len(files)) as progress:
        for local_file in files:
            progress.start_file(local_file)
            file_start = time.perf_counter()
            try:
                sent = upload_file(conn, remote_dir, local_file)
            except UploadError as e:
                logger.error(f"upload of '{local_file}' failed: {e}")
                if error_log is not None:
                    error_log.append(ErrorRecord.create(local_file, remote_dir, e.error_type, str(e)))
                stats.append(
                    FileStat(
                        file_name=local_file,
                        status=STATUS_FAILED,
                        elapsed_seconds=time.perf_counter() - file_start,
                        error_type=e.error_type,
                        error=str(e),
                    )
                )
                progress.finish_file(success=False)
                continue

            stats.append(
                FileStat(
                    file_name=local_file,
                    status=STATUS_SUCCESS,
                    bytes_sent=sent,
                    elapsed_seconds=time.perf_counter() - file_start,
                )
            )
            progress.finish_file(success=True)

    return UploadResult(
        remote_dir=remote_dir,
        skipped_entries=skipped,
        elapsed_seconds=time.perf_counter() - start,
        file_stats=stats,
    )
