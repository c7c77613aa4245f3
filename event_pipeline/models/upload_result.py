from __future__ import annotations

from dataclasses import dataclass, field

"""Upload run result models.

FileStat is recorded for every attempted file; UploadResult aggregates them
for the SUMMARY line and the exit code of the upload stage.
"""

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


@dataclass(frozen=True)
class FileStat:
    """Per-file upload statistics."""
    file_name: str  # trimmed entry from files_to_upload
    status: str  # success/failed
    bytes_sent: int = 0
    elapsed_seconds: float = 0.0
    error_type: str | None = None  # ErrorRecord.error_type when failed
    error: str | None = None


@dataclass(frozen=True)
class UploadResult:
    """Aggregated result of one upload run."""
    remote_dir: str
    skipped_entries: int  # empty entries after trimming
    elapsed_seconds: float
    file_stats: list[FileStat] = field(default_factory=list)

    @property
    def attempted_files(self) -> int:
        return len(self.file_stats)

    @property
    def uploaded_files(self) -> int:
        return sum(1 for s in self.file_stats if s.status == STATUS_SUCCESS)

    @property
    def failed_files(self) -> int:
        return sum(1 for s in self.file_stats if s.status == STATUS_FAILED)

    @property
    def total_bytes(self) -> int:
        return sum(s.bytes_sent for s in self.file_stats)
