from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for per-file upload failures.

Upload failures are the only recoverable errors of the pipeline. Each one is
kept as a fixed-schema record and written as a JSON line to the run's error
log (see ``event_pipeline.logging.error_log``).
"""

__all__ = [
    "ErrorRecord",
    "LOCAL_FILE_ERROR",
    "REMOTE_DIR_ERROR",
    "TRANSFER_ERROR",
]

LOCAL_FILE_ERROR = "LOCAL_FILE_ERROR"
REMOTE_DIR_ERROR = "REMOTE_DIR_ERROR"
TRANSFER_ERROR = "TRANSFER_ERROR"


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Local file path as listed in the configuration (trimmed)
        remote_dir: Target directory on the FTP server
        error_type: One of LOCAL_FILE_ERROR, REMOTE_DIR_ERROR, TRANSFER_ERROR
        message: Human readable failure description
    """
    timestamp: str  # ISO8601 UTC
    file: str
    remote_dir: str
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, remote_dir: str, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            remote_dir=remote_dir,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line with exactly the dataclass keys."""
        return json.dumps(asdict(self), ensure_ascii=False)
