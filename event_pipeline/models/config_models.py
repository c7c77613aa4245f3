from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the three pipeline stages.

Each stage reads only its own top-level section of ``config.json``. Missing
keys take zero values ("" or an empty list), mirroring how the sections are
decoded in ``event_pipeline.config.loader``.
"""


@dataclass(frozen=True)
class Phase1Config:
    """Section ``phase1``: spreadsheet -> summary JSON conversion."""
    input_file: str = ""  # inputFile: workbook path
    output_file: str = ""  # outputFile: summary JSON path


@dataclass(frozen=True)
class Phase3Config:
    """Section ``phase3``: FTP upload.

    ``ftp_host`` may carry a port (``ftp.example.com:2121``); port 21 is used
    otherwise.
    """
    ftp_host: str = ""  # ftpHost
    ftp_user: str = ""  # ftpUser
    ftp_password: str = ""  # ftpPassword
    remote_dir: str = ""  # remoteDir: fixed for the whole run
    files_to_upload: list[str] = field(default_factory=list)  # raw entries, untrimmed

    def __repr__(self) -> str:
        # keep the password out of debug logs
        return (
            f"Phase3Config(ftp_host={self.ftp_host!r}, ftp_user={self.ftp_user!r}, "
            f"ftp_password='***', remote_dir={self.remote_dir!r}, "
            f"files_to_upload={self.files_to_upload!r})"
        )
