"""Domain models for the event attendance pipeline."""

from .config_models import Phase1Config, Phase3Config
from .error_record import ErrorRecord
from .summary import Attendee, Prijde, SummaryDocument, SummaryInfo
from .upload_result import FileStat, UploadResult

__all__ = [
    # Configuration models
    "Phase1Config",
    "Phase3Config",
    # Summary document
    "Attendee",
    "Prijde",
    "SummaryDocument",
    "SummaryInfo",
    # Upload results
    "ErrorRecord",
    "FileStat",
    "UploadResult",
]
