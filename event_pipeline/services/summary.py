from __future__ import annotations

from pathlib import Path

from ..models.summary import SummaryDocument
from ..models.upload_result import UploadResult

"""SUMMARY line rendering for the conversion and upload stages."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.2f}"


def render_conversion_summary(document: SummaryDocument, output: Path) -> str:
    """``SUMMARY records=<n> ano=<m> output=<path>``

    >>> from event_pipeline.models.summary import SummaryDocument, SummaryInfo
    >>> doc = SummaryDocument(info=SummaryInfo("1.2.2024 08.00.00", "H", "M", 3, 2))
    >>> render_conversion_summary(doc, Path("out.json"))
    'SUMMARY records=3 ano=2 output=out.json'
    """
    return (
        f"SUMMARY records={document.info.total_records} "
        f"ano={document.info.total_ano} "
        f"output={output}"
    )


def render_upload_summary(result: UploadResult) -> str:
    """``SUMMARY files=<n> uploaded=<ok> failed=<bad> skipped=<empty> elapsed_sec=<s>``"""
    return (
        f"SUMMARY files={result.attempted_files} "
        f"uploaded={result.uploaded_files} "
        f"failed={result.failed_files} "
        f"skipped={result.skipped_entries} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
