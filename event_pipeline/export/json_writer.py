from __future__ import annotations

import json
from pathlib import Path

from event_pipeline.models.summary import SummaryDocument

"""Summary JSON writer.

The document is encoded completely before the output file is opened, so an
encoding failure never leaves a truncated file behind.
"""

INDENT = 2


class SummaryWriteError(Exception):
    """Raised when the summary cannot be encoded or written."""


def encode_summary(document: SummaryDocument) -> str:
    # non-ASCII names stay readable in the output
    return json.dumps(document.to_dict(), indent=INDENT, ensure_ascii=False) + "\n"


def write_summary_json(path: Path, document: SummaryDocument) -> Path:
    """Create or truncate ``path`` with the indented summary JSON."""
    try:
        payload = encode_summary(document)
    except (TypeError, ValueError) as e:
        raise SummaryWriteError(f"cannot encode summary for '{path}': {e}") from e
    try:
        path.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise SummaryWriteError(f"cannot write '{path}': {e}") from e
    return path
