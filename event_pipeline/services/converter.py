from __future__ import annotations

from datetime import datetime

from ..models.summary import Attendee, SummaryDocument, SummaryInfo

"""Sheet rows -> summary document.

Sheet layout:

    row 0: | ...   | <heading>
    row 1: | ...   | <message>
    row 2: column titles
    row 3+: | Prijde | Jmeno | ... | ... | ... | email |

The attendee table ends at the first row that has fewer than six cells or an
empty name cell. Everything after it is ignored, even further filled rows.
"""

HEADER_ROWS = 3
MIN_ROW_CELLS = 6

COL_ATTENDANCE = 0
COL_NAME = 1
COL_EMAIL = 5


def format_last_update(moment: datetime) -> str:
    """Format ``D.M.YYYY HH.MM.SS``: day and month unpadded, time zero padded."""
    return f"{moment.day}.{moment.month}.{moment.year} {moment:%H.%M.%S}"


def _cell(rows: list[list[str]], row: int, col: int) -> str:
    if row >= len(rows) or col >= len(rows[row]):
        return ""
    return rows[row][col]


def extract_attendees(rows: list[list[str]]) -> list[Attendee]:
    attendees: list[Attendee] = []
    for row in rows[HEADER_ROWS:]:
        if len(row) < MIN_ROW_CELLS or row[COL_NAME] == "":
            break  # end of data
        attendees.append(
            Attendee(
                name=row[COL_NAME],
                email=row[COL_EMAIL],
                attendance=row[COL_ATTENDANCE],
            )
        )
    return attendees


def build_summary(rows: list[list[str]], now: datetime | None = None) -> SummaryDocument:
    """Build the summary document from raw sheet rows.

    Args:
        rows: Sheet grid as returned by ``read_sheet_rows``
        now: Timestamp for ``lastUpdate``; local wall-clock time when omitted

    Returns:
        SummaryDocument with counts and attendees in sheet order
    """
    heading = message = ""
    if len(rows) > 1:
        heading = _cell(rows, 0, 1)
        message = _cell(rows, 1, 1)

    attendees = extract_attendees(rows)
    moment = now if now is not None else datetime.now()

    info = SummaryInfo(
        last_update=format_last_update(moment),
        heading=heading,
        message=message,
        total_records=len(attendees),
        total_ano=sum(1 for a in attendees if a.is_coming),
    )
    return SummaryDocument(info=info, users=attendees)
