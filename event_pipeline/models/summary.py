from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

"""Summary document produced by the spreadsheet conversion stage.

The JSON keys are part of the contract with the site templates and stay in
the sheet's language (Czech): ``nadpis`` heading, ``zprava`` message,
``pocetZaznamu`` record count, ``pocetAno`` number of "Ano" answers,
``Jmeno`` name, ``Prijde`` attendance.
"""

__all__ = [
    "Prijde",
    "Attendee",
    "SummaryInfo",
    "SummaryDocument",
]


class Prijde(str, Enum):
    """Known attendance answers. Cells are copied verbatim, never coerced."""
    ANO = "Ano"
    NE = "Ne"
    EMPTY = ""


@dataclass(frozen=True)
class Attendee:
    """One data row of the sheet."""
    name: str  # column 1
    email: str  # column 5
    attendance: str  # column 0, verbatim

    @property
    def is_coming(self) -> bool:
        return self.attendance == Prijde.ANO.value

    def to_dict(self) -> dict[str, Any]:
        return {"Jmeno": self.name, "email": self.email, "Prijde": self.attendance}


@dataclass(frozen=True)
class SummaryInfo:
    last_update: str  # D.M.YYYY HH.MM.SS, write time
    heading: str  # cell (0, 1)
    message: str  # cell (1, 1)
    total_records: int
    total_ano: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "lastUpdate": self.last_update,
            "nadpis": self.heading,
            "zprava": self.message,
            "pocetZaznamu": self.total_records,
            "pocetAno": self.total_ano,
        }


@dataclass(frozen=True)
class SummaryDocument:
    info: SummaryInfo
    users: list[Attendee] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "info": self.info.to_dict(),
            "users": [u.to_dict() for u in self.users],
        }
