from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

"""Spreadsheet reader.

Reads the first sheet of a workbook as a grid of strings:

- no header handling here (the caller knows the sheet layout)
- every cell is text; empty cells are ""
- trailing empty cells of a row are dropped, so a row's length is the
  position of its last filled cell (the converter relies on short rows)
- trailing empty rows are dropped
"""


class SheetReadError(Exception):
    """Raised when the workbook cannot be opened or its first sheet read."""


def _cell_to_str(val: Any) -> str:
    if val is None:
        return ""
    if isinstance(val, float):
        if pd.isna(val):
            return ""
        # whole numbers read back from xlsx as float ("3.0" -> "3")
        if val.is_integer():
            return str(int(val))
    return str(val)


def _trim_trailing(cells: list[str]) -> list[str]:
    end = len(cells)
    while end > 0 and cells[end - 1] == "":
        end -= 1
    return cells[:end]


def read_sheet_rows(path: Path) -> list[list[str]]:
    """Read all rows of the workbook's first sheet.

    Parameters
    ----------
    path: workbook path (.xlsx)

    Raises
    ------
    SheetReadError: the file is missing, not a workbook, or has no sheets
    """
    try:
        xls = pd.ExcelFile(path)
    except Exception as e:
        raise SheetReadError(f"cannot open workbook '{path}': {e}") from e

    with xls:
        if not xls.sheet_names:
            raise SheetReadError(f"workbook '{path}' has no sheets")
        sheet_name = xls.sheet_names[0]
        try:
            # keep_default_na=False: "NA"/"null" etc. are data, not missing values
            df = xls.parse(sheet_name, header=None, dtype=object, keep_default_na=False)
        except Exception as e:
            raise SheetReadError(f"cannot read rows of sheet '{sheet_name}' in '{path}': {e}") from e

    rows = [_trim_trailing([_cell_to_str(v) for v in raw]) for raw in df.itertuples(index=False)]
    while rows and not rows[-1]:
        rows.pop()
    return rows
