from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pandas as pd
import pytest

from event_pipeline.cli.excel2json import main as cli_main

"""End-to-end run of the conversion stage on real .xlsx workbooks.

Workbooks are written with pandas/openpyxl and read back through the same
path the CLI uses; nothing is mocked except the clock where noted.
"""

LAST_UPDATE_RE = re.compile(r"^\d{1,2}\.\d{1,2}\.\d{4} \d{2}\.\d{2}\.\d{2}$")


def _make_excel_file(path: Path, rows: list[list[object]]) -> Path:
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Odpovedi", header=False, index=False)
    return path


def _write_phase1_config(workdir: Path, input_file: str, output_file: str = "users.json") -> None:
    (workdir / "config.json").write_text(
        json.dumps({"phase1": {"inputFile": input_file, "outputFile": output_file}}),
        encoding="utf-8",
    )


@pytest.fixture
def run_stage(temp_workdir: Path):
    def _run(rows: list[list[object]]) -> dict:
        _make_excel_file(temp_workdir / "data" / "in.xlsx", rows)
        _write_phase1_config(temp_workdir, "data/in.xlsx")
        assert cli_main([]) == 0
        return json.loads((temp_workdir / "users.json").read_text(encoding="utf-8"))
    return _run


def test_full_document(write_config: Path, attendee_workbook: Path, temp_workdir: Path):
    (temp_workdir / "phase2" / "data").mkdir()
    assert cli_main([]) == 0
    data = json.loads((temp_workdir / "phase2" / "data" / "users.json").read_text(encoding="utf-8"))

    assert LAST_UPDATE_RE.match(data["info"]["lastUpdate"])
    assert data["info"]["nadpis"] == "Letní sraz 2024"
    assert data["info"]["zprava"] == "Sraz začíná v 10:00 u rybníka"
    assert data["info"]["pocetZaznamu"] == 4
    assert data["info"]["pocetAno"] == 2
    assert data["users"] == [
        {"Jmeno": "Jan Novák", "email": "jan@example.com", "Prijde": "Ano"},
        {"Jmeno": "Petra Svobodová", "email": "petra@example.com", "Prijde": "Ne"},
        {"Jmeno": "Karel Dvořák", "email": "karel@example.com", "Prijde": ""},
        {"Jmeno": "Eva Malá", "email": "eva@example.com", "Prijde": "Ano"},
    ]


def test_rows_after_missing_email_are_ignored(run_stage):
    data = run_stage([
        ["Akce", "Sraz"],
        ["Zpráva", "Text"],
        ["Přijde", "Jméno", "Třída", "Telefon", "Poznámka", "Email"],
        ["Ano", "Jan", "4.A", "601", "", "jan@example.com"],
        ["Ano", "Bez emailu", "4.A", "602", None, None],  # short row ends the table
        ["Ano", "Eva", "4.C", "604", "", "eva@example.com"],
    ])
    assert [u["Jmeno"] for u in data["users"]] == ["Jan"]
    assert data["info"]["pocetZaznamu"] == 1


def test_rows_after_empty_name_are_ignored(run_stage):
    data = run_stage([
        ["Akce", "Sraz"],
        ["Zpráva", "Text"],
        ["Přijde", "Jméno", "Třída", "Telefon", "Poznámka", "Email"],
        ["Ne", "Jan", "4.A", "601", "", "jan@example.com"],
        ["Ano", None, "4.B", "602", "", "nobody@example.com"],
        ["Ano", "Eva", "4.C", "604", "", "eva@example.com"],
    ])
    assert data["info"]["pocetZaznamu"] == 1
    assert data["info"]["pocetAno"] == 0


def test_header_only_sheet(run_stage):
    data = run_stage([
        ["Akce", "Sraz"],
        ["Zpráva", "Zatím nikdo"],
        ["Přijde", "Jméno", "Třída", "Telefon", "Poznámka", "Email"],
    ])
    assert data["users"] == []
    assert data["info"]["pocetZaznamu"] == 0
    assert data["info"]["zprava"] == "Zatím nikdo"


def test_rerun_changes_only_last_update(write_config: Path, attendee_workbook: Path, temp_workdir: Path):
    (temp_workdir / "phase2" / "data").mkdir()
    out = temp_workdir / "phase2" / "data" / "users.json"

    class _Clock(datetime):
        current = datetime(2024, 5, 1, 9, 0, 0)

        @classmethod
        def now(cls, tz=None):
            return cls.current

    with patch("event_pipeline.services.converter.datetime", _Clock):
        assert cli_main([]) == 0
        first = json.loads(out.read_text(encoding="utf-8"))
        _Clock.current = datetime(2024, 5, 2, 18, 30, 5)
        assert cli_main([]) == 0
        second = json.loads(out.read_text(encoding="utf-8"))

    assert first["info"].pop("lastUpdate") == "1.5.2024 09.00.00"
    assert second["info"].pop("lastUpdate") == "2.5.2024 18.30.05"
    assert first == second
