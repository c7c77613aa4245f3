# Shared pytest fixtures
from __future__ import annotations
import json
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from event_pipeline.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    # handler binds sys.stdout at setup time; capsys swaps it per test
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "data").mkdir()
        (p / "phase2").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config() -> dict:
    return {
        "phase1": {
            "inputFile": "data/odpovedi.xlsx",
            "outputFile": "phase2/data/users.json",
        },
        "phase3": {
            "ftpHost": "ftp.example.com:21",
            "ftpUser": "uploader",
            "ftpPassword": "secret",
            "remoteDir": "/www/akce",
            "files_to_upload": [" report.pdf ", "", "notes.txt"],
        },
    }


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config: dict) -> Path:
    cfg = temp_workdir / "config.json"
    cfg.write_text(json.dumps(sample_config, indent=2), encoding="utf-8")
    return cfg


def make_workbook(path: Path, rows: list[list[object]], sheet_name: str = "Odpovedi") -> Path:
    """Write ``rows`` as-is (no header, no index) into the first sheet."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return path


ATTENDEE_ROWS: list[list[object]] = [
    ["Akce", "Letní sraz 2024", None, None, None, None],
    ["Zpráva", "Sraz začíná v 10:00 u rybníka", None, None, None, None],
    ["Přijde", "Jméno", "Třída", "Telefon", "Poznámka", "Email"],
    ["Ano", "Jan Novák", "4.A", "601111111", "", "jan@example.com"],
    ["Ne", "Petra Svobodová", "4.B", "602222222", "", "petra@example.com"],
    [None, "Karel Dvořák", "4.A", "603333333", "", "karel@example.com"],
    ["Ano", "Eva Malá", "4.C", "604444444", "vegetarián", "eva@example.com"],
]


@pytest.fixture()
def attendee_workbook(temp_workdir: Path) -> Path:
    return make_workbook(temp_workdir / "data" / "odpovedi.xlsx", ATTENDEE_ROWS)
