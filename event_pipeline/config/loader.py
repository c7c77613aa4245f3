from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from event_pipeline.models.config_models import Phase1Config, Phase3Config

"""Config loader shared by all stages.

Responsibilities:
- Load ``config.json`` (or a YAML file with the same layout)
- Decode only the section the calling stage needs; other sections are ignored
  even when malformed
- Type-check the section against the bundled schema (config_schema.json)
- Apply zero values for missing keys
"""

DEFAULT_CONFIG_PATH = Path("config.json")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")


class ConfigError(Exception):
    pass


def _load_schema() -> dict[str, Any]:
    try:
        return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e


def _read_document(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file '{path}': {e}") from e

    if path.suffix.lower() in (".yml", ".yaml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid yaml: {e}") from e
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid json in '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"config '{path}' must be an object, got {type(data).__name__}"
        )
    return data


def _load_section(path: Path, section: str) -> dict[str, Any]:
    """Return one top-level section, validated against its sub-schema.

    A missing or null section decodes to an empty mapping.
    """
    data = _read_document(path)
    raw = data.get(section)
    schema = _load_schema()
    try:
        jsonschema.validate(raw, schema["properties"][section])
    except ValidationError as e:
        location = ".".join(str(p) for p in (section, *e.absolute_path))
        raise ConfigError(f"config validation failed at {location}: {e.message}") from e
    return raw or {}


def load_phase1_config(path: Path = DEFAULT_CONFIG_PATH) -> Phase1Config:
    raw = _load_section(path, "phase1")
    return Phase1Config(
        input_file=raw.get("inputFile") or "",
        output_file=raw.get("outputFile") or "",
    )


def load_phase3_config(path: Path = DEFAULT_CONFIG_PATH) -> Phase3Config:
    raw = _load_section(path, "phase3")
    return Phase3Config(
        ftp_host=raw.get("ftpHost") or "",
        ftp_user=raw.get("ftpUser") or "",
        ftp_password=raw.get("ftpPassword") or "",
        remote_dir=raw.get("remoteDir") or "",
        files_to_upload=list(raw.get("files_to_upload") or []),
    )

