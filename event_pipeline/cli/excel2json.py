from __future__ import annotations

import argparse
import sys
from pathlib import Path

from event_pipeline.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_phase1_config
from event_pipeline.excel.reader import SheetReadError, read_sheet_rows
from event_pipeline.export.json_writer import SummaryWriteError, write_summary_json
from event_pipeline.logging.init import enable_debug, log_summary, setup_logging
from event_pipeline.services.converter import build_summary
from event_pipeline.services.summary import render_conversion_summary

"""Stage 1: attendee spreadsheet -> summary JSON.

Flow:
- load section ``phase1`` of config.json
- read the first sheet of ``inputFile``
- build the summary (heading, message, attendees, counts, timestamp)
- write ``outputFile`` as indented JSON

Any failure is fatal (exit 1) and nothing is written.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

INSPECT_SAMPLE_ROWS = 3


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Convert the attendee spreadsheet to summary JSON")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Config file (default: config.json)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Log heading, message and first rows then exit")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an empty list from tests must not fall back to sys.argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if args.debug:
        enable_debug()

    try:
        cfg = load_phase1_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    logger.debug(f"phase1 config: {cfg}")

    input_path = Path(cfg.input_file)
    try:
        rows = read_sheet_rows(input_path)
    except SheetReadError as e:
        logger.error(f"excel: {e}")
        return EXIT_FATAL
    logger.debug(f"read {len(rows)} rows from {input_path}")

    document = build_summary(rows)

    if args.inspect_data:
        logger.info(f"nadpis={document.info.heading!r} zprava={document.info.message!r}")
        for user in document.users[:INSPECT_SAMPLE_ROWS]:
            logger.info(f"  sample_row={user.to_dict()}")
        logger.info(f"records={document.info.total_records} ano={document.info.total_ano}")
        return EXIT_SUCCESS

    output_path = Path(cfg.output_file)
    try:
        write_summary_json(output_path, document)
    except SummaryWriteError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL

    logger.info(f"File {output_path} created successfully.")
    log_summary(render_conversion_summary(document, output_path)[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
