from __future__ import annotations

import argparse
import sys
from pathlib import Path

from event_pipeline.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_phase3_config
from event_pipeline.ftp.client import FtpConnectError, close_connection, connect_to_ftp
from event_pipeline.logging.error_log import ErrorLogBuffer
from event_pipeline.logging.init import enable_debug, log_summary, setup_logging
from event_pipeline.services.summary import render_upload_summary
from event_pipeline.services.uploader import upload_all

"""Stage 3: upload the configured files to the FTP server.

FTP settings come only from section ``phase3`` of config.json.

Exit codes:
  0  the run finished; per-file failures are logged and recorded in
     logs/errors-*.log but do not change the exit code
  1  config, connection or login failure; nothing uploaded
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Upload configured files over FTP")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Config file (default: config.json)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if args.debug:
        enable_debug()

    try:
        cfg = load_phase3_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    logger.debug(f"phase3 config: {cfg!r}")

    try:
        conn = connect_to_ftp(cfg.ftp_host, cfg.ftp_user, cfg.ftp_password)
    except FtpConnectError as e:
        logger.error(f"ftp: {e}")
        return EXIT_FATAL

    error_log = ErrorLogBuffer()
    try:
        result = upload_all(conn, cfg.remote_dir, cfg.files_to_upload, error_log)
    finally:
        close_connection(conn)

    if len(error_log):
        try:
            path = error_log.flush()
        except OSError as e:
            logger.error(f"error log: cannot write error details: {e}")
        else:
            logger.info(f"error details written to {path}")

    log_summary(render_upload_summary(result)[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
