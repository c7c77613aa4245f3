from __future__ import annotations

import argparse
import sys
from pathlib import Path

from event_pipeline.logging.init import enable_debug, setup_logging
from event_pipeline.site.builder import DEFAULT_GENERATOR, DEFAULT_SITE_DIR, SiteBuildError, run_site_build

"""Stage 2: build the static site with hugo inside ``phase2/``."""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build the static site")
    p.add_argument("--site-dir", type=Path, default=DEFAULT_SITE_DIR, help="Site directory (default: phase2)")
    p.add_argument("--generator", default=DEFAULT_GENERATOR, help="Site generator executable (default: hugo)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging (shows generator output)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if args.debug:
        enable_debug()

    try:
        run_site_build(args.site_dir, args.generator)
    except SiteBuildError as e:
        logger.error(f"site: {e}")
        return EXIT_FATAL
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
