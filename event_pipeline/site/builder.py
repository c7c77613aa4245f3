from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

"""Static site build (``hugo`` run inside ``phase2/``).

The process working directory is switched to the site directory before the
generator starts; the generator gets no arguments and is resolved from PATH.
"""

DEFAULT_SITE_DIR = Path("phase2")
DEFAULT_GENERATOR = "hugo"

# lines of generator stderr repeated in the ERROR log on failure
STDERR_TAIL_LINES = 20

logger = logging.getLogger(__name__)


class SiteBuildError(Exception):
    """Raised when the site directory or the generator run fails."""


def _log_output(text: str | None, level: int) -> None:
    if not text:
        return
    for line in text.splitlines():
        logger.log(level, f"  {line}")


def run_site_build(
    site_dir: Path = DEFAULT_SITE_DIR, executable: str = DEFAULT_GENERATOR
) -> None:
    """Change into ``site_dir`` and run ``executable`` to completion.

    Raises:
        SiteBuildError: directory change failed, the executable could not be
            started, or it exited with a nonzero status
    """
    try:
        os.chdir(site_dir)
    except OSError as e:
        raise SiteBuildError(f"failed to change directory to '{site_dir}': {e}") from e

    logger.debug(f"running {executable} in {Path.cwd()}")
    try:
        proc = subprocess.run([executable], capture_output=True, text=True, check=False)
    except OSError as e:
        raise SiteBuildError(f"Hugo build failed: cannot start '{executable}': {e}") from e

    _log_output(proc.stdout, logging.DEBUG)
    if proc.returncode != 0:
        tail = (proc.stderr or "").splitlines()[-STDERR_TAIL_LINES:]
        _log_output("\n".join(tail), logging.ERROR)
        raise SiteBuildError(f"Hugo build failed: '{executable}' exited with status {proc.returncode}")
    _log_output(proc.stderr, logging.DEBUG)
    logger.info("Hugo build succeeded")
