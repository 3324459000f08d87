"""Replacement of the updater executable with a freshly downloaded copy."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

UPDATER_NAME = "MediocreUpdater.exe"
UPDATES_SUBPATH = Path("Updates", "MediocreMapper")


def _make_writable(path: Path) -> None:
    mode = path.stat().st_mode
    if not mode & stat.S_IWUSR:
        path.chmod(mode | stat.S_IWUSR)


def update_updater(game_dir: Union[str, "os.PathLike[str]"]) -> bool:
    """Copy the staged updater over the installed one.

    Returns True when the installed updater exists afterwards, False when
    there is no staged updater to install.
    """
    root = Path(game_dir)
    source = root / UPDATES_SUBPATH / UPDATER_NAME
    target = root / UPDATER_NAME
    logger.info("staged updater: %s", source)
    if not source.is_file():
        return False
    try:
        if target.exists():
            _make_writable(target)
        shutil.copy2(source, target)
    except OSError as exc:
        logger.error("could not replace %s: %s", target, exc)
    return target.is_file()