"""Small file-system helpers for managing map folders and files."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def verify_or_create_directory(path: PathLike) -> bool:
    """Return True if ``path`` is a directory, creating it (one level) if needed."""
    directory = Path(path)
    if not directory.is_dir():
        try:
            directory.mkdir()
        except OSError:
            return False
    return directory.is_dir()


def verify_directory(path: PathLike) -> bool:
    """Return True if ``path`` is an existing directory."""
    return Path(path).is_dir()


def _entry_names(path: PathLike, *, directories: bool) -> list[str]:
    directory = Path(path)
    if not directory.is_dir():
        return []
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if (entry.is_dir() if directories else entry.is_file())
    )


def find_all_directories(path: PathLike) -> list[str]:
    """Names of the sub-directories directly inside ``path``."""
    return _entry_names(path, directories=True)


def find_all_files(path: PathLike) -> list[str]:
    """Names of the regular files directly inside ``path``."""
    return _entry_names(path, directories=False)


def verify_file(path: PathLike) -> bool:
    """Return True if ``path`` is an existing regular file."""
    return Path(path).is_file()


def rename_or_move_file(source: PathLike, target: PathLike) -> Path:
    """Move the file ``source`` to ``target`` and return the new path."""
    source_path = Path(source)
    target_path = Path(target)
    if not source_path.is_file():
        raise FileNotFoundError(f"no such file: {source_path}")
    if target_path.is_dir():
        raise IsADirectoryError(f"target is a directory: {target_path}")
    shutil.move(os.fspath(source_path), os.fspath(target_path))
    return target_path


def copy_file(path: PathLike, output_directory: PathLike, new_name: str) -> Path:
    """Copy the file ``path`` into ``output_directory`` as ``new_name``."""
    source_path = Path(path)
    directory = Path(output_directory)
    if not source_path.is_file():
        raise FileNotFoundError(f"no such file: {source_path}")
    if not directory.is_dir():
        raise NotADirectoryError(f"no such directory: {directory}")
    destination = directory / new_name
    shutil.copyfile(source_path, destination)
    return destination


def delete_file(path: PathLike) -> None:
    """Delete the file ``path``."""
    Path(path).unlink()


def delete_directory(path: PathLike) -> None:
    """Delete the directory ``path`` and everything below it."""
    shutil.rmtree(path)


def file_size(path: PathLike) -> int:
    """Size of the file ``path`` in bytes."""
    return Path(path).stat().st_size


def timestamp(path: PathLike) -> int:
    """Modification time of ``path`` as whole seconds since the Unix epoch."""
    return int(Path(path).stat().st_mtime)