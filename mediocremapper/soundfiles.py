"""Finding sound files on disk and loading them as decoded PCM audio."""

from __future__ import annotations

import os
import wave as wavfile
from pathlib import Path
from typing import Optional, Union

from .spectrum import SoundWave

PathLike = Union[str, "os.PathLike[str]"]

_SUPPORTED_CHANNELS = (1, 2)
_SAMPLE_WIDTH = 2


def list_sound_files(
    directory: PathLike,
    absolute: bool = True,
    extension: str = "",
    project_dir: Optional[PathLike] = None,
) -> tuple[list[str], list[str]]:
    """Find the files below ``directory``, walking sub-directories too.

    When ``absolute`` is false, ``directory`` is taken relative to
    ``project_dir`` (the current directory by default). A non-empty
    ``extension`` (given without the dot) keeps only files whose extension
    matches it, ignoring case.

    Returns two parallel lists: the full paths, and the bare names cut at
    their first dot.
    """
    if absolute:
        root = Path(directory)
    else:
        base = Path(project_dir) if project_dir is not None else Path.cwd()
        root = base.resolve() / directory

    if not root.is_dir():
        return [], []

    wanted = extension.casefold()
    with_path: list[str] = []
    without_path: list[str] = []
    for entry in sorted(root.rglob("*")):
        if not entry.is_file():
            continue
        name = entry.name
        if wanted:
            _, dot, suffix = name.rpartition(".")
            if not dot or suffix.casefold() != wanted:
                continue
        with_path.append(str(entry))
        without_path.append(name.split(".", 1)[0])
    return with_path, without_path


def load_sound_file(path: PathLike) -> SoundWave:
    """Read a 16-bit PCM WAV file with one or two channels into a SoundWave."""
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"no such sound file: {source}")
    if source.stat().st_size == 0:
        raise ValueError(f"sound file is empty: {source}")

    try:
        with wavfile.open(str(source), "rb") as reader:
            channels = reader.getnchannels()
            width = reader.getsampwidth()
            rate = reader.getframerate()
            data = reader.readframes(reader.getnframes())
    except (wavfile.Error, EOFError) as exc:
        raise ValueError(f"cannot decode sound file {source}: {exc}") from exc

    if channels not in _SUPPORTED_CHANNELS:
        raise ValueError(f"only 1 or 2 channels are supported, got {channels}")
    if width != _SAMPLE_WIDTH:
        raise ValueError(f"only 16-bit samples are supported, got {width * 8}-bit")
    if rate <= 0:
        raise ValueError(f"invalid sample rate: {rate}")

    return SoundWave.from_pcm_bytes(data, sample_rate=rate, num_channels=channels)