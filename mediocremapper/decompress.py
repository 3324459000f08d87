"""Background decoding of a sound file on a worker thread."""

from __future__ import annotations

import itertools
import os
import threading
from pathlib import Path
from typing import Callable, Optional, Union

from .soundfiles import load_sound_file
from .spectrum import SoundWave

FinishedCallback = Callable[[SoundWave], None]


class DecompressWorker:
    """Decodes one sound file on its own thread.

    Callables in ``on_finished`` receive the decoded wave once decoding
    succeeds; they run before the worker reports itself finished.
    """

    _thread_numbers = itertools.count(1)

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = Path(path)
        self.wave: Optional[SoundWave] = None
        self.error: Optional[BaseException] = None
        self.on_finished: list[FinishedCallback] = []
        self._done = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> "DecompressWorker":
        """Start decoding in the background and return this worker."""
        if self._thread is not None:
            raise RuntimeError("worker has already been started")
        name = f"AudioDecompressWorker{next(self._thread_numbers)}"
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()
        return self

    def _run(self) -> None:
        try:
            self.wave = load_sound_file(self.path)
            for callback in self.on_finished:
                callback(self.wave)
        except Exception as exc:  # reported to the caller through wait()
            self.error = exc
        finally:
            self._done.set()

    def wait(self, timeout: Optional[float] = None) -> SoundWave:
        """Block until decoding ends and return the wave, or raise its error."""
        if self._thread is None:
            raise RuntimeError("worker has not been started")
        if not self._done.wait(timeout):
            raise TimeoutError(f"decoding {self.path} did not finish in time")
        self._thread.join()
        if self.error is not None:
            raise self.error
        assert self.wave is not None
        return self.wave

    def is_finished(self) -> bool:
        """True once the worker has stopped, whether it succeeded or failed."""
        return self._done.is_set()