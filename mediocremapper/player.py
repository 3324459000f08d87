"""Timed playback of a sound wave that produces its frequency spectrum as it runs."""

from __future__ import annotations

import time
from typing import Callable, Optional

import numpy as np

from .spectrum import SoundWave, calculate_frequency_spectrum

Clock = Callable[[], float]
SpectrumCallback = Callable[[np.ndarray], None]


class SpectrumPlayer:
    """Keeps a playback clock for one wave and computes spectra along it.

    The player does not emit sound itself. It measures how long the wave
    has been playing and, on every :meth:`update`, computes the spectrum of
    the ``segment_length`` seconds starting at the current playback time.
    Every callable in ``on_spectrum`` receives each computed spectrum.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        pause_when_in_background: bool = True,
        normalize_to_db: bool = False,
    ) -> None:
        self.clock: Clock = clock if clock is not None else time.monotonic
        self.pause_when_in_background = pause_when_in_background
        self.normalize_to_db = normalize_to_db
        self.on_spectrum: list[SpectrumCallback] = []
        self.paused_by_background = False
        self.wave: Optional[SoundWave] = None
        self.segment_length = 0.0
        self._playing = False
        self._paused = False
        self._accumulated = 0.0
        self._resumed_at = 0.0

    def start(self, wave: SoundWave, segment_length: float) -> Optional[np.ndarray]:
        """Start playing ``wave`` and compute the first spectrum.

        Returns the first spectrum, or None when there is nothing to analyse.
        """
        if wave is None:
            raise ValueError("no sound wave given; load a sound first")
        if self._playing:
            raise RuntimeError("the player is already playing; stop it first")
        self.wave = wave
        self.segment_length = segment_length
        self._playing = True
        self._paused = False
        self.paused_by_background = False
        self._accumulated = 0.0
        self._resumed_at = self.clock()
        return self._calculate()

    def pause(self) -> None:
        """Pause playback and freeze the playback clock."""
        if not self._playing or self._paused:
            raise RuntimeError("cannot pause: the player is not playing")
        self._accumulated += self.clock() - self._resumed_at
        self._paused = True

    def stop(self) -> None:
        """Stop playback and forget the current wave."""
        if not (self._playing or self._paused):
            raise RuntimeError("cannot stop: the player is neither playing nor paused")
        self._playing = False
        self._paused = False
        self.paused_by_background = False
        self._accumulated = 0.0
        self.wave = None
        self.segment_length = 0.0

    def resume(self) -> Optional[np.ndarray]:
        """Continue a paused playback and compute the spectrum at that point."""
        if not (self._playing and self._paused):
            raise RuntimeError("cannot resume: the player is not paused")
        self._paused = False
        self._resumed_at = self.clock()
        return self._calculate()

    def is_playing(self) -> bool:
        """True while playing and not paused."""
        return self._playing and not self._paused

    def is_paused(self) -> bool:
        """True while a started playback is paused."""
        return self._playing and self._paused

    def playback_time(self) -> float:
        """Seconds played so far; 0.0 when nothing is playing."""
        if not self._playing:
            return 0.0
        if self._paused:
            return self._accumulated
        return self._accumulated + (self.clock() - self._resumed_at)

    def update(self, foreground: bool = True) -> Optional[np.ndarray]:
        """Advance the player by one step.

        Pauses when the window went to the background (if configured) and
        resumes a playback that was paused that way once it is in front
        again. Returns the spectrum computed in this step, or None.
        """
        if self._paused and self.paused_by_background:
            if foreground:
                self.paused_by_background = False
                return self.resume()
            return None
        if not foreground and self.pause_when_in_background and self.is_playing():
            self.pause()
            self.paused_by_background = True
            return None
        return self._calculate()

    def _calculate(self) -> Optional[np.ndarray]:
        if self.wave is None or not self.is_playing():
            return None
        elapsed = self.playback_time()
        if elapsed > self.wave.duration:
            return None
        spectrum = calculate_frequency_spectrum(
            self.wave, elapsed, self.segment_length, self.normalize_to_db
        )
        for callback in self.on_spectrum:
            callback(spectrum)
        return spectrum