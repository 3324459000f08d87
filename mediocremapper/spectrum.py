"""Frequency spectrum analysis of decoded 16-bit PCM audio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

SUB_BASS_RANGE = (20, 60)
BASS_RANGE = (60, 250)
MAX_FREQUENCY = 22000
_MIN_WINDOW = 2


@dataclass
class SoundWave:
    """Decoded audio: interleaved signed 16-bit samples plus format information."""

    sample_rate: int
    num_channels: int
    samples: Optional[np.ndarray] = None
    duration: Optional[float] = None

    def __post_init__(self) -> None:
        if self.samples is not None:
            self.samples = np.asarray(self.samples, dtype=np.int16).ravel()
        if self.duration is None:
            if self.sample_rate > 0 and self.num_channels > 0:
                self.duration = self.sample_count / self.sample_rate
            else:
                self.duration = 0.0

    @classmethod
    def from_pcm_bytes(
        cls, data: bytes, sample_rate: int, num_channels: int
    ) -> "SoundWave":
        """Build a wave from little-endian signed 16-bit interleaved PCM bytes."""
        samples = np.frombuffer(data, dtype="<i2").astype(np.int16)
        return cls(sample_rate=sample_rate, num_channels=num_channels, samples=samples)

    @property
    def sample_count(self) -> int:
        """Number of sample frames (one sample per channel) in the wave."""
        if self.samples is None or self.num_channels <= 0:
            return 0
        return len(self.samples) // self.num_channels


def hann_window(value: float, index: int, count: int) -> float:
    """Scale ``value`` by the Hann window weight at ``index`` of ``count``."""
    return value * 0.5 * (1.0 - np.cos(2.0 * np.pi * index / (count - 1)))


def _window_length(samples_to_read: int) -> int:
    length = _MIN_WINDOW
    while samples_to_read > length:
        length *= 2
    return length


def calculate_frequency_spectrum(
    wave: SoundWave,
    start_time: float,
    duration: float,
    normalize_to_db: bool = False,
) -> np.ndarray:
    """Magnitude spectrum of the window starting at ``start_time`` lasting ``duration``.

    The window is padded up to a power of two, Hann-weighted and transformed;
    the magnitudes are averaged over the channels. With ``normalize_to_db``
    the values are converted to decibels.
    """
    channels = wave.num_channels
    if not 0 < channels <= 2:
        raise ValueError(f"only 1 or 2 channels are supported, got {channels}")
    if wave.samples is None:
        raise ValueError("sound wave has no PCM data")
    if start_time < 0:
        raise ValueError("start time must not be negative")

    sample_count = wave.sample_count
    first = min(sample_count, int(wave.sample_rate * start_time))
    last = min(sample_count, int(wave.sample_rate * (start_time + duration)))
    samples_to_read = last - first
    if samples_to_read < 0:
        raise ValueError("the requested window reads a negative number of samples")

    length = _window_length(samples_to_read)
    frames = wave.samples[: sample_count * channels].reshape(sample_count, channels)

    segment = np.zeros((length, channels), dtype=np.float64)
    available = max(0, min(length, sample_count - first))
    if available:
        weights = 0.5 * (1.0 - np.cos(2.0 * np.pi * np.arange(length) / (length - 1)))
        segment[:available] = (
            frames[first : first + available].astype(np.float64)
            * weights[:available, None]
        )

    magnitudes = np.abs(np.fft.fft(segment, axis=0)).sum(axis=1) / channels
    if normalize_to_db:
        with np.errstate(divide="ignore"):
            return 10.0 * np.log10(magnitudes)
    return magnitudes


def _bin_index(frequency: int, bins: int, sample_rate: int) -> int:
    numerator = frequency * bins * 2
    quotient = abs(numerator) // abs(sample_rate)
    return quotient if (numerator >= 0) == (sample_rate > 0) else -quotient


def specific_frequency_value(
    wave: SoundWave, frequencies: Sequence[float], wanted_frequency: int
) -> float:
    """Value of the spectrum bin that holds ``wanted_frequency``."""
    bins = len(frequencies)
    if bins == 0:
        raise IndexError("the frequency spectrum is empty")
    index = _bin_index(wanted_frequency, bins, wave.sample_rate)
    if not 0 <= index < bins:
        raise IndexError(f"frequency {wanted_frequency} lies outside the spectrum")
    return float(frequencies[index])


def average_frequency_in_range(
    wave: SoundWave,
    frequencies: Sequence[float],
    start_frequency: int,
    end_frequency: int,
) -> float:
    """Mean spectrum value between two frequencies, bounds included.

    Returns 0.0 when the range is invalid or does not fit in the spectrum.
    """
    if (
        start_frequency >= end_frequency
        or start_frequency < 0
        or end_frequency > MAX_FREQUENCY
    ):
        return 0.0
    bins = len(frequencies)
    first = _bin_index(start_frequency, bins, wave.sample_rate)
    last = _bin_index(end_frequency, bins, wave.sample_rate)
    if first < 0 or last >= bins:
        return 0.0
    selected = [float(value) for value in frequencies[first : last + 1]]
    return sum(selected) / len(selected)


def average_sub_bass(wave: SoundWave, frequencies: Sequence[float]) -> float:
    """Mean spectrum value of the sub-bass band (20 to 60 Hz)."""
    return average_frequency_in_range(wave, frequencies, *SUB_BASS_RANGE)


def average_bass(wave: SoundWave, frequencies: Sequence[float]) -> float:
    """Mean spectrum value of the bass band (60 to 250 Hz)."""
    return average_frequency_in_range(wave, frequencies, *BASS_RANGE)