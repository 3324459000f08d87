import numpy as np
import pytest

from mediocremapper.player import SpectrumPlayer
from mediocremapper.spectrum import SoundWave, calculate_frequency_spectrum


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def wave():
    rate = 8000
    t = np.arange(rate) / rate
    samples = (np.sin(2 * np.pi * 440 * t) * 1000).astype(np.int16)
    return SoundWave(sample_rate=rate, num_channels=1, samples=samples)


def test_start_computes_first_spectrum(clock, wave):
    player = SpectrumPlayer(clock=clock)
    received = []
    player.on_spectrum.append(received.append)
    first = player.start(wave, 0.01)
    expected = calculate_frequency_spectrum(wave, 0.0, 0.01)
    assert np.allclose(first, expected)
    assert len(received) == 1
    assert player.is_playing()
    assert not player.is_paused()


def test_playback_time_follows_clock(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    clock.now = 0.5
    assert player.playback_time() == pytest.approx(0.5)


def test_update_uses_current_time(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    clock.now = 0.25
    spectrum = player.update(True)
    assert np.allclose(spectrum, calculate_frequency_spectrum(wave, 0.25, 0.01))


def test_pause_freezes_and_resume_continues(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    clock.now = 0.2
    player.pause()
    assert player.is_paused()
    assert not player.is_playing()
    clock.now = 0.7
    assert player.playback_time() == pytest.approx(0.2)
    assert player.update(True) is None
    player.resume()
    clock.now = 0.8
    assert player.playback_time() == pytest.approx(0.3)
    assert player.is_playing()


def test_stop_resets_state(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    clock.now = 0.3
    player.stop()
    assert not player.is_playing()
    assert not player.is_paused()
    assert player.playback_time() == 0.0
    assert player.wave is None
    assert player.segment_length == 0.0
    assert player.update(True) is None


def test_start_without_wave_raises(clock):
    with pytest.raises(ValueError):
        SpectrumPlayer(clock=clock).start(None, 0.01)


def test_start_twice_raises(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    with pytest.raises(RuntimeError):
        player.start(wave, 0.01)


def test_pause_when_idle_raises(clock):
    with pytest.raises(RuntimeError):
        SpectrumPlayer(clock=clock).pause()


def test_stop_when_idle_raises(clock):
    with pytest.raises(RuntimeError):
        SpectrumPlayer(clock=clock).stop()


def test_resume_when_not_paused_raises(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    with pytest.raises(RuntimeError):
        player.resume()


def test_background_pauses_and_foreground_resumes(clock, wave):
    player = SpectrumPlayer(clock=clock)
    player.start(wave, 0.01)
    clock.now = 0.1
    assert player.update(False) is None
    assert player.is_paused()
    assert player.paused_by_background
    clock.now = 0.6
    resumed = player.update(True)
    assert not player.paused_by_background
    assert player.is_playing()
    assert np.allclose(resumed, calculate_frequency_spectrum(wave, 0.1, 0.01))


def test_background_ignored_when_disabled(clock, wave):
    player = SpectrumPlayer(clock=clock, pause_when_in_background=False)
    player.start(wave, 0.01)
    clock.now = 0.1
    spectrum = player.update(False)
    assert player.is_playing()
    assert np.allclose(spectrum, calculate_frequency_spectrum(wave, 0.1, 0.01))


def test_no_spectrum_after_end(clock, wave):
    player = SpectrumPlayer(clock=clock)
    received = []
    player.on_spectrum.append(received.append)
    player.start(wave, 0.01)
    clock.now = wave.duration + 1.0
    assert player.update(True) is None
    assert len(received) == 1
    assert player.is_playing()


def test_normalize_to_db(clock, wave):
    player = SpectrumPlayer(clock=clock, normalize_to_db=True)
    spectrum = player.start(wave, 0.01)
    expected = calculate_frequency_spectrum(wave, 0.0, 0.01, True)
    assert np.allclose(spectrum, expected, equal_nan=True)