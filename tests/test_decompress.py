import wave as wavfile

import numpy as np
import pytest

from mediocremapper.decompress import DecompressWorker


def _write_wav(path, samples, channels=1, rate=8000):
    with wavfile.open(str(path), "wb") as writer:
        writer.setnchannels(channels)
        writer.setsampwidth(2)
        writer.setframerate(rate)
        writer.writeframes(np.asarray(samples, dtype="<i2").tobytes())


def test_worker_decodes_file(tmp_path):
    path = tmp_path / "a.wav"
    samples = [1, -2, 3, -4, 500]
    _write_wav(path, samples, rate=100)
    worker = DecompressWorker(path)
    assert worker.is_finished() is False
    result = worker.start().wait(timeout=5)
    assert worker.is_finished() is True
    assert result.samples.tolist() == samples
    assert result.sample_rate == 100
    assert worker.wave is result


def test_callbacks_receive_wave(tmp_path):
    path = tmp_path / "a.wav"
    _write_wav(path, [7, 8], channels=2)
    received = []
    worker = DecompressWorker(path)
    worker.on_finished.append(received.append)
    result = worker.start().wait(timeout=5)
    assert received == [result]


def test_error_is_raised_from_wait(tmp_path):
    worker = DecompressWorker(tmp_path / "missing.wav")
    received = []
    worker.on_finished.append(received.append)
    worker.start()
    with pytest.raises(FileNotFoundError):
        worker.wait(timeout=5)
    assert worker.is_finished() is True
    assert received == []
    assert isinstance(worker.error, FileNotFoundError)


def test_wait_before_start(tmp_path):
    with pytest.raises(RuntimeError):
        DecompressWorker(tmp_path / "a.wav").wait(timeout=1)


def test_start_twice(tmp_path):
    path = tmp_path / "a.wav"
    _write_wav(path, [1])
    worker = DecompressWorker(path).start()
    with pytest.raises(RuntimeError):
        worker.start()
    assert worker.wait(timeout=5).samples.tolist() == [1]