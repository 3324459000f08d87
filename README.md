# mediocremapper

Building blocks for a rhythm game map editor. It covers frequency spectrum
analysis of decoded 16-bit PCM audio and spectrogram grid meshes. It also
has colour packing and some file and download helpers.

## Installation

```
pip install mediocremapper
```

To run the tests, install the `test` extra and run pytest:

```
pip install "mediocremapper[test]"
pytest
```

## Modules

- `mediocremapper.colors`
  - `LinearColor` is a frozen dataclass with float `r`, `g`, `b` and `a` channels.
  - `color_to_int` packs the RGB channels into one integer. Each channel is
    scaled by 255 and masked to a byte, and the result is offset by
    2,000,000,000.
  - `int_to_color` unpacks such an integer. Each channel byte is divided by 254.
- `mediocremapper.fileio` holds small file system helpers:
  - `verify_or_create_directory`, `verify_directory` and `verify_file`.
  - `find_all_directories` and `find_all_files` return sorted entry names.
  - `rename_or_move_file` and `copy_file`. Both raise `FileNotFoundError`
    when the source file is missing.
  - `delete_file` and `delete_directory`. The latter deletes recursively.
  - `file_size` returns bytes. `timestamp` returns the modification time in
    whole Unix seconds.
- `mediocremapper.updater`
  - `update_updater(game_dir)` copies `Updates/MediocreMapper/MediocreUpdater.exe`
    over `MediocreUpdater.exe` in `game_dir`.
  - It returns whether the installed copy exists afterwards. It returns
    `False` when nothing is staged.
- `mediocremapper.downloader`
  - `FileDownloader.download_file(url, save_path)` fetches a URL with GET.
  - It creates the target directory when needed and writes the body to the
    file.
  - Callables in `on_progress` receive `(bytes_sent, bytes_received,
    content_length)` as data arrives.
  - Callables in `on_result` receive a `DownloadResult`: `SUCCESS`,
    `DOWNLOAD_FAILED`, `SAVE_FAILED` or `DIRECTORY_CREATION_FAILED`.
  - The outcome is also kept in `result`.
- `mediocremapper.spectrum`
  - `SoundWave` holds interleaved 16-bit samples with a sample rate and a
    channel count (1 or 2). `SoundWave.from_pcm_bytes` builds one from raw
    little-endian PCM.
  - `calculate_frequency_spectrum(wave, start_time, duration,
    normalize_to_db)` pads the window to a power of two and applies a Hann
    window. It returns the FFT magnitudes averaged over the channels, in
    decibels when asked.
  - `hann_window` applies the same weight to a single value.
  - `specific_frequency_value`, `average_frequency_in_range`,
    `average_sub_bass` (20 to 60 Hz) and `average_bass` (60 to 250 Hz) read
    values back out of a spectrum.
- `mediocremapper.waveform`
  - `generate_spectrogram_mesh(size_x, size_y)` builds a flat
    `SpectrogramMesh` with two triangles per cell.
  - `render_waveform(wave, mesh, song_position, size_x)` sets vertex
    heights and red colour intensity in a 160 by 64 grid. Each column is the
    spectrum of a 1/64 s segment starting at `song_position`.
  - `to_1d` gives the flat vertex index of a grid position.
- `mediocremapper.soundfiles`
  - `list_sound_files` walks a directory, optionally relative to a project
    directory and filtered by extension. It returns the full paths and the
    bare names.
  - `load_sound_file` reads a 16-bit PCM WAV file with one or two channels
    into a `SoundWave`.
- `mediocremapper.decompress`
  - `DecompressWorker(path).start()` loads a sound file on a background
    thread.
  - `wait(timeout)` returns the wave or raises the loading error.
  - `is_finished()` reports whether the worker has stopped.
- `mediocremapper.player`
  - `SpectrumPlayer` keeps a playback clock for a wave, with `start`,
    `pause`, `resume` and `stop`.
  - Each `update(foreground)` computes the spectrum of the current segment
    and passes it to the callables in `on_spectrum`.
  - It pauses while the window is in the background if configured to, and
    resumes once the window is in front again.

## Example

```python
import numpy as np

from mediocremapper.colors import LinearColor, color_to_int, int_to_color
from mediocremapper.spectrum import SoundWave, calculate_frequency_spectrum, average_bass
from mediocremapper.waveform import generate_spectrogram_mesh, render_waveform

packed = color_to_int(LinearColor(1.0, 0.5, 0.0))
colour = int_to_color(packed)

rate = 44100
t = np.arange(rate * 4) / rate
samples = (10000 * np.sin(2 * np.pi * 100 * t)).astype(np.int16)
wave = SoundWave(sample_rate=rate, num_channels=1, samples=samples)

spectrum = calculate_frequency_spectrum(wave, 0.5, 0.1)
bass = average_bass(wave, spectrum)

mesh = generate_spectrogram_mesh(160, 64)
render_waveform(wave, mesh, 0.0, 160)
```

## What it does not do

- It does not emit sound. `SpectrumPlayer` only keeps time and computes
  spectra.
- It decodes only 16-bit PCM WAV files. Compressed formats such as Ogg
  Vorbis are not read.
- It has no command-line program and no user interface. It is a library to
  be called from code.