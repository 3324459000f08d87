"""Grid mesh whose heights show the audio spectrum around a song position."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .spectrum import SoundWave, calculate_frequency_spectrum

WAVEFORM_COLUMNS = 160
WAVEFORM_ROWS = 64
SEGMENT_DURATION = 1 / 64
BIN_STRIDE = 8
HEIGHT_SCALE = 50000.0

_UP = (0.0, 0.0, 1.0)
_TANGENT = (1.0, 0.0, 0.0)


@dataclass
class SpectrogramMesh:
    """A flat grid of ``size_x`` by ``size_y`` vertices with per-vertex data.

    ``vertex_colors`` holds RGBA rows; ``faces`` holds triangle vertex indices.
    """

    size_x: int
    size_y: int
    vertices: np.ndarray
    faces: np.ndarray
    normals: np.ndarray
    uv0: np.ndarray
    vertex_colors: np.ndarray
    tangents: np.ndarray


def to_1d(x: int, y: int, size_x: int) -> int:
    """Flat index of grid position (x, y) in rows of ``size_x``."""
    return size_x * y + x


def _vertex_attributes(count: int) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    normals = np.tile(np.array(_UP), (count, 1))
    uv0 = np.zeros((count, 2))
    colors = np.zeros((count, 4))
    colors[:, 3] = 1.0
    tangents = np.tile(np.array(_TANGENT), (count, 1))
    return normals, uv0, colors, tangents


def generate_spectrogram_mesh(size_x: int, size_y: int) -> SpectrogramMesh:
    """Build a flat grid mesh of two triangles per cell."""
    if size_x <= 0 or size_y <= 0:
        raise ValueError("mesh dimensions must be positive")
    count = size_x * size_y

    ys, xs = np.divmod(np.arange(count), size_x)
    vertices = np.column_stack([xs, ys, np.zeros(count)]).astype(np.float64)

    cells_x, cells_y = size_x - 1, size_y - 1
    faces = np.zeros(max(cells_x, 0) * max(cells_y, 0) * 6, dtype=np.int64)
    for j in range(cells_y):
        for i in range(cells_x):
            base = to_1d(i, j, cells_x) * 6
            faces[base : base + 6] = (
                to_1d(i, j, size_x),
                to_1d(i, j + 1, size_x),
                to_1d(i + 1, j, size_x),
                to_1d(i + 1, j, size_x),
                to_1d(i, j + 1, size_x),
                to_1d(i + 1, j + 1, size_x),
            )

    normals, uv0, colors, tangents = _vertex_attributes(count)
    return SpectrogramMesh(
        size_x=size_x,
        size_y=size_y,
        vertices=vertices,
        faces=faces,
        normals=normals,
        uv0=uv0,
        vertex_colors=colors,
        tangents=tangents,
    )


def render_waveform(
    wave: SoundWave, mesh: SpectrogramMesh, song_position: float, size_x: int
) -> SpectrogramMesh:
    """Set the mesh heights and colours from the spectrum after ``song_position``.

    Each of the columns covers one short segment of the song; segments outside
    the song stay flat. Vertices outside the rendered grid are reset to the
    origin. The mesh is updated in place and returned.
    """
    count = len(mesh.vertices)
    vertices = np.zeros((count, 3))
    normals, uv0, colors, tangents = _vertex_attributes(count)

    for i in range(WAVEFORM_COLUMNS):
        start_time = SEGMENT_DURATION * i + song_position
        valid = (
            0.0 <= start_time < wave.duration
            and start_time + SEGMENT_DURATION < wave.duration
        )
        results = (
            calculate_frequency_spectrum(wave, start_time, SEGMENT_DURATION)
            if valid
            else None
        )
        for j in range(WAVEFORM_ROWS):
            height = (
                float(results[int(j * float(BIN_STRIDE))]) / HEIGHT_SCALE
                if results is not None
                else 0.0
            )
            index = to_1d(i, j, size_x)
            vertices[index] = (i, j, height)
            colors[index] = (height, 0.0, 0.0, 1.0)

    mesh.vertices = vertices
    mesh.normals = normals
    mesh.uv0 = uv0
    mesh.vertex_colors = colors
    mesh.tangents = tangents
    return mesh