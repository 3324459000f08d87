"""Audio spectrum analysis, spectrogram meshes, colour packing and file helpers for map editing."""

__version__ = "0.1.0"