"""doru: a small todo tracker backed by a local file."""

__version__ = "0.1.0"
