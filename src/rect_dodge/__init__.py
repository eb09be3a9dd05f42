"""rect-dodge: a minimal realtime arcade loop built on pygame."""

__version__ = "0.1.0"
