"""Terminal emulator logic: key encoding, pointer handling, viewport helpers and thumbnailers."""

__version__ = "0.1.0"
__all__ = ["keys", "pointer", "thumbnailer", "viewport"]