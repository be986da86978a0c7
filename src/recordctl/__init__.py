"""recordctl — validated record collection and text file inspection."""

__version__ = "0.1.0"
