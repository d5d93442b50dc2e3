"""Configuration, argument parsing, progress display, checksums and mIRC colour codes for XDCC downloads."""

__version__ = "1.1.0"