"""Path decomposition, file status reporting, directory listing and walking, and small file helpers."""

__version__ = "0.1.0"