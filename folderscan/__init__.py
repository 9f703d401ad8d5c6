"""List folder entries, read directories as seekable streams and sort names by version."""

__version__ = "0.1.0"
__all__ = ["__version__"]