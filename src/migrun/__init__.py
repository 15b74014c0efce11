"""migrun - Date-versioned, resumable migration runner."""

__version__ = "1.0.0"
