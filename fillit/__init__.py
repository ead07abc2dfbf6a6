"""Read tetromino files and pack the pieces into the smallest square."""

__version__ = "0.1.0"