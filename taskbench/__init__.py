"""Task lifecycle checking, performance measurement and small threading samples."""

__version__ = "0.1.0"

__all__ = ["perf", "samples", "task"]