"""Credit-based round-robin process scheduler simulator with blocking I/O."""

__version__ = "0.1.0"
__all__ = ["__version__"]