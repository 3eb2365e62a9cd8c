"""Register command-line options, parse an argument list and build help text."""

__version__ = "0.1.0"
__all__ = ["__version__"]