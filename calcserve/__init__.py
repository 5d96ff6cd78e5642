"""A small threaded HTTP server with calculator, static-file and stats routes."""

__version__ = "0.1.0"
__all__ = ["__version__"]