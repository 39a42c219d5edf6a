"""Pennsylvania dog license portal."""

__version__ = "0.1.0"
