"""Product catalogue, stock and customer order management with binary file storage."""

__version__ = "1.0.0"