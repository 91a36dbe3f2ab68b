"""Word frequency counting for PDF documents."""

__version__ = "1.0.0"
