"""readYmeta - Yoda metadata to PDF report converter."""

__version__ = "0.3"
