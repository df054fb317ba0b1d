"""Errors raised while converting a metadata document into a report."""
from typing import List, Optional


class ReadymetaError(Exception):
    """Base class for every failure that aborts a conversion run."""
    pass


class LoadError(ReadymetaError):
    """Exception raised when the metadata document cannot be read or decoded."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class RenderError(ReadymetaError):
    """Exception raised when the PDF report cannot be assembled or written."""
    pass


class ConfigError(ReadymetaError):
    """Exception raised when a setting from the environment is invalid."""
    pass
