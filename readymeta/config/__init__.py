"""Configuration helpers."""
from .settings import ReportSettings, load_report_settings

__all__ = ["ReportSettings", "load_report_settings"]
