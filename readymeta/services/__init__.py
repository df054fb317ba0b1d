"""Conversion services: loading, projection and PDF rendering."""
from .loader import load_metadata, load_metadata_file, read_metadata_file
from .projection import BASIC_FIELDS, project_basic_fields
from .pdf_generator import MetadataReportPDF, build_report_pdf, create_metadata_report_pdf

__all__ = [
    "load_metadata",
    "load_metadata_file",
    "read_metadata_file",
    "BASIC_FIELDS",
    "project_basic_fields",
    "MetadataReportPDF",
    "build_report_pdf",
    "create_metadata_report_pdf",
]
