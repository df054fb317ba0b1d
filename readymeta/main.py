#!/usr/bin/env python3
"""
readYmeta - entrypoint converting yoda-metadata.json into a PDF report.

Usage:
    readymeta [metadata_file]

Settings are read from the environment (or a .env file), see
readymeta.config.settings.
"""
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config.settings import ReportSettings, load_report_settings
from .domain.errors import ReadymetaError
from .services.loader import load_metadata_file
from .services.pdf_generator import create_metadata_report_pdf
from .services.projection import project_basic_fields

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to the Yoda metadata translator\n"
    "(C)Brett G. Olivier, Vrije Universiteit Amsterdam, 2022"
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # fpdf logs font subsetting details at INFO
    logging.getLogger('fpdf').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def run(settings: ReportSettings) -> Path:
    """
    Load, project and render one metadata document.

    Raises:
        LoadError: If the metadata file is missing or malformed
        RenderError: If the PDF cannot be assembled or written
    """
    document = load_metadata_file(settings.input_file)
    print("\n\n----------------\n")

    lines = project_basic_fields(document)
    logger.info("Projected %d report lines", len(lines))

    return create_metadata_report_pdf(settings.output_name, lines, settings)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    load_dotenv(find_dotenv(usecwd=True))
    try:
        settings = load_report_settings()
    except ReadymetaError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)
    if args:
        settings = replace(settings, input_file=Path(args[0]))

    configure_logging(settings.log_level)
    print(WELCOME_MESSAGE)

    try:
        output_file = run(settings)
    except ReadymetaError as e:
        logger.error("Conversion aborted: %s", e)
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    logger.info("Metadata report written to %s", output_file)


if __name__ == '__main__':
    main()
