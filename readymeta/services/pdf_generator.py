"""PDF generation service for the metadata report."""
import logging
from pathlib import Path
from typing import Iterable, Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from .. import __version__
from ..config.settings import ReportSettings
from ..domain.errors import RenderError

logger = logging.getLogger(__name__)

REPORT_TITLE = f"Written by readYmeta, the Yoda Metadata converter - v{__version__}"

GRID_COLUMNS = 12
TEXT_COLUMNS = 4
BANNER_ROW_HEIGHT = 10
BANNER_FONT_SIZE = 16
RULE_ROW_HEIGHT = 10
LINE_ROW_HEIGHT = 6
LINE_FONT_SIZE = 10

CORE_FONT_FAMILY = "Helvetica"
CUSTOM_FONT_FAMILY = "ReportFont"


class MetadataReportPDF(FPDF):
    """A4 portrait report laid out on a 12 column grid, one text cell per row."""

    def __init__(self, font_path: Optional[Path] = None, *args, **kwargs):
        """
        Initialize PDF and register the report font.

        Args:
            font_path: Optional TrueType font, needed for text outside Latin-1
            *args, **kwargs: Arguments passed to FPDF.__init__ (orientation, unit, format, etc.)
        """
        kwargs.setdefault("orientation", "P")
        kwargs.setdefault("unit", "mm")
        kwargs.setdefault("format", "A4")
        super().__init__(*args, **kwargs)
        self.rows_written = 0
        self.set_auto_page_break(auto=True, margin=self.b_margin)

        if font_path is not None:
            if not Path(font_path).is_file():
                raise FileNotFoundError(f"Font file not found: {font_path}")
            self.add_font(CUSTOM_FONT_FAMILY, fname=str(font_path))
            self.report_font = CUSTOM_FONT_FAMILY
        else:
            self.report_font = CORE_FONT_FAMILY

    @property
    def column_width(self) -> float:
        return self.epw * TEXT_COLUMNS / GRID_COLUMNS

    def write_row(self, height: float, text: str, font_size: float) -> None:
        """Place one row holding a single left aligned text cell; the rest of the grid stays blank."""
        self.set_font(self.report_font, size=font_size)
        self.cell(
            self.column_width,
            height,
            text,
            align="L",
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        self.rows_written += 1

    def draw_rule(self, height: float) -> None:
        """Draw a thin horizontal rule through the middle of an empty row."""
        if self.will_page_break(height):
            self.add_page()
        y = self.get_y() + height / 2
        self.set_line_width(0.2)
        self.line(self.l_margin, y, self.w - self.r_margin, y)
        self.ln(height)

    def draw_report(self, lines: Iterable[str]) -> None:
        """Banner, rule, then one row per report line."""
        self.write_row(BANNER_ROW_HEIGHT, REPORT_TITLE, BANNER_FONT_SIZE)
        self.draw_rule(RULE_ROW_HEIGHT)
        for idx, line in enumerate(lines):
            logger.info("Index : %d Element : %s", idx, line)
            self.write_row(LINE_ROW_HEIGHT, line, LINE_FONT_SIZE)


def build_report_pdf(lines: Iterable[str], font_path: Optional[Path] = None) -> MetadataReportPDF:
    """
    Assemble the report in memory.

    Raises:
        RenderError: If any row cannot be placed
    """
    try:
        pdf = MetadataReportPDF(font_path=font_path)
        pdf.set_title("Yoda metadata report")
        pdf.set_creator(f"readYmeta v{__version__}")
        pdf.add_page()
        pdf.draw_report(lines)
    except Exception as e:
        logger.error("Failed to assemble metadata report: %s", e, exc_info=True)
        raise RenderError(f"Failed to assemble metadata report: {e}") from e
    return pdf


def create_metadata_report_pdf(
    basename: str,
    lines: Iterable[str],
    settings: Optional[ReportSettings] = None,
) -> Path:
    """
    Generate the metadata report PDF as <output_dir>/<basename>.pdf.

    Nothing is written unless every line was placed. A partially written
    file is removed when the write fails.

    Args:
        basename: Output file name without extension
        lines: Report lines in display order
        settings: Report settings (output directory, font); defaults are used when omitted

    Returns:
        Path of the written PDF

    Raises:
        RenderError: If the document cannot be assembled or written
    """
    settings = settings or ReportSettings()
    pdf = build_report_pdf(lines, font_path=settings.font_path)

    try:
        content = bytes(pdf.output())
    except Exception as e:
        logger.error("Failed to serialize metadata report: %s", e, exc_info=True)
        raise RenderError(f"Failed to serialize metadata report: {e}") from e

    output_file = settings.output_dir / f"{basename}.pdf"
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        handle = output_file.open("wb")
    except OSError as e:
        logger.error("Failed to open %s for writing: %s", output_file, e)
        raise RenderError(f"Failed to open {output_file} for writing: {e}") from e

    try:
        with handle:
            handle.write(content)
    except OSError as e:
        output_file.unlink(missing_ok=True)
        logger.error("Failed to write metadata report to %s: %s", output_file, e, exc_info=True)
        raise RenderError(f"Failed to write metadata report to {output_file}: {e}") from e

    if output_file.stat().st_size == 0:
        raise RenderError(f"PDF file is empty at {output_file}")

    logger.info(
        "Generated metadata report with %d rows on %d page(s) at: %s (%d bytes)",
        pdf.rows_written,
        pdf.page_no(),
        output_file,
        output_file.stat().st_size,
    )
    return output_file
