"""Report conversion settings."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..domain.errors import ConfigError
from .env import get_env

DEFAULT_INPUT_FILE = "yoda-metadata.json"
DEFAULT_OUTPUT_NAME = "dumpfile"


@dataclass(frozen=True)
class ReportSettings:
    """Settings for a single conversion run."""
    input_file: Path = Path(DEFAULT_INPUT_FILE)
    output_name: str = DEFAULT_OUTPUT_NAME
    output_dir: Path = Path(".")
    font_path: Optional[Path] = None
    log_level: str = "INFO"


def load_report_settings() -> ReportSettings:
    """
    Load report settings from environment variables.

    Returns:
        ReportSettings instance with defaults for unset variables

    Raises:
        ConfigError: If READYMETA_LOG_LEVEL is not a logging level name
    """
    log_level = get_env("READYMETA_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Invalid READYMETA_LOG_LEVEL: {log_level}")

    font_path = get_env("READYMETA_FONT_PATH")
    return ReportSettings(
        input_file=Path(get_env("READYMETA_INPUT_FILE", DEFAULT_INPUT_FILE)),
        output_name=get_env("READYMETA_OUTPUT_NAME", DEFAULT_OUTPUT_NAME),
        output_dir=Path(get_env("READYMETA_OUTPUT_DIR", ".")),
        font_path=Path(font_path) if font_path else None,
        log_level=log_level,
    )
