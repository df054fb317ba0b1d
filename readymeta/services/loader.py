"""Metadata loader - decodes yoda-metadata.json into a MetadataDocument."""
import logging
import sys
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from ..domain.entities.metadata import MetadataDocument
from ..domain.errors import LoadError

logger = logging.getLogger(__name__)


def _format_validation_errors(validation_error: ValidationError) -> List[str]:
    """Flatten pydantic errors into '<location>: <message>' strings."""
    errors = []
    for error in validation_error.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "<document>"
        errors.append(f"{field}: {error['msg']}")
    return errors


def load_metadata(raw: Union[bytes, str]) -> MetadataDocument:
    """
    Decode raw JSON into a MetadataDocument.

    Unknown keys are ignored and missing keys keep their zero value. Any
    type mismatch fails the whole document.

    Args:
        raw: JSON document as bytes or text

    Returns:
        Loaded MetadataDocument

    Raises:
        LoadError: If the document is not valid JSON or does not match the schema
    """
    try:
        document = MetadataDocument.model_validate_json(raw)
    except ValidationError as e:
        errors = _format_validation_errors(e)
        logger.error("Metadata document does not match schema: %s", "; ".join(errors))
        raise LoadError(f"Invalid metadata document: {'; '.join(errors)}", errors=errors) from e

    logger.info(
        "Loaded metadata document '%s' (%d creators, %d contributors)",
        document.title,
        len(document.creator),
        len(document.contributor),
    )
    return document


def read_metadata_file(path: Union[str, Path]) -> bytes:
    """
    Read the metadata file as bytes.

    Raises:
        LoadError: If the file does not exist or cannot be read
    """
    src_path = Path(path)
    if not src_path.exists():
        raise LoadError(f"Metadata file not found: {src_path.resolve()}")
    if not src_path.is_file():
        raise LoadError(f"Path is not a file: {src_path}")

    try:
        raw = src_path.read_bytes()
    except OSError as e:
        raise LoadError(f"Failed to read metadata file {src_path}: {e}") from e

    logger.info("Read %d bytes from %s", len(raw), src_path)
    return raw


def load_metadata_file(path: Union[str, Path]) -> MetadataDocument:
    """Read the metadata file, echo it verbatim to stdout and decode it."""
    raw = read_metadata_file(path)
    sys.stdout.write(raw.decode("utf-8", errors="replace"))
    sys.stdout.flush()
    return load_metadata(raw)
