"""Field projection - selects the report fields of a MetadataDocument."""
from typing import List, Tuple

from ..domain.entities.metadata import MetadataDocument

# (label, attribute) in report order. Labels are the historical report
# labels and intentionally differ from the schema keys.
BASIC_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("Title", "title"),
    ("Description", "description"),
    ("Version", "version"),
    ("Licence", "license"),
    ("Language", "language"),
    ("Rentention_Period", "retention_period"),
    ("Data_Type", "data_type"),
    ("Data_Access_Restriction", "data_access_restriction"),
    ("Retention_Information", "retention_information"),
    ("Embargo_End_Date", "embargo_end_date"),
    ("Data_Classification", "data_classification"),
    ("Collection_Name", "collection_name"),
    ("Remarks", "remarks"),
)


def project_basic_fields(doc: MetadataDocument) -> List[str]:
    """Build the 13 '<Label>: <value>' report lines in fixed order."""
    lines = []
    for label, attribute in BASIC_FIELDS:
        value = getattr(doc, attribute)
        lines.append(f"{label}: {value}")
    return lines
