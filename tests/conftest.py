"""Pytest configuration and shared fixtures."""
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from readymeta.config.settings import ReportSettings

SETTINGS_ENV_VARS = (
    "READYMETA_INPUT_FILE",
    "READYMETA_OUTPUT_NAME",
    "READYMETA_OUTPUT_DIR",
    "READYMETA_FONT_PATH",
    "READYMETA_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep settings from the developer's environment out of the tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_metadata() -> Dict[str, Any]:
    """Provide a complete Yoda metadata document."""
    return {
        "links": [
            {"rel": "describedby", "href": "https://yoda.uu.nl/schemas/default-1/metadata.json"}
        ],
        "Discipline": ["Natural Sciences - Biological sciences (1.6)"],
        "Language": "en - English",
        "Collected": {"Start_Date": "2021-01-01", "End_Date": "2021-12-31"},
        "Covered_Geolocation_Place": ["Amsterdam", "Utrecht"],
        "Covered_Period": {"Start_Date": "2020-01-01", "End_Date": "2020-06-30"},
        "Tag": ["systems biology", "kinetic models"],
        "Related_Datapackage": [
            {
                "Persistent_Identifier": {"Identifier_Scheme": "DOI", "Identifier": "10.1000/xyz123"},
                "Relation_Type": "IsSupplementTo: Is supplement to",
                "Title": "Companion dataset",
            }
        ],
        "Retention_Period": 10,
        "Data_Type": "Dataset",
        "Funding_Reference": [
            {"Funder_Name": "NWO", "Award_Number": "12345"}
        ],
        "Creator": [
            {
                "Name": {"Given_Name": "Brett", "Family_Name": "Olivier"},
                "Affiliation": ["Vrije Universiteit Amsterdam"],
                "Person_Identifier": [
                    {"Name_Identifier_Scheme": "ORCID", "Name_Identifier": "0000-0002-5293-5321"}
                ],
            }
        ],
        "Contributor": [
            {
                "Name": {"Given_Name": "Jane", "Family_Name": "Doe"},
                "Affiliation": ["Utrecht University"],
                "Person_Identifier": [],
                "Contributor_Type": "DataCurator",
            }
        ],
        "Data_Access_Restriction": "Open - freely retrievable",
        "Title": "Kinetic model collection",
        "Description": "A collection of curated kinetic models.",
        "Version": "1.2",
        "Retention_Information": "Keep for ten years",
        "Embargo_End_Date": "2023-01-01",
        "Data_Classification": "Public",
        "Collection_Name": "Systems Biology",
        "Remarks": "None so far",
        "License": "CC-BY-4.0",
    }


@pytest.fixture
def sample_metadata_json(sample_metadata: Dict[str, Any]) -> bytes:
    """Provide the complete document as raw JSON bytes."""
    return json.dumps(sample_metadata).encode("utf-8")


@pytest.fixture
def minimal_metadata_json() -> bytes:
    """Provide a document with only a few fields set."""
    return b'{"Title":"Sample","Retention_Period":10,"License":"CC-BY-4.0"}'


@pytest.fixture
def metadata_file(tmp_path: Path, sample_metadata_json: bytes) -> Path:
    """Write the complete document as yoda-metadata.json in a temp directory."""
    path = tmp_path / "yoda-metadata.json"
    path.write_bytes(sample_metadata_json)
    return path


@pytest.fixture
def report_settings(tmp_path: Path) -> ReportSettings:
    """Provide settings writing into a temp output directory."""
    return ReportSettings(output_dir=tmp_path / "out")
