"""Domain entities."""
from .metadata import (
    Contributor,
    Creator,
    DateRange,
    FundingReference,
    Link,
    MetadataDocument,
    PersistentIdentifier,
    PersonIdentifier,
    PersonName,
    RelatedDatapackage,
)

__all__ = [
    "Contributor",
    "Creator",
    "DateRange",
    "FundingReference",
    "Link",
    "MetadataDocument",
    "PersistentIdentifier",
    "PersonIdentifier",
    "PersonName",
    "RelatedDatapackage",
]
