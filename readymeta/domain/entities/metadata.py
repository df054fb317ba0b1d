"""Yoda metadata entities - typed, immutable view of yoda-metadata.json."""
from typing import Annotated, Any, List, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")

# JSON arrays are validated as strict lists, then stored as tuples.
FrozenList = Annotated[List[T], AfterValidator(tuple)]


class YodaModel(BaseModel):
    """Base model for every node of the Yoda metadata schema.

    Keys outside the schema are ignored, values are never coerced between
    types, and instances are frozen once loaded.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        """Treat explicit JSON nulls like absent keys so the zero value is kept."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Link(YodaModel):
    """Hyperlink pair."""

    rel: str = ""
    href: str = ""


class DateRange(YodaModel):
    """Start/end date pair used by Collected and Covered_Period."""

    start_date: str = Field("", alias="Start_Date")
    end_date: str = Field("", alias="End_Date")


class PersistentIdentifier(YodaModel):
    identifier_scheme: str = Field("", alias="Identifier_Scheme")
    identifier: str = Field("", alias="Identifier")


class RelatedDatapackage(YodaModel):
    """Reference to another data package."""

    persistent_identifier: PersistentIdentifier = Field(
        default_factory=PersistentIdentifier, alias="Persistent_Identifier"
    )
    relation_type: str = Field("", alias="Relation_Type")
    title: str = Field("", alias="Title")


class FundingReference(YodaModel):
    funder_name: str = Field("", alias="Funder_Name")
    award_number: str = Field("", alias="Award_Number")


class PersonName(YodaModel):
    given_name: str = Field("", alias="Given_Name")
    family_name: str = Field("", alias="Family_Name")


class PersonIdentifier(YodaModel):
    name_identifier_scheme: str = Field("", alias="Name_Identifier_Scheme")
    name_identifier: str = Field("", alias="Name_Identifier")


class Creator(YodaModel):
    """Dataset creator with affiliations and external person identifiers."""

    name: PersonName = Field(default_factory=PersonName, alias="Name")
    affiliation: FrozenList[str] = Field((), alias="Affiliation")
    person_identifier: FrozenList[PersonIdentifier] = Field((), alias="Person_Identifier")


class Contributor(Creator):
    contributor_type: str = Field("", alias="Contributor_Type")


class MetadataDocument(YodaModel):
    """Complete Yoda metadata document.

    Every field is optional and defaults to its zero value. Sequences are
    stored as tuples so the loaded document cannot be mutated.
    """

    links: FrozenList[Link] = Field((), alias="links")
    discipline: FrozenList[str] = Field((), alias="Discipline")
    language: str = Field("", alias="Language")
    collected: DateRange = Field(default_factory=DateRange, alias="Collected")
    covered_geolocation_place: FrozenList[str] = Field((), alias="Covered_Geolocation_Place")
    covered_period: DateRange = Field(default_factory=DateRange, alias="Covered_Period")
    tag: FrozenList[str] = Field((), alias="Tag")
    related_datapackage: FrozenList[RelatedDatapackage] = Field((), alias="Related_Datapackage")
    retention_period: int = Field(0, alias="Retention_Period")
    data_type: str = Field("", alias="Data_Type")
    funding_reference: FrozenList[FundingReference] = Field((), alias="Funding_Reference")
    creator: FrozenList[Creator] = Field((), alias="Creator")
    contributor: FrozenList[Contributor] = Field((), alias="Contributor")
    data_access_restriction: str = Field("", alias="Data_Access_Restriction")
    title: str = Field("", alias="Title")
    description: str = Field("", alias="Description")
    version: str = Field("", alias="Version")
    retention_information: str = Field("", alias="Retention_Information")
    embargo_end_date: str = Field("", alias="Embargo_End_Date")
    data_classification: str = Field("", alias="Data_Classification")
    collection_name: str = Field("", alias="Collection_Name")
    remarks: str = Field("", alias="Remarks")
    license: str = Field("", alias="License")
