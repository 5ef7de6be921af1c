from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic_core import to_json

from ukpostcodes.core.errors import ValidationError

MAX_BATCH = 100


class Record(BaseModel):
    """Frozen upstream record. Every field may be omitted by postcodes.io."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class Codes(Record):
    admin_district: str | None = None
    admin_county: str | None = None
    admin_ward: str | None = None
    parish: str | None = None
    parliamentary_constituency: str | None = None
    ccg: str | None = None
    ccg_id: str | None = None
    ced: str | None = None
    nuts: str | None = None
    lau2: str | None = None
    lsoa: str | None = None
    msoa: str | None = None


class Postcode(Record):
    postcode: str | None = None
    outcode: str | None = None
    incode: str | None = None
    quality: int | None = None
    eastings: int | None = None
    northings: int | None = None
    country: str | None = None
    nhs_ha: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    european_electoral_region: str | None = None
    primary_care_trust: str | None = None
    region: str | None = None
    lsoa: str | None = None
    msoa: str | None = None
    parliamentary_constituency: str | None = None
    admin_district: str | None = None
    parish: str | None = None
    admin_county: str | None = None
    admin_ward: str | None = None
    ced: str | None = None
    ccg: str | None = None
    nuts: str | None = None

    # nearest-postcode results only
    distance: float | None = None

    codes: Codes | None = None


class Outcode(Record):
    outcode: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    northings: int | None = None
    eastings: int | None = None

    admin_district: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("admin_district", "adminDistrict")
    )
    parish: list[str] | None = None
    admin_county: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("admin_county", "adminCounty")
    )
    admin_ward: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("admin_ward", "adminWard")
    )
    country: list[str] | None = None

    distance: float | None = None


class Place(Record):
    code: str | None = None
    name_1: str | None = None
    name_1_lang: str | None = None
    name_2: str | None = None
    name_2_lang: str | None = None
    local_type: str | None = None
    outcode: str | None = None
    county_unitary: str | None = None
    county_unitary_type: str | None = None
    district_borough: str | None = None
    district_borough_type: str | None = None
    region: str | None = None
    country: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    eastings: int | None = None
    northings: int | None = None
    min_eastings: int | None = None
    min_northings: int | None = None
    max_eastings: int | None = None
    max_northings: int | None = None


class ScottishCodes(Record):
    scottish_parliamentary_constituency: str | None = None


class ScottishPostcode(Record):
    postcode: str | None = None
    scottish_parliamentary_constituency: str | None = None
    codes: ScottishCodes | None = None


class TerminatedPostcode(Record):
    postcode: str | None = None
    year_terminated: int | None = None
    month_terminated: int | None = None
    longitude: float | None = None
    latitude: float | None = None


class Geocode(BaseModel):
    """
    Reverse geocoding query.

    limit: upstream default 10, must not exceed 100.
    radius: metres, upstream default 100, must not exceed 2,000
            (25,000 for outcodes).
    widesearch: search up to 20km but cap results at 10; upstream then
                ignores radius and any limit over 10.
    """

    model_config = ConfigDict(frozen=True)

    longitude: float = 0.0
    latitude: float = 0.0
    limit: int | None = None
    radius: int | None = None
    widesearch: bool = False

    def validate_coordinates(self) -> None:
        if self.latitude == 0.0 or self.longitude == 0.0:
            raise ValidationError("Latitude and Longitude must be defined")

    def to_wire(self) -> dict[str, Any]:
        """Wire form with zero/false/None members left out."""
        return {k: v for k, v in self.model_dump().items() if v}


class PostcodeBatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    postcodes: list[str] = Field(default_factory=list)

    def validate_size(self) -> None:
        if len(self.postcodes) == 0:
            raise ValidationError("minimum of 1 postcode required")
        if len(self.postcodes) > MAX_BATCH:
            raise ValidationError(
                f"Maximum postcode limit exceeded! Maximum of {MAX_BATCH} postcodes"
            )

    def to_json(self) -> bytes:
        return self.model_dump_json().encode("utf-8")


class GeocodeBatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    geolocations: list[Geocode] = Field(default_factory=list)

    def validate_size(self) -> None:
        if len(self.geolocations) == 0:
            raise ValidationError("minimum of 1 geolocations required")
        if len(self.geolocations) > MAX_BATCH:
            raise ValidationError(
                f"Maximum geolocations limit exceeded! Maximum of {MAX_BATCH} geolocations"
            )
        for g in self.geolocations:
            g.validate_coordinates()

    def to_wire(self) -> dict[str, Any]:
        return {"geolocations": [g.to_wire() for g in self.geolocations]}

    def to_json(self) -> bytes:
        return to_json(self.to_wire())


class BulkPostcodeResult(Record):
    query: str | None = None
    result: Postcode | None = None


class BulkGeocodeResult(Record):
    query: Geocode | None = None
    result: list[Postcode] | None = None


class Envelope(BaseModel):
    """The uniform {status, result, error} wrapper around every response."""

    status: int | None = None
    result: Any = None
    error: str | None = None
