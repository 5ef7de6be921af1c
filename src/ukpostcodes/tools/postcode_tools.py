from __future__ import annotations

import logging
from typing import Any, Callable

from fastmcp import FastMCP
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
from pydantic_core import to_jsonable_python

from ukpostcodes.app.container import Container
from ukpostcodes.core.errors import PostcodeError
from ukpostcodes.core.models import Geocode

log = logging.getLogger(__name__)


class GeocodeArgs(BaseModel):
    longitude: float = Field(..., description="WGS84 longitude, e.g. -0.740895")
    latitude: float = Field(..., description="WGS84 latitude, e.g. 51.417093")
    limit: int | None = Field(None, ge=1, le=100, description="Max results (upstream default 10)")
    radius: int | None = Field(None, ge=1, description="Search radius in metres")
    widesearch: bool = Field(False, description="Search up to 20km, at most 10 results")

    def to_geocode(self) -> Geocode:
        return Geocode(**self.model_dump())


def run_tool(call: Callable[[], Any]) -> dict[str, Any]:
    """
    Run one service call and shape it as the tool response:
    {"status": 200, "result": ...} or {"status": <code>, "error": <message>}.
    """
    try:
        result = call()
    except PostcodeError as e:
        log.info("Tool call failed: %s %s", e.status, e.error)
        return e.to_dict()
    except PydanticValidationError as e:
        return {"status": 400, "error": str(e)}

    return {"status": 200, "result": to_jsonable_python(result, exclude_none=True)}


def register_postcode_tools(mcp: FastMCP, container: Container) -> None:
    postcode_service = container.postcode_service
    outcode_service = container.outcode_service
    place_service = container.place_service

    @mcp.tool(
        name="lookup_postcode",
        description="Look up one UK postcode and return all available data. Case and space insensitive.",
    )
    def lookup_postcode(postcode: str) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.lookup(postcode))

    @mcp.tool(
        name="bulk_lookup_postcodes",
        description="Look up to 100 postcodes at once. filters limits the returned attributes, e.g. [\"postcode\", \"longitude\"].",
    )
    def bulk_lookup_postcodes(postcodes: list[str], filters: list[str] | None = None) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.bulk_lookup(postcodes, filters))

    @mcp.tool(
        name="reverse_geocode",
        description="Nearest postcodes to a longitude/latitude. limit up to 100, radius up to 2,000m, widesearch searches 20km for at most 10 results.",
    )
    def reverse_geocode(
        longitude: float,
        latitude: float,
        limit: int | None = None,
        radius: int | None = None,
        widesearch: bool = False,
    ) -> dict[str, Any]:
        return run_tool(
            lambda: postcode_service.reverse_geocode(
                Geocode(longitude=longitude, latitude=latitude, limit=limit, radius=radius, widesearch=widesearch)
            )
        )

    @mcp.tool(
        name="bulk_reverse_geocode",
        description="Reverse geocode up to 100 longitude/latitude pairs at once.",
    )
    def bulk_reverse_geocode(geolocations: list[GeocodeArgs], filters: list[str] | None = None) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.bulk_reverse_geocode([g.to_geocode() for g in geolocations], filters))

    @mcp.tool(
        name="query_postcodes",
        description="Prefix search over postcodes, sorted and case insensitive. limit up to 100.",
    )
    def query_postcodes(q: str, limit: int | None = None) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.query(q, limit))

    @mcp.tool(name="validate_postcode", description="Check whether a postcode is valid (true/false).")
    def validate_postcode(postcode: str) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.validate(postcode))

    @mcp.tool(
        name="nearest_postcodes",
        description="Postcodes nearest to a given postcode. limit up to 100, radius up to 2,000m.",
    )
    def nearest_postcodes(postcode: str, limit: int | None = None, radius: int | None = None) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.nearest(postcode, limit, radius))

    @mcp.tool(name="autocomplete_postcode", description="Autocomplete a partial postcode. limit up to 100.")
    def autocomplete_postcode(postcode: str, limit: int | None = None) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.autocomplete(postcode, limit))

    @mcp.tool(name="random_postcode", description="Random postcode, optionally within one outcode.")
    def random_postcode(outcode: str | None = None) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.random(outcode))

    @mcp.tool(
        name="lookup_scottish_postcode",
        description="Scottish Postcode Directory data (Scottish Parliamentary Constituency) for a postcode.",
    )
    def lookup_scottish_postcode(postcode: str) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.scottish_lookup(postcode))

    @mcp.tool(name="lookup_terminated_postcode", description="Look up a terminated postcode with its year and month of termination.")
    def lookup_terminated_postcode(postcode: str) -> dict[str, Any]:
        return run_tool(lambda: postcode_service.terminated_lookup(postcode))

    @mcp.tool(name="lookup_outcode", description="Centroid and administrative areas of an outcode (the first half of a postcode).")
    def lookup_outcode(outcode: str) -> dict[str, Any]:
        return run_tool(lambda: outcode_service.lookup(outcode))

    @mcp.tool(
        name="reverse_geocode_outcodes",
        description="Nearest outcodes to a longitude/latitude. limit up to 100, radius up to 25,000m.",
    )
    def reverse_geocode_outcodes(
        longitude: float,
        latitude: float,
        limit: int | None = None,
        radius: int | None = None,
    ) -> dict[str, Any]:
        return run_tool(
            lambda: outcode_service.reverse_geocode(Geocode(longitude=longitude, latitude=latitude, limit=limit, radius=radius))
        )

    @mcp.tool(name="nearest_outcodes", description="Outcodes nearest to a given outcode. limit up to 100, radius up to 25,000m.")
    def nearest_outcodes(outcode: str, limit: int | None = None, radius: int | None = None) -> dict[str, Any]:
        return run_tool(lambda: outcode_service.nearest(outcode, limit, radius))

    @mcp.tool(name="lookup_place", description="Look up a place by OSGB code, e.g. osgb4000000074564391.")
    def lookup_place(code: str) -> dict[str, Any]:
        return run_tool(lambda: place_service.lookup(code))

    @mcp.tool(name="query_places", description="Search places by name. limit up to 100.")
    def query_places(q: str, limit: int | None = None) -> dict[str, Any]:
        return run_tool(lambda: place_service.query(q, limit))

    @mcp.tool(name="random_place", description="Random place and its data.")
    def random_place() -> dict[str, Any]:
        return run_tool(place_service.random)
