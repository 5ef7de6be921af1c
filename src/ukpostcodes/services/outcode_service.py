from __future__ import annotations

from ukpostcodes.core.models import Geocode, Outcode
from ukpostcodes.core.text import build_params, path_segment
from ukpostcodes.core.validation import MAX_OUTCODE_RADIUS, check_limit, check_radius
from ukpostcodes.infra.http import HttpClient


class OutcodeService:
    """Outward code endpoints. Radius defaults to 5,000m upstream and tops out at 25,000m."""

    def __init__(self, *, http: HttpClient) -> None:
        self._http = http

    def lookup(self, outcode: str, *, timeout: float | None = None) -> Outcode:
        """Centroid and administrative areas of an outward code (first half of a postcode)."""
        return self._http.fetch("GET", f"outcodes/{path_segment(outcode)}", Outcode, timeout=timeout)

    def reverse_geocode(self, geocode: Geocode, *, timeout: float | None = None) -> list[Outcode]:
        geocode.validate_coordinates()
        check_limit(geocode.limit)
        check_radius(geocode.radius, MAX_OUTCODE_RADIUS)

        params = build_params(
            ("lon", geocode.longitude),
            ("lat", geocode.latitude),
            ("limit", geocode.limit),
            ("radius", geocode.radius),
        )
        found = self._http.fetch("GET", "outcodes", list[Outcode] | None, params=params, timeout=timeout)
        return found or []

    def nearest(
        self,
        outcode: str,
        limit: int | None = None,
        radius: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Outcode]:
        check_limit(limit)
        check_radius(radius, MAX_OUTCODE_RADIUS)
        found = self._http.fetch(
            "GET",
            f"outcodes/{path_segment(outcode)}/nearest",
            list[Outcode] | None,
            params=build_params(("limit", limit), ("radius", radius)),
            timeout=timeout,
        )
        return found or []
