from __future__ import annotations

from typing import Sequence

from ukpostcodes.core.models import (
    BulkGeocodeResult,
    BulkPostcodeResult,
    Geocode,
    GeocodeBatch,
    Postcode,
    PostcodeBatch,
    ScottishPostcode,
    TerminatedPostcode,
)
from ukpostcodes.core.text import build_params, join_filters, path_segment
from ukpostcodes.core.validation import MAX_POSTCODE_RADIUS, check_limit, check_radius
from ukpostcodes.infra.http import HttpClient


class PostcodeService:
    def __init__(self, *, http: HttpClient) -> None:
        self._http = http

    def lookup(self, postcode: str, *, timeout: float | None = None) -> Postcode:
        """
        Single postcode entity for a given postcode (case and space insensitive).
        """
        return self._http.fetch(
            "GET", f"postcodes/{path_segment(postcode)}", Postcode, timeout=timeout
        )

    def bulk_lookup(
        self,
        postcodes: PostcodeBatch | Sequence[str],
        filters: Sequence[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> list[BulkPostcodeResult]:
        """
        Look up to 100 postcodes in one request.

        Args:
            postcodes: batch or plain list of postcode strings
            filters: attribute whitelist, e.g. ["postcode", "longitude", "latitude"]

        Returns:
            One {query, result} pair per submitted postcode, in order.
            `result` is None for postcodes upstream does not know.
        """
        batch = postcodes if isinstance(postcodes, PostcodeBatch) else PostcodeBatch(postcodes=list(postcodes))
        batch.validate_size()

        return self._http.fetch(
            "POST",
            "postcodes",
            list[BulkPostcodeResult],
            params=build_params(("filter", join_filters(filters))),
            body=batch.to_json(),
            timeout=timeout,
        )

    def reverse_geocode(self, geocode: Geocode, *, timeout: float | None = None) -> list[Postcode]:
        """
        Nearest postcodes for a longitude/latitude.

        limit defaults to 10 upstream, radius to 100m. widesearch widens the
        search to 20km but returns at most 10 postcodes.
        """
        geocode.validate_coordinates()
        check_limit(geocode.limit)
        check_radius(geocode.radius, MAX_POSTCODE_RADIUS)

        params = build_params(
            ("lon", geocode.longitude),
            ("lat", geocode.latitude),
            ("limit", geocode.limit),
            ("radius", geocode.radius),
            ("widesearch", geocode.widesearch),
        )
        found = self._http.fetch("GET", "postcodes", list[Postcode] | None, params=params, timeout=timeout)
        return found or []

    def bulk_reverse_geocode(
        self,
        geocodes: GeocodeBatch | Sequence[Geocode],
        filters: Sequence[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> list[BulkGeocodeResult]:
        """Reverse geocode up to 100 coordinates in one request."""
        batch = geocodes if isinstance(geocodes, GeocodeBatch) else GeocodeBatch(geolocations=list(geocodes))
        batch.validate_size()

        return self._http.fetch(
            "POST",
            "postcodes",
            list[BulkGeocodeResult],
            params=build_params(("filter", join_filters(filters))),
            body=batch.to_json(),
            timeout=timeout,
        )

    def query(self, q: str, limit: int | None = None, *, timeout: float | None = None) -> list[Postcode]:
        """
        Prefix search over postcodes, sorted, case insensitive.
        Returns up to `limit` (default 10, at most 100) postcodes.
        """
        check_limit(limit)
        found = self._http.fetch(
            "GET",
            "postcodes",
            list[Postcode] | None,
            params=build_params(("q", q), ("limit", limit)),
            timeout=timeout,
        )
        return found or []

    def validate(self, postcode: str, *, timeout: float | None = None) -> bool:
        return self._http.fetch(
            "GET", f"postcodes/{path_segment(postcode)}/validate", bool, timeout=timeout
        )

    def nearest(
        self,
        postcode: str,
        limit: int | None = None,
        radius: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Postcode]:
        check_limit(limit)
        check_radius(radius, MAX_POSTCODE_RADIUS)
        found = self._http.fetch(
            "GET",
            f"postcodes/{path_segment(postcode)}/nearest",
            list[Postcode] | None,
            params=build_params(("limit", limit), ("radius", radius)),
            timeout=timeout,
        )
        return found or []

    def autocomplete(self, postcode: str, limit: int | None = None, *, timeout: float | None = None) -> list[str]:
        check_limit(limit)
        found = self._http.fetch(
            "GET",
            f"postcodes/{path_segment(postcode)}/autocomplete",
            list[str] | None,
            params=build_params(("limit", limit)),
            timeout=timeout,
        )
        return found or []

    def random(self, outcode: str | None = None, *, timeout: float | None = None) -> Postcode | None:
        """
        Random postcode, optionally restricted to one outcode.
        None when the outcode has no postcodes.
        """
        return self._http.fetch(
            "GET",
            "random/postcodes",
            Postcode | None,
            params=build_params(("outcode", outcode)),
            timeout=timeout,
        )

    def scottish_lookup(self, postcode: str, *, timeout: float | None = None) -> ScottishPostcode:
        """Scottish Postcode Directory data (currently the Scottish Parliamentary Constituency)."""
        return self._http.fetch(
            "GET", f"scotland/postcodes/{path_segment(postcode)}", ScottishPostcode, timeout=timeout
        )

    def terminated_lookup(self, postcode: str, *, timeout: float | None = None) -> TerminatedPostcode:
        """Postcode, year and month of termination."""
        return self._http.fetch(
            "GET", f"terminated_postcodes/{path_segment(postcode)}", TerminatedPostcode, timeout=timeout
        )
