from __future__ import annotations

from ukpostcodes.core.models import Place
from ukpostcodes.core.text import build_params, path_segment
from ukpostcodes.core.validation import check_limit
from ukpostcodes.infra.http import HttpClient


class PlaceService:
    def __init__(self, *, http: HttpClient) -> None:
        self._http = http

    def lookup(self, code: str, *, timeout: float | None = None) -> Place:
        """
        Place by OSGB code, e.g. "osgb4000000074564391".
        """
        return self._http.fetch("GET", f"places/{path_segment(code)}", Place, timeout=timeout)

    def query(self, q: str, limit: int | None = None, *, timeout: float | None = None) -> list[Place]:
        """
        Places matching a name.

        Args:
            q: place name
            limit: max matches (default 10, at most 100)
        """
        check_limit(limit)
        found = self._http.fetch(
            "GET",
            "places",
            list[Place] | None,
            params=build_params(("q", q), ("limit", limit)),
            timeout=timeout,
        )
        return found or []

    def random(self, *, timeout: float | None = None) -> Place:
        return self._http.fetch("GET", "random/places", Place, timeout=timeout)
