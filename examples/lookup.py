"""
Calls every postcodes.io endpoint once and prints the result.

    python examples/lookup.py

Honours the same environment as the server (POSTCODES_API_URL,
HTTP_TIMEOUT_SECONDS, LOG_LEVEL, ...).
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable

from pydantic_core import to_jsonable_python

from ukpostcodes.app.container import build_container
from ukpostcodes.app.logger import configure_logging
from ukpostcodes.core.errors import PostcodeError
from ukpostcodes.core.models import Geocode

log = logging.getLogger("ukpostcodes.examples")


def run(title: str, call: Callable[[], Any]) -> None:
    print(f"===== {title} =====")
    try:
        result = call()
    except PostcodeError as e:
        log.error("%s failed: %s %s", title, e.status, e.error)
    else:
        print(json.dumps(to_jsonable_python(result, exclude_none=True), indent=2))
    print("*" * 80 + "\n")


def main() -> None:
    c = build_container()
    configure_logging(c.settings.log_level)

    postcodes = c.postcode_service
    outcodes = c.outcode_service
    places = c.place_service

    try:
        run("Single postcode lookup", lambda: postcodes.lookup("RG122PE"))
        run("Bulk postcode lookup", lambda: postcodes.bulk_lookup(["RG122PE", "GU479DZ"]))
        run(
            "Reverse geocoding",
            lambda: postcodes.reverse_geocode(Geocode(longitude=0.629834723775309, latitude=51.7923246977375, radius=100)),
        )
        run(
            "Bulk reverse geocoding",
            lambda: postcodes.bulk_reverse_geocode(
                [
                    Geocode(longitude=-0.740895, latitude=51.417093),
                    Geocode(longitude=-0.797388, latitude=51.343969),
                ]
            ),
        )
        run("Query postcode", lambda: postcodes.query("RG122P", limit=3))
        run("Validate postcode", lambda: postcodes.validate("RG122PE"))
        run("Nearest postcode", lambda: postcodes.nearest("RG122PE", limit=5, radius=200))
        run("Autocomplete postcode", lambda: postcodes.autocomplete("RG122P", limit=5))
        run("Random postcode", lambda: postcodes.random("RG12"))
        run("Outcode lookup", lambda: outcodes.lookup("RG42"))
        run(
            "Outcode reverse geocoding",
            lambda: outcodes.reverse_geocode(Geocode(longitude=-0.740895, latitude=51.417093, radius=10000)),
        )
        run("Nearest outcode", lambda: outcodes.nearest("RG12", limit=5, radius=200))
        run("Scottish postcode lookup", lambda: postcodes.scottish_lookup("EH12 8NF"))
        run("Terminated postcode lookup", lambda: postcodes.terminated_lookup("E1W 1UU"))
        run("Place lookup", lambda: places.lookup("osgb4000000074546114"))
        run("Place query", lambda: places.query("Bracknell"))
        run("Random place", places.random)
    finally:
        c.http.close()


if __name__ == "__main__":
    main()
