from __future__ import annotations

from dataclasses import dataclass

from ukpostcodes.app.settings import Settings, get_settings
from ukpostcodes.infra.http import HttpClient
from ukpostcodes.services.outcode_service import OutcodeService
from ukpostcodes.services.place_service import PlaceService
from ukpostcodes.services.postcode_service import PostcodeService


@dataclass(frozen=True)
class Container:
    settings: Settings
    http: HttpClient
    postcode_service: PostcodeService
    outcode_service: OutcodeService
    place_service: PlaceService


def build_container(settings: Settings | None = None, http: HttpClient | None = None) -> Container:
    settings = settings or get_settings()

    if http is None:
        http = HttpClient(
            base_url=settings.api_url,
            timeout_seconds=settings.http_timeout_seconds,
            user_agent=settings.http_user_agent,
        )

    return Container(
        settings=settings,
        http=http,
        postcode_service=PostcodeService(http=http),
        outcode_service=OutcodeService(http=http),
        place_service=PlaceService(http=http),
    )
