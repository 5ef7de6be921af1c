from __future__ import annotations

import os

import pytest
from fastmcp import FastMCP

from ukpostcodes.app.container import build_container
from ukpostcodes.app.settings import get_settings
from ukpostcodes.core.errors import UpstreamError, ValidationError
from ukpostcodes.core.models import Postcode
from ukpostcodes.tools.postcode_tools import GeocodeArgs, register_postcode_tools, run_tool

# Live tests hit api.postcodes.io; run them with POSTCODES_LIVE=1.


def _live() -> bool:
    return os.getenv("POSTCODES_LIVE") == "1"


def test_import_server():
    import ukpostcodes.server  # noqa: F401


def test_run_tool_success_drops_empty_fields():
    out = run_tool(lambda: [Postcode(postcode="OX49GE", latitude=51.8)])
    assert out == {"status": 200, "result": [{"postcode": "OX49GE", "latitude": 51.8}]}


def test_run_tool_scalar_result():
    assert run_tool(lambda: True) == {"status": 200, "result": True}


def test_run_tool_passes_none_through():
    assert run_tool(lambda: None) == {"status": 200, "result": None}


def test_run_tool_upstream_error():
    def boom():
        raise UpstreamError("Postcode not found", status=404)

    assert run_tool(boom) == {"status": 404, "error": "Postcode not found"}


def test_run_tool_validation_error():
    def boom():
        raise ValidationError("minimum of 1 postcode required")

    assert run_tool(boom) == {"status": 400, "error": "minimum of 1 postcode required"}


def test_geocode_args_to_geocode():
    g = GeocodeArgs(longitude=-0.74, latitude=51.41, limit=5).to_geocode()
    assert g.to_wire() == {"longitude": -0.74, "latitude": 51.41, "limit": 5}


def test_register_tools(http):
    container = build_container(settings=get_settings(), http=http)
    register_postcode_tools(FastMCP("ukpostcodes-test"), container)


def test_container_uses_settings(monkeypatch):
    monkeypatch.setenv("POSTCODES_API_URL", "https://api.postcodes.test/")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "'3.5'")

    settings = get_settings()
    c = build_container(settings=settings)
    try:
        assert settings.http_timeout_seconds == 3.5
        assert c.http.base_url == "https://api.postcodes.test"
    finally:
        c.http.close()


@pytest.mark.skipif(not _live(), reason="POSTCODES_LIVE=1 not set")
def test_live_lookup_smoke():
    c = build_container()
    pc = c.postcode_service.lookup("RG122PE")
    assert pc.postcode == "RG12 2PE"
    assert pc.latitude and pc.longitude


@pytest.mark.skipif(not _live(), reason="POSTCODES_LIVE=1 not set")
def test_live_not_found():
    c = build_container()
    with pytest.raises(UpstreamError) as exc:
        c.postcode_service.lookup("XX00XX")
    assert exc.value.status == 404
