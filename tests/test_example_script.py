from __future__ import annotations

import importlib.util
from pathlib import Path

from ukpostcodes.app.container import build_container
from ukpostcodes.app.settings import get_settings

EXAMPLE = Path(__file__).resolve().parent.parent / "examples" / "lookup.py"


def _load_example():
    spec = importlib.util.spec_from_file_location("ukpostcodes_example_lookup", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_example_calls_every_endpoint_once(monkeypatch, capsys, http, upstream):
    example = _load_example()
    monkeypatch.setattr(example, "build_container", lambda: build_container(settings=get_settings(), http=http))
    upstream.reply({"status": 200, "result": None})

    example.main()

    out = capsys.readouterr().out
    assert len(upstream.requests) == 17
    assert out.count("=====") == 2 * 17
    assert "===== Random place =====" in out


def test_example_reports_errors_and_keeps_going(monkeypatch, http, upstream):
    example = _load_example()
    monkeypatch.setattr(example, "build_container", lambda: build_container(settings=get_settings(), http=http))
    upstream.reply({"status": 404, "error": "Postcode not found"}, status=404)

    example.main()

    assert len(upstream.requests) == 17
