#!/usr/bin/env python3
"""test the typer command line against a mocked web service"""

from __future__ import annotations

import json

import httpx
import pytest
import typer
from rich.console import Console
from typer.testing import CliRunner

import adapters.musicbrainz_client
import cli.main
from cli.main import app, parse_field

from .conftest import NIRVANA, search_payload

runner = CliRunner()


@pytest.fixture
def fake_server(settings, mock_transport, monkeypatch):
    """route the CLI's client through a MockTransport; returns the transport"""
    responses: dict[str, httpx.Response] = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        for prefix, response in responses.items():
            if request.url.path.startswith(prefix):
                return response
        return httpx.Response(200, json=search_payload(NIRVANA))

    transport = mock_transport(_handler)
    transport.responses = responses  # type: ignore[attr-defined]

    original = adapters.musicbrainz_client.build_async_client
    monkeypatch.setattr(
        adapters.musicbrainz_client,
        "build_async_client",
        lambda cfg: original(cfg, transport=transport),
    )
    monkeypatch.setattr(cli.main, "AppSettings", lambda: settings)
    return transport


def test_parse_field():
    assert parse_field("country = GB") == ("country", "GB")
    with pytest.raises(typer.BadParameter):
        parse_field("country")
    with pytest.raises(typer.BadParameter):
        parse_field("country=")


def test_lookup_json(fake_server):
    fake_server.responses["/ws/2/artist/"] = httpx.Response(200, json=NIRVANA)

    result = runner.invoke(app, ["lookup", NIRVANA["id"], "--inc", "aliases", "--inc", "tags", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["name"] == "Nirvana"
    request = fake_server.requests[0]
    assert request.url.path == f"/ws/2/artist/{NIRVANA['id']}"
    assert b"inc=aliases+tags" in request.url.query


def test_lookup_panel(fake_server):
    fake_server.responses["/ws/2/artist/"] = httpx.Response(200, json=NIRVANA)

    result = runner.invoke(app, ["lookup", NIRVANA["id"]])

    assert result.exit_code == 0, result.output
    assert "Nirvana" in result.stdout
    assert "grunge" in result.stdout


@pytest.mark.parametrize("width", [80, 200])
def test_search_table(fake_server, monkeypatch, width):
    """names stay readable whatever the terminal width"""
    monkeypatch.setattr(cli.main, "_console", Console(width=width))

    result = runner.invoke(app, ["search", "Nirvana", "--limit", "5", "--offset", "10"])

    assert result.exit_code == 0, result.output
    assert "Nirvana" in result.stdout
    params = fake_server.requests[0].url.params
    assert params["query"] == "Nirvana"
    assert params["limit"] == "5"
    assert params["offset"] == "10"


def test_search_structured_fields(fake_server):
    result = runner.invoke(
        app,
        ["search", "--field", "artist=Pink Floyd", "--exclude", "country=US", "--json"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["count"] == 1
    params = fake_server.requests[0].url.params
    assert params["query"] == 'artist:"Pink Floyd" NOT country:US'
    assert params["limit"] == "25"
    assert params["offset"] == "0"


def test_search_rejects_query_and_fields(fake_server):
    result = runner.invoke(app, ["search", "Nirvana", "--field", "country=US"])

    assert result.exit_code == 2
    assert not fake_server.requests


def test_search_rejects_unknown_field(fake_server):
    result = runner.invoke(app, ["search", "--field", "label=Sub Pop"])

    assert result.exit_code == 2
    assert not fake_server.requests


def test_search_without_query_fails(fake_server):
    result = runner.invoke(app, ["search"])

    assert result.exit_code == 1
    assert "Missing parameter" in result.output
    assert not fake_server.requests


def test_http_error_exits_with_message(fake_server):
    fake_server.responses["/ws/2/artist/"] = httpx.Response(404, json={"error": "Not Found"})

    result = runner.invoke(app, ["lookup", "00000000-0000-0000-0000-000000000000"])

    assert result.exit_code == 1
    assert "HTTP 404" in result.output


def test_browse_writes_output(fake_server, tmp_path):
    fake_server.responses["/ws/2/artist"] = httpx.Response(
        200, json={"artist-count": 1, "artist-offset": 0, "artists": [NIRVANA]}
    )
    out = tmp_path / "browse.json"

    result = runner.invoke(app, ["browse", "label", "xyz", "--limit", "10", "--output", str(out)])

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["count"] == 1
    assert data["artists"][0]["sort-name"] == "Nirvana"
    params = fake_server.requests[0].url.params
    assert params["label"] == "xyz"
    assert params["limit"] == "10"
