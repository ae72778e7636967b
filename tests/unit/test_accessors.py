from __future__ import annotations

import json

import httpx

from swagger_client.response import Response


def _response(body: bytes = b"", headers: dict[str, str] | None = None, status: int = 200) -> Response:
    return Response(httpx.Response(status, headers=headers or {}, content=body))


def test_basic_accessors() -> None:
    response = _response(b'{"ok":true}', {"Content-Type": "application/json"}, status=201)

    assert response.code == 201
    assert response.status_message == "Created"
    assert response.body == '{"ok":true}'


def test_headers_are_flattened_to_plain_dict() -> None:
    raw = httpx.Response(200, headers=[("X-Trace", "a"), ("X-Trace", "b"), ("Content-Type", "application/json")])
    headers = Response(raw).headers

    assert isinstance(headers, dict)
    assert headers["content-type"] == "application/json"
    assert headers["x-trace"] == "a, b"


def test_format_predicates() -> None:
    assert _response(headers={"Content-Type": "application/JSON"}).format == "json"
    assert _response(headers={"Content-Type": "application/json; charset=utf-8"}).is_json
    assert _response(headers={"Content-Type": "text/xml"}).is_xml
    assert not _response(headers={"Content-Type": "text/plain"}).is_json
    assert _response().format is None


def test_pretty_body_round_trips() -> None:
    body = b'{"name":"doggie","photoUrls":["a","b"],"tags":[{"id":1}]}'
    pretty = _response(body, {"Content-Type": "application/json"}).pretty_body

    assert pretty is not None
    assert "\n" not in pretty
    assert "<br/>" in pretty
    assert json.loads(pretty.replace("<br/>", "")) == json.loads(body)


def test_pretty_body_is_none_for_blank_or_non_json() -> None:
    assert _response(b"", {"Content-Type": "application/json"}).pretty_body is None
    assert _response(b"<pet/>", {"Content-Type": "application/xml"}).pretty_body is None


def test_pretty_headers_is_always_available() -> None:
    response = _response(headers={"X-Rate-Limit": "10"})
    pretty = response.pretty_headers

    assert json.loads(pretty.replace("<br/>", "")) == response.headers
    assert '"x-rate-limit": "10"' in pretty
