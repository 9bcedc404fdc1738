"""Testes da leitura do body JSON."""

from __future__ import annotations

import pytest

from api.routes.signature.request_body import (
    InvalidJsonError,
    is_json_content_type,
    parse_json_body,
)


@pytest.mark.parametrize(
    "content_type",
    ["application/json", "application/json; charset=utf-8", "application/vnd.api+json"],
)
def test_json_content_types(content_type: str) -> None:
    assert is_json_content_type(content_type) is True


@pytest.mark.parametrize("content_type", [None, "", "text/plain", "multipart/form-data"])
def test_non_json_content_types(content_type: str | None) -> None:
    assert is_json_content_type(content_type) is False


def test_parses_object() -> None:
    assert parse_json_body(b'{"name": "Ana"}', "application/json") == {"name": "Ana"}


@pytest.mark.parametrize(
    ("raw", "content_type"),
    [
        (b"", "application/json"),
        (b'{"name": "Ana"}', "text/plain"),
        (b"[1, 2]", "application/json"),
        (b'"texto"', "application/json"),
    ],
)
def test_empty_or_non_object_bodies_become_empty_dict(raw: bytes, content_type: str) -> None:
    assert parse_json_body(raw, content_type) == {}


@pytest.mark.parametrize("raw", [b"{", b"{'a': 1}", b"\xff\xfe"])
def test_malformed_json_raises(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError):
        parse_json_body(raw, "application/json")
