"""Testes do gate de token compartilhado."""

from __future__ import annotations

import pytest

from app.policies import is_token_valid


@pytest.mark.parametrize("provided", [None, "", "anything"])
def test_gate_open_without_configured_token(provided: str | None) -> None:
    assert is_token_valid(provided, "") is True
    assert is_token_valid(provided, None) is True


def test_matching_token_passes() -> None:
    assert is_token_valid("s3cr3t", "s3cr3t") is True


@pytest.mark.parametrize("provided", [None, "", "s3cr3", "S3CR3T", "s3cr3t "])
def test_mismatch_rejected(provided: str | None) -> None:
    assert is_token_valid(provided, "s3cr3t") is False


def test_non_ascii_tokens_compared_safely() -> None:
    assert is_token_valid("contraseña", "contraseña") is True
    assert is_token_valid("contrasena", "contraseña") is False
