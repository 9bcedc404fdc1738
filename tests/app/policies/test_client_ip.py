"""Testes da resolução de IP do cliente atrás de proxy."""

from __future__ import annotations

from app.policies import resolve_client_ip
from app.policies.client_ip import UNKNOWN_CLIENT


def test_without_forwarded_header_uses_peer() -> None:
    assert resolve_client_ip(None, "10.0.0.5", 1) == "10.0.0.5"


def test_one_trusted_hop_uses_rightmost_forwarded_entry() -> None:
    assert resolve_client_ip("1.1.1.1, 203.0.113.7", "10.0.0.5", 1) == "203.0.113.7"


def test_spoofed_leftmost_entries_are_ignored() -> None:
    assert resolve_client_ip("6.6.6.6, 198.51.100.2", "10.0.0.5", 1) == "198.51.100.2"


def test_two_trusted_hops() -> None:
    assert resolve_client_ip("198.51.100.2, 10.1.1.1", "10.0.0.5", 2) == "198.51.100.2"


def test_more_hops_than_entries_returns_leftmost() -> None:
    assert resolve_client_ip("198.51.100.2", "10.0.0.5", 5) == "198.51.100.2"


def test_zero_hops_ignores_header() -> None:
    assert resolve_client_ip("198.51.100.2", "10.0.0.5", 0) == "10.0.0.5"


def test_missing_peer() -> None:
    assert resolve_client_ip(None, None, 1) == UNKNOWN_CLIENT
    assert resolve_client_ip(" , ", None, 1) == UNKNOWN_CLIENT
