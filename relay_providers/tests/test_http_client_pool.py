"""Unit tests for shared httpx client pool.

Covers:
- Same purpose returns the same instance.
- Different purpose yields different instances with their own timeouts.
- close_all_clients empties the pool.
"""
from __future__ import annotations

from relay_providers.base.http import close_all_clients, get_httpx_client
from relay_providers.base.timeouts import get_timeout_config


def setup_function(_):
    # Ensure a clean slate for each test
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_purpose_returns_same_instance():
    c1 = get_httpx_client("request")
    c2 = get_httpx_client("request")
    assert c1 is c2, "Expected pooled client instances to be identical for same purpose"  # nosec B101


def test_different_purpose_returns_different_instances():
    c1 = get_httpx_client("request")
    c2 = get_httpx_client("stream")
    assert c1 is not c2, "Different purposes should not share the same client instance"  # nosec B101
    cfg = get_timeout_config()
    assert c2.timeout.read == cfg.httpx_timeout(stream=True).read  # nosec B101


def test_close_all_clients_resets_pool():
    c1 = get_httpx_client("request")
    close_all_clients()
    assert c1.is_closed  # nosec B101
    assert get_httpx_client("request") is not c1  # nosec B101
