"""Pytest configuration for the relay_providers test suite.

Provider round trips run against ``httpx.MockTransport`` so no network is
used. Every test starts with provider environment variables cleared, the
config file cache reset and the pooled HTTP clients closed.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator, List, Tuple

import httpx
import pytest

from relay_providers.base.http import HttpxTransport, close_all_clients
from relay_providers.config import CONFIG_FILE_ENV, reset_config_cache
from relay_providers.config.env import BASE_URL_ENV_MAP, ENV_ALIASES, ENV_MAP, MODEL_ENV_MAP


class RecordingHandler:
    """``httpx.MockTransport`` handler that records every request it answers."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def json(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    names = set(ENV_MAP.values()) | set(BASE_URL_ENV_MAP.values()) | set(MODEL_ENV_MAP.values()) | {CONFIG_FILE_ENV}
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def mock_http() -> Iterator[Callable[..., Tuple[RecordingHandler, HttpxTransport]]]:
    """Factory returning ``(recorder, transport)`` for a responder callable."""
    clients: List[httpx.Client] = []

    def _make(responder: Callable[[httpx.Request], httpx.Response]) -> Tuple[RecordingHandler, HttpxTransport]:
        recorder = RecordingHandler(responder)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return recorder, HttpxTransport(client=client)

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def relay_log_records() -> Iterator[List[dict]]:
    """Capture events emitted on the ``relay`` logger as parsed dicts."""
    records: List[dict] = []

    class _Collector(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                records.append(json.loads(record.getMessage()))
            except ValueError:
                records.append({"msg": record.getMessage()})

    from relay_providers.base.logging import get_logger

    logger = get_logger("relay")
    handler = _Collector(level=logging.DEBUG)
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
