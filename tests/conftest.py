from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from typeform import Typeform

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

BASE_URL = "https://api.typeform.com"
FORM_ID = "abc123"
TOKEN = "tfp_secret"


def load_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def responses_body() -> bytes:
    return load_fixture("responses.json")


@pytest.fixture
def responses_after_body() -> bytes:
    return load_fixture("responses_after.json")


@pytest.fixture
def responses_payload(responses_body: bytes) -> dict[str, Any]:
    return json.loads(responses_body)


@pytest.fixture
def recorded() -> list[httpx.Request]:
    """Requests seen by the fake Typeform server, in order."""
    return []


@pytest.fixture
def make_client(recorded: list[httpx.Request]) -> Callable[..., Typeform]:
    """Build a client whose requests are answered by a fake server.

    `handler` receives the httpx.Request and returns an httpx.Response.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> Typeform:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return handler(request)

        kwargs.setdefault("base_url", BASE_URL)
        return Typeform(FORM_ID, TOKEN, transport=httpx.MockTransport(_record), **kwargs)

    return _make
