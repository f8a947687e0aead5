"""Typeform API client for fetching form responses.

Typeform lists responses via GET /forms/{form_id}/responses and
authenticates with a personal access token sent as a bearer token.
Docs: https://www.typeform.com/developers/responses/
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any

import httpx
from dotenv import load_dotenv

from .errors import ApiError, RequestBuildError, TransportError
from .models import Responses, decode_responses

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://api.typeform.com"
RESPONSES_PATH = "/forms/{form_id}/responses"
DEFAULT_TIMEOUT = 30

# Control characters would split or corrupt the HTTP header block.
_ILLEGAL_HEADER_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


@dataclass(frozen=True)
class Typeform:
    """Read-only client for one form's responses.

    Configuration is fixed at construction. Each call opens its own
    short-lived httpx.Client, so an instance can be shared between threads.
    """

    form_id: str
    token: str = field(repr=False)
    base_url: str = field(default=DEFAULT_URL, kw_only=True)
    timeout: float = field(default=DEFAULT_TIMEOUT, kw_only=True)
    transport: httpx.BaseTransport | None = field(
        default=None, kw_only=True, repr=False, compare=False
    )

    @classmethod
    def from_env(cls, **kwargs: Any) -> Typeform:
        """Build a client from TYPEFORM_FORM_ID / TYPEFORM_TOKEN (and .env)."""
        load_dotenv()
        form_id = os.environ.get("TYPEFORM_FORM_ID")
        if not form_id:
            raise RuntimeError("TYPEFORM_FORM_ID not set in environment")
        token = os.environ.get("TYPEFORM_TOKEN")
        if not token:
            raise RuntimeError("TYPEFORM_TOKEN not set in environment")
        base_url = os.environ.get("TYPEFORM_API_URL") or DEFAULT_URL
        return cls(form_id, token, base_url=base_url, **kwargs)

    def _headers(self) -> dict[str, str]:
        if _ILLEGAL_HEADER_CHARS.search(self.token):
            raise RequestBuildError(
                "Failed to build a request: Authorization header value contains a control character"
            )
        return {"Authorization": f"Bearer {self.token}"}

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self.transport,
        )

    def responses(self) -> Responses:
        """Fetch the form's responses."""
        return self._get()

    def responses_after(self, token: str) -> Responses:
        """Fetch at most one response submitted after the one with `token`.

        Paging is left to the caller: feed `Responses.last_token` back in.
        """
        return self._get({"after": token, "page_size": 1})

    def _get(self, params: dict[str, Any] | None = None) -> Responses:
        path = RESPONSES_PATH.format(form_id=self.form_id)
        try:
            client = self._client()
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise RequestBuildError(f"Failed to build a request: {e}") from e

        with client:
            try:
                request = client.build_request("GET", path, params=params)
            except httpx.InvalidURL as e:
                raise RequestBuildError(f"Failed to build a request: {e}") from e
            logger.debug("GET %s", request.url)
            try:
                resp = client.send(request)
            except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
                raise RequestBuildError(f"Failed to build a request: {e}") from e
            except httpx.HTTPError as e:
                raise TransportError(f"Failed to send get request: {e}") from e

        logger.debug("Typeform answered %s for form %s", resp.status_code, self.form_id)
        if not resp.is_success:
            raise ApiError(resp.status_code, resp.text)

        page = decode_responses(resp.content)
        logger.debug("Decoded %d responses (total_items=%s)", len(page.items), page.total_items)
        return page
