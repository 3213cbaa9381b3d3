"""httpx-backed HTTP collaborator for OCS API calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ocs_client.constants import OCS_REQUEST_HEADERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResult:
    """Outcome of one HTTP round trip.

    A network failure leaves ``content`` empty and captures the exception
    and/or a message instead of raising, so the status checker decides how
    to report it.
    """

    status_code: int | None
    content: str | None
    error: BaseException | None = None
    error_message: str | None = None

    @property
    def is_successful(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class OcsTransport:
    """Sends OCS requests with basic auth, ``format=xml`` and OCS headers."""

    def __init__(
        self,
        base_url: str,
        user_id: str,
        password: str,
        *,
        timeout: float | None = 30.0,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            auth=httpx.BasicAuth(user_id, password),
            headers=OCS_REQUEST_HEADERS,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> HttpResult:
        """Send a request to ``path`` below the OCS base URL.

        Args:
            method: HTTP method
            path: Resource path relative to the OCS root (already URL-encoded)
            params: Query parameters
            data: Form-encoded body parameters

        Returns:
            HttpResult with the status code and body text
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        query = {"format": "xml"}
        if params:
            query.update(params)
        logger.debug(f"OCS request: {method} {url}")
        try:
            response = self._client.request(method, url, params=query, data=data or None)
        except httpx.HTTPError as e:
            logger.debug(f"OCS request failed: {method} {url}: {e}")
            return HttpResult(status_code=None, content=None, error=e, error_message=str(e))
        return HttpResult(
            status_code=response.status_code,
            content=response.text,
            error_message=None if response.text else response.reason_phrase,
        )

    def close(self) -> None:
        self._client.close()
