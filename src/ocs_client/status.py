"""HTTP/OCS and WebDAV status checks, run before any business data is parsed."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Protocol

from ocs_client.constants import OCS_SUCCESS_STATUS_CODE
from ocs_client.exceptions import DavError, ProtocolError, TransportError
from ocs_client.parsing import child_text, parse_document


class HttpResponseLike(Protocol):
    """What the OCS check needs from an HTTP round trip."""

    status_code: int | None
    content: str | None
    error: BaseException | None
    error_message: str | None


class DavResponseLike(Protocol):
    """What the DAV check needs from a WebDAV operation."""

    is_successful: bool
    status_code: int | None
    description: str


def check_ocs_status(response: HttpResponseLike) -> ET.Element:
    """Validate an OCS response and return its parsed root element.

    Raises:
        TransportError: If the request failed, the body is empty, or the
            body has no recognizable ``<meta>/<statuscode>``
        ProtocolError: If the OCS status code is not 100
    """
    content = response.content
    if not content:
        if response.error is not None:
            raise TransportError(
                "REST request failed",
                response.status_code,
                content,
                inner_exception=response.error,
            ) from response.error
        if response.error_message is not None:
            raise TransportError(response.error_message, response.status_code, content)
        raise TransportError("Empty response content", response.status_code, content)

    try:
        root = parse_document(content)
    except TransportError as e:
        raise TransportError(
            "Empty OCS status or invalid response data",
            response.status_code,
            content,
            inner_exception=e.inner_exception,
        ) from e

    meta = root.find("meta")
    status_code = child_text(meta, "statuscode")
    if status_code is None or not status_code.strip().isdigit():
        raise TransportError(
            "Empty OCS status or invalid response data", response.status_code, content
        )
    if int(status_code) != OCS_SUCCESS_STATUS_CODE:
        raise ProtocolError(
            child_text(meta, "message"),
            int(status_code),
            child_text(meta, "status"),
            response.status_code,
        )
    return root


def check_dav_status(result: DavResponseLike) -> None:
    """Raise DavError if a WebDAV operation did not succeed."""
    if not result.is_successful:
        raise DavError(result.description, result.status_code or None)
