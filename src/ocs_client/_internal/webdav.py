"""httpx-backed WebDAV collaborator."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from typing import IO

import httpx
from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

DAV_NS = "{DAV:}"

PROPFIND_BODY = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<d:propfind xmlns:d="DAV:"><d:prop>'
    "<d:displayname/><d:getcontenttype/><d:getetag/><d:getlastmodified/>"
    "<d:creationdate/><d:getcontentlength/><d:resourcetype/>"
    "</d:prop></d:propfind>"
)


@dataclass(frozen=True)
class DavResource:
    """One ``<d:response>`` entry of a PROPFIND multistatus body."""

    uri: str
    is_collection: bool = False
    content_type: str | None = None
    creation_date: datetime | None = None
    last_modified_date: datetime | None = None
    etag: str | None = None
    display_name: str | None = None
    content_length: int | None = None


@dataclass(frozen=True)
class DavResult:
    """Outcome of one WebDAV operation."""

    is_successful: bool
    status_code: int | None
    description: str
    resources: list[DavResource] = field(default_factory=list)
    content: bytes | None = None


def _parse_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        logger.debug(f"Ignoring unparseable DAV date: {value!r}")
        return None


def _prop_text(prop: ET.Element, name: str) -> str | None:
    node = prop.find(f"{DAV_NS}{name}")
    if node is None:
        return None
    return node.text or ""


def parse_multistatus(content: bytes) -> list[DavResource]:
    """Parse a ``207 Multi-Status`` PROPFIND body into resources.

    Only properties from a ``200`` propstat are read; properties the server
    could not provide are reported in a separate ``404`` propstat.
    """
    root = ET.fromstring(content)
    resources: list[DavResource] = []
    for response in root.findall(f"{DAV_NS}response"):
        href = response.findtext(f"{DAV_NS}href")
        if not href:
            continue
        props: dict[str, str | None] = {}
        is_collection = False
        for propstat in response.findall(f"{DAV_NS}propstat"):
            status = propstat.findtext(f"{DAV_NS}status")
            if status and " 200 " not in f"{status} ":
                continue
            prop = propstat.find(f"{DAV_NS}prop")
            if prop is None:
                continue
            for name in (
                "displayname",
                "getcontenttype",
                "getetag",
                "getlastmodified",
                "creationdate",
                "getcontentlength",
            ):
                value = _prop_text(prop, name)
                if value is not None:
                    props[name] = value
            resource_type = prop.find(f"{DAV_NS}resourcetype")
            if resource_type is not None and resource_type.find(f"{DAV_NS}collection") is not None:
                is_collection = True

        length = props.get("getcontentlength")
        resources.append(
            DavResource(
                uri=href,
                is_collection=is_collection,
                content_type=props.get("getcontenttype") or None,
                creation_date=_parse_date(props.get("creationdate")),
                last_modified_date=_parse_date(props.get("getlastmodified")),
                etag=props.get("getetag"),
                display_name=props.get("displayname"),
                content_length=int(length) if length and length.isdigit() else None,
            )
        )
    return resources


class WebDavClient:
    """Performs WebDAV operations against absolute URIs with basic auth."""

    def __init__(
        self,
        user_id: str,
        password: str,
        *,
        timeout: float | None = 30.0,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            auth=httpx.BasicAuth(user_id, password),
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    def _send(
        self,
        method: str,
        uri: str,
        *,
        headers: dict[str, str] | None = None,
        content: bytes | str | None = None,
    ) -> httpx.Response | DavResult:
        logger.debug(f"DAV request: {method} {uri}")
        try:
            return self._client.request(method, uri, headers=headers, content=content)
        except httpx.HTTPError as e:
            logger.debug(f"DAV request failed: {method} {uri}: {e}")
            return DavResult(is_successful=False, status_code=None, description=str(e))

    @staticmethod
    def _result(response: httpx.Response, **extra: object) -> DavResult:
        return DavResult(
            is_successful=response.is_success,
            status_code=response.status_code,
            description=response.reason_phrase,
            **extra,  # type: ignore[arg-type]
        )

    def propfind(self, uri: str, depth: int = 1) -> DavResult:
        """List properties of ``uri`` (and its children for ``depth=1``)."""
        response = self._send(
            "PROPFIND",
            uri,
            headers={"Depth": str(depth), "Content-Type": "application/xml; charset=utf-8"},
            content=PROPFIND_BODY,
        )
        if isinstance(response, DavResult):
            return response
        if not response.is_success:
            return self._result(response)
        try:
            resources = parse_multistatus(response.content)
        except ET.ParseError as e:
            return DavResult(
                is_successful=False,
                status_code=response.status_code,
                description=f"Invalid PROPFIND response: {e}",
            )
        return self._result(response, resources=resources)

    def get_raw_file(self, uri: str) -> DavResult:
        response = self._send("GET", uri)
        if isinstance(response, DavResult):
            return response
        return self._result(response, content=response.content if response.is_success else None)

    def put_file(
        self, uri: str, data: bytes | IO[bytes], content_type: str | None = None
    ) -> DavResult:
        headers = {"Content-Type": content_type} if content_type else None
        body = data if isinstance(data, bytes) else data.read()
        response = self._send("PUT", uri, headers=headers, content=body)
        if isinstance(response, DavResult):
            return response
        return self._result(response)

    def mkcol(self, uri: str) -> DavResult:
        response = self._send("MKCOL", uri)
        if isinstance(response, DavResult):
            return response
        return self._result(response)

    def delete(self, uri: str) -> DavResult:
        response = self._send("DELETE", uri)
        if isinstance(response, DavResult):
            return response
        return self._result(response)

    def copy(self, source_uri: str, destination_uri: str) -> DavResult:
        return self._transfer("COPY", source_uri, destination_uri)

    def move(self, source_uri: str, destination_uri: str) -> DavResult:
        return self._transfer("MOVE", source_uri, destination_uri)

    def _transfer(self, method: str, source_uri: str, destination_uri: str) -> DavResult:
        response = self._send(
            method,
            source_uri,
            headers={"Destination": destination_uri, "Overwrite": "T"},
        )
        if isinstance(response, DavResult):
            return response
        return self._result(response)

    def close(self) -> None:
        self._client.close()
