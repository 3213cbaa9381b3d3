"""Shared test helpers for ocs_client tests."""

from __future__ import annotations

from ocs_client._internal.transport import HttpResult
from ocs_client._internal.webdav import DavResource, DavResult

DAV_ROOT = "/remote.php/webdav"


def ocs_envelope(
    data: str = "",
    status_code: int = 100,
    status: str = "ok",
    message: str = "",
) -> str:
    """Build an OCS XML response body."""
    return (
        '<?xml version="1.0"?>'
        "<ocs><meta>"
        f"<status>{status}</status>"
        f"<statuscode>{status_code}</statuscode>"
        f"<message>{message}</message>"
        f"</meta><data>{data}</data></ocs>"
    )


def ocs_ok(data: str = "", http_status_code: int = 200) -> HttpResult:
    """Build a successful OCS HttpResult."""
    return HttpResult(status_code=http_status_code, content=ocs_envelope(data))


def ocs_failure(status_code: int, message: str = "", status: str = "failure") -> HttpResult:
    """Build an OCS HttpResult reporting a business failure."""
    return HttpResult(
        status_code=200,
        content=ocs_envelope(status_code=status_code, status=status, message=message),
    )


def elements(*values: str) -> str:
    return "".join(f"<element>{value}</element>" for value in values)


def share_element(
    share_id: int,
    share_type: int,
    path: str = "/report.pdf",
    permissions: int = 1,
    **extra: str,
) -> str:
    """Build a share ``<element>`` with the given fields."""
    fields = "".join(f"<{name}>{value}</{name}>" for name, value in extra.items())
    return (
        "<element>"
        f"<id>{share_id}</id><share_type>{share_type}</share_type>"
        f"<file_target>{path}</file_target><permissions>{permissions}</permissions>"
        f"{fields}</element>"
    )


def dav_ok(*resources: DavResource, status_code: int = 207) -> DavResult:
    return DavResult(
        is_successful=True,
        status_code=status_code,
        description="Multi-Status",
        resources=list(resources),
    )


def dav_failure(status_code: int, description: str) -> DavResult:
    return DavResult(is_successful=False, status_code=status_code, description=description)


def dav_file(path: str, size: int = 0, content_type: str = "application/pdf") -> DavResource:
    return DavResource(
        uri=f"{DAV_ROOT}{path}",
        content_type=content_type,
        content_length=size,
        etag='"abc"',
    )


def dav_directory(path: str) -> DavResource:
    return DavResource(uri=f"{DAV_ROOT}{path}", is_collection=True)
