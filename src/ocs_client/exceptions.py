"""Exception hierarchy for the ocs_client library."""

from __future__ import annotations


class OcsError(Exception):
    """Base exception for all ocs_client errors."""

    pass


class InvalidArgumentError(OcsError, ValueError):
    """Raised when an argument is rejected before any request is sent."""

    pass


class TransportError(OcsError):
    """Raised when the HTTP round trip failed or returned unusable content.

    Covers network failures, empty bodies and bodies that carry no
    recognizable OCS envelope.
    """

    def __init__(
        self,
        message: str,
        http_status_code: int | None = None,
        response_content: str | None = None,
        inner_exception: BaseException | None = None,
    ) -> None:
        super().__init__(self.full_message(message, http_status_code))
        self.http_status_code = http_status_code
        self.response_content = response_content
        self.inner_exception = inner_exception

    @staticmethod
    def full_message(message: str, http_status_code: int | None) -> str:
        if http_status_code:
            return f"HTTP-Error: {http_status_code} {message}"
        return message


class ProtocolError(OcsError):
    """Raised when the OCS envelope reports a status code other than 100.

    Callers branch on ``ocs_status_code`` for server-reported business
    failures such as "share not found" or "user already exists".
    """

    def __init__(
        self,
        message: str | None,
        ocs_status_code: int = 0,
        ocs_status_text: str | None = None,
        http_status_code: int | None = None,
    ) -> None:
        super().__init__(
            self.full_message(message, ocs_status_code, ocs_status_text, http_status_code)
        )
        self.ocs_message = message
        self.ocs_status_code = ocs_status_code
        self.ocs_status_text = ocs_status_text
        self.http_status_code = http_status_code

    @staticmethod
    def full_message(
        message: str | None,
        ocs_status_code: int,
        ocs_status_text: str | None,
        http_status_code: int | None,
    ) -> str:
        message = message or ""
        if ocs_status_code and ocs_status_text:
            text = (
                f"OCS-StatusCode: {ocs_status_code} ({ocs_status_text}), "
                f"HTTP-StatusCode: {http_status_code or 0}"
            )
            if message:
                text += f", Message: {message}"
            return text
        if http_status_code:
            return f"HTTP-Error: {http_status_code} {message}"
        return message


class DavError(ProtocolError):
    """Raised when a WebDAV operation fails.

    The OCS fields stay empty: this is a DAV/transport failure, not an OCS
    business-logic failure.
    """

    def __init__(self, description: str | None, http_status_code: int | None = None) -> None:
        super().__init__(description, 0, None, http_status_code or None)


class ShareNotFoundError(OcsError, LookupError):
    """Raised when a share id resolves to no share."""

    def __init__(self, share_id: int) -> None:
        super().__init__(f"Share not found: {share_id}")
        self.share_id = share_id


class ShareIdCollisionError(OcsError, RuntimeError):
    """Raised when a share id resolves to more than one share.

    Share ids are unique on the server, so this indicates corrupted server
    data or an id collision.
    """

    def __init__(self, share_id: int, count: int) -> None:
        super().__init__(f"Share id {share_id} matched {count} shares, expected exactly one")
        self.share_id = share_id
        self.count = count
