"""Data models for the ocs_client library."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ocs_client.constants import (
    DIRECTORY_CONTENT_TYPE,
    DIRECTORY_SEPARATOR,
    Permission,
    ShareType,
    share_type_name,
)


@dataclass(frozen=True)
class OcsMeta:
    """The ``<meta>`` block of an OCS envelope."""

    status: str | None
    status_code: int | None
    message: str | None

    def __str__(self) -> str:
        text = f"Status {self.status_code} ({self.status})"
        if self.message:
            text += f", Message: {self.message}"
        return text


@dataclass(frozen=True)
class AdvancedShareProperties:
    """Optional share fields; which of them are present depends on the server.

    Nextcloud reports ``password`` for link shares (hashed), OwnCloud
    omits it entirely.
    """

    item_type: str | None = None
    item_source: str | None = None
    parent: str | None = None
    stime: str | None = None
    expiration: str | None = None
    storage: str | None = None
    mail_send: str | None = None
    owner: str | None = None
    storage_id: str | None = None
    file_source: str | None = None
    file_parent: str | None = None
    file_owner: str | None = None
    file_owner_display_name: str | None = None
    shared_with_display_name: str | None = None
    display_name_owner: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class Share:
    """A grant of access to a path.

    Used as-is for share types without type-specific fields. A share type
    missing from ShareType is kept as its plain number; user, group, link
    and remote shares are parsed into the subclasses below.
    """

    share_id: int | None
    share_type: ShareType | int
    target_path: str | None = None
    permissions: Permission | None = None
    expiration: datetime | None = None
    name: str | None = None
    note: str | None = None
    advanced_properties: AdvancedShareProperties = field(
        default_factory=AdvancedShareProperties
    )

    def __str__(self) -> str:
        permissions = self.permissions.name if self.permissions is not None else None
        return f"Share ID {self.share_id} (Permission: {permissions}) {self.target_path}"


@dataclass(frozen=True)
class PublicShare(Share):
    """A public link share."""

    url: str | None = None
    token: str | None = None


@dataclass(frozen=True)
class UserShare(Share):
    """A share with a single user."""

    shared_with: str | None = None


@dataclass(frozen=True)
class GroupShare(Share):
    """A share with a group."""

    shared_with: str | None = None


@dataclass(frozen=True)
class RemoteShare(UserShare):
    """A federated cloud share with a user on another server."""

    pass


@dataclass(frozen=True)
class Sharee:
    """A candidate share recipient returned by a sharee search."""

    share_type: ShareType | int
    share_with: str | None = None
    share_with_display_name: str | None = None
    share_with_additional_info: str | None = None
    icon: str | None = None
    label: str | None = None
    is_exact_result: bool = False

    def __str__(self) -> str:
        return (
            f"Sharee ({share_type_name(self.share_type)}): {self.label} "
            f"({self.share_with}|{self.share_with_display_name})"
        )


@dataclass(frozen=True)
class Quota:
    """Storage quota of a user, in bytes (``relative`` in percent)."""

    free: float | None = None
    used: float | None = None
    total: float | None = None
    relative: float | None = None


@dataclass(frozen=True)
class User:
    """Account attributes of a user."""

    display_name: str | None = None
    email: str | None = None
    enabled: bool | None = None
    quota: Quota | None = None


@dataclass(frozen=True)
class Config:
    """Server metadata."""

    website: str | None = None
    host: str | None = None
    ssl: bool | None = None
    contact: str | None = None
    version: str | None = None


@dataclass(frozen=True)
class AppInfo:
    """Application metadata."""

    id: str | None = None
    display_name: str | None = None
    description: str | None = None
    license: str | None = None
    author: str | None = None
    require_min: str | None = None
    shipped: bool = False
    standalone: bool = False
    default_enable: bool = False
    types: tuple[str, ...] = ()
    remote: dict[str, str] = field(default_factory=dict)
    documentation: dict[str, str] = field(default_factory=dict)
    info: dict[str, str] = field(default_factory=dict)
    public: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AppAttribute:
    """A single key-value entry of the application attribute store."""

    app: str | None = None
    key: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class ResourceInfo:
    """A file or directory on the WebDAV share.

    Build instances with :meth:`from_path` so that ``item_name`` and
    ``directory_name`` stay consistent with ``full_path``.
    """

    full_path: str
    item_name: str
    directory_name: str
    display_name: str | None = None
    size: int | None = None
    etag: str | None = None
    content_type: str | None = None
    last_modified: datetime | None = None
    created: datetime | None = None

    @classmethod
    def from_path(cls, full_path: str, **attributes: object) -> ResourceInfo:
        """Create a ResourceInfo, splitting ``full_path`` into its parts.

        Raises:
            ValueError: If the path is empty or not absolute
        """
        if not full_path:
            raise ValueError("Full path must not be empty")
        if not full_path.startswith(DIRECTORY_SEPARATOR):
            raise ValueError(
                f"Full path must start with a directory separator ('/' character): {full_path}"
            )
        if full_path == DIRECTORY_SEPARATOR:
            return cls(full_path=full_path, item_name="", directory_name="", **attributes)  # type: ignore[arg-type]

        # Collections are reported with a trailing separator
        if full_path.endswith(DIRECTORY_SEPARATOR):
            full_path = full_path[:-1]
        directory_name, _, item_name = full_path.rpartition(DIRECTORY_SEPARATOR)
        return cls(
            full_path=full_path,
            item_name=item_name,
            directory_name=directory_name,
            **attributes,  # type: ignore[arg-type]
        )

    @property
    def is_directory(self) -> bool:
        return self.content_type == DIRECTORY_CONTENT_TYPE

    def __str__(self) -> str:
        return self.full_path
