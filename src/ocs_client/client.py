"""Main OcsClient class for OwnCloud/Nextcloud OCS and WebDAV access."""

from __future__ import annotations

import datetime
import io
import logging
import os
import xml.etree.ElementTree as ET
from typing import IO, Any, cast
from urllib.parse import quote, unquote, urlsplit

from dotenv import load_dotenv

from ocs_client import parsing
from ocs_client._internal.transport import OcsTransport
from ocs_client._internal.webdav import DavResource, WebDavClient
from ocs_client.constants import (
    CLEAR_EXPIRATION,
    DAV_PATH,
    DIRECTORY_CONTENT_TYPE,
    DIRECTORY_SEPARATOR,
    EXPIRE_DATE_FORMAT,
    OCS_EMPTY_SUBADMIN_STATUS_CODE,
    OCS_PATH,
    OCS_SERVICE_CLOUD,
    OCS_SERVICE_DATA,
    OCS_SERVICE_SHARE,
    ZIP_DOWNLOAD_PATH,
    Permission,
    ShareType,
    UserAttributeKey,
    share_type_name,
    user_attribute_key_name,
)
from ocs_client.exceptions import (
    InvalidArgumentError,
    ProtocolError,
    ShareIdCollisionError,
    ShareNotFoundError,
    TransportError,
)
from ocs_client.models import (
    AppAttribute,
    AppInfo,
    Config,
    GroupShare,
    PublicShare,
    RemoteShare,
    ResourceInfo,
    Share,
    Sharee,
    User,
    UserShare,
)
from ocs_client.status import check_dav_status, check_ocs_status

logger = logging.getLogger(__name__)

Expiration = datetime.date | datetime.datetime


def _require(value: str | None, name: str) -> str:
    if not value:
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


def _require_path(value: str | None, name: str = "path") -> str:
    path = _require(value, name)
    if not path.startswith(DIRECTORY_SEPARATOR):
        raise InvalidArgumentError(
            f"{name} must start with a directory separator ('/' character): {path}"
        )
    return path


def _check_permissions(permissions: Permission | int) -> int:
    value = int(permissions)
    if value < Permission.READ or value > Permission.ALL:
        raise InvalidArgumentError(
            f"permissions must be between {int(Permission.READ)} and {int(Permission.ALL)}, got {value}"
        )
    return value


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def _format_expiration(value: Expiration) -> str:
    if value in (CLEAR_EXPIRATION, datetime.datetime.min):
        return ""
    return value.strftime(EXPIRE_DATE_FORMAT)


def _segment(value: str) -> str:
    return quote(value, safe="")


class OcsClient:
    """Client for the OCS API and WebDAV of OwnCloud/Nextcloud servers.

    Every method issues a single blocking round trip; nothing is cached or
    retried.

    Example (context manager - recommended):
        with OcsClient("https://cloud.example.com", "alice", "secret") as client:
            for item in client.list("/Documents"):
                print(item.full_path)

    Example (manual):
        client = OcsClient("https://cloud.example.com", "alice", "secret")
        share = client.create_share_with_link("/Documents/report.pdf")
        print(share.url)
        client.close()
    """

    def __init__(
        self,
        url: str,
        user_id: str,
        password: str,
        *,
        timeout: float | None = 30.0,
        verify: bool = True,
    ) -> None:
        """Initialize the client.

        Args:
            url: Server base URL, e.g. ``https://server`` or ``https://server/owncloud``
            user_id: Login name of the authorized user
            password: Password or app password
            timeout: Request timeout in seconds passed to the HTTP client
            verify: Verify TLS certificates
        """
        if not url:
            raise InvalidArgumentError("url must not be empty")
        self._url = url.rstrip("/")
        self._user_id = user_id
        self._transport = OcsTransport(
            f"{self._url}/{OCS_PATH}", user_id, password, timeout=timeout, verify=verify
        )
        self._dav = WebDavClient(user_id, password, timeout=timeout, verify=verify)

    @classmethod
    def from_env(cls, prefix: str = "OCS_", **kwargs: Any) -> OcsClient:
        """Create a client from ``<prefix>URL``, ``<prefix>USER`` and ``<prefix>PASSWORD``.

        A ``.env`` file in the working directory is loaded first.

        Raises:
            InvalidArgumentError: If a variable is missing
        """
        load_dotenv()
        names = [f"{prefix}URL", f"{prefix}USER", f"{prefix}PASSWORD"]
        values = {name: os.getenv(name) for name in names}
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise InvalidArgumentError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
        url, user_id, password = (cast(str, values[name]) for name in names)
        return cls(url, user_id, password, **kwargs)

    def __enter__(self) -> OcsClient:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._transport.close()
        self._dav.close()

    @property
    def base_url(self) -> str:
        """Server base URL, without trailing slash."""
        return self._url

    @property
    def authorized_user_id(self) -> str:
        return self._user_id

    @property
    def webdav_base_url(self) -> str:
        return f"{self._url}/{DAV_PATH}"

    # ------------------------------------------------------------------
    # URL handling
    # ------------------------------------------------------------------

    def _dav_uri(self, path: str) -> str:
        return self.webdav_base_url + quote(path, safe="/")

    def _dav_href_to_path(self, href: str) -> str:
        """Convert a DAV href (URL-encoded, below the WebDAV root) to a client path."""
        prefix = urlsplit(self._dav_uri("")).path
        href_path = urlsplit(href).path
        if not href_path.startswith(prefix):
            raise TransportError(
                f'DAV path "{href}" can\'t be converted to regular path with prefixPath="{prefix}"'
            )
        return unquote(href_path[len(prefix):]) or DIRECTORY_SEPARATOR

    def _resource_info(self, resource: DavResource) -> ResourceInfo:
        return ResourceInfo.from_path(
            self._dav_href_to_path(resource.uri),
            display_name=resource.display_name,
            size=resource.content_length,
            etag=resource.etag,
            content_type=DIRECTORY_CONTENT_TYPE if resource.is_collection else resource.content_type,
            last_modified=resource.last_modified_date,
            created=resource.creation_date,
        )

    def _ocs_request(
        self,
        method: str,
        service: str,
        action: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> ET.Element:
        """Send an OCS request and return the checked response root."""
        path = f"{service}/{action}" if service else action
        response = self._transport.request(method, path, params=params, data=data)
        return check_ocs_status(response)

    # ------------------------------------------------------------------
    # WebDAV
    # ------------------------------------------------------------------

    def list(self, path: str) -> list[ResourceInfo]:
        """List the contents of a remote directory.

        Args:
            path: Absolute remote directory path

        Returns:
            Child resources, without the directory's own entry

        Raises:
            InvalidArgumentError: If path is empty or not absolute
            DavError: If the PROPFIND fails
        """
        _require_path(path)
        result = self._dav.propfind(self._dav_uri(path), depth=1)
        check_dav_status(result)

        own_path = path.rstrip(DIRECTORY_SEPARATOR) or DIRECTORY_SEPARATOR
        resources = []
        for item in result.resources:
            info = self._resource_info(item)
            if info.full_path == own_path:
                continue
            resources.append(info)
        return resources

    def get_resource_info(self, path: str) -> ResourceInfo | None:
        """Get metadata of a single remote file or directory.

        Raises:
            InvalidArgumentError: If path is empty or not absolute
            DavError: If the PROPFIND fails
        """
        _require_path(path)
        result = self._dav.propfind(self._dav_uri(path), depth=0)
        check_dav_status(result)
        if not result.resources:
            return None
        return self._resource_info(result.resources[0])

    def download(self, path: str) -> IO[bytes]:
        """Download a remote file.

        Returns:
            Binary stream with the file contents
        """
        _require_path(path)
        result = self._dav.get_raw_file(self._dav_uri(path))
        check_dav_status(result)
        return io.BytesIO(result.content or b"")

    def upload(
        self, path: str, data: bytes | IO[bytes], content_type: str | None = None
    ) -> None:
        """Upload a file, replacing an existing one.

        Args:
            path: Absolute remote file path
            data: File contents as bytes or a binary stream
            content_type: Optional MIME type sent with the upload
        """
        _require_path(path)
        result = self._dav.put_file(self._dav_uri(path), data, content_type)
        check_dav_status(result)
        logger.info(f"Uploaded {path}")

    def exists(self, path: str) -> bool:
        """Check whether a remote file or directory exists.

        A 404 from the server means the resource does not exist; any other
        failure raises DavError.
        """
        _require_path(path)
        result = self._dav.propfind(self._dav_uri(path), depth=0)
        if result.status_code == 404:
            return False
        check_dav_status(result)
        return len(result.resources) != 0

    def create_directory(self, path: str) -> None:
        _require_path(path)
        result = self._dav.mkcol(self._dav_uri(path))
        check_dav_status(result)
        logger.info(f"Created directory: {path}")

    def delete(self, path: str) -> None:
        """Delete a remote file or directory (recursively)."""
        _require_path(path)
        result = self._dav.delete(self._dav_uri(path))
        check_dav_status(result)
        logger.info(f"Deleted {path}")

    def copy(self, source: str, destination: str) -> None:
        _require_path(source, "source")
        _require_path(destination, "destination")
        result = self._dav.copy(self._dav_uri(source), self._dav_uri(destination))
        check_dav_status(result)
        logger.info(f"Copied {source} to {destination}")

    def move(self, source: str, destination: str) -> None:
        _require_path(source, "source")
        _require_path(destination, "destination")
        result = self._dav.move(self._dav_uri(source), self._dav_uri(destination))
        check_dav_status(result)
        logger.info(f"Moved {source} to {destination}")

    def download_directory_as_zip(self, path: str) -> IO[bytes]:
        """Download a remote directory as a zip archive.

        Uses the server's files app endpoint, which is not part of WebDAV.
        """
        _require_path(path)
        uri = f"{self._url}{ZIP_DOWNLOAD_PATH}?dir={quote(path, safe='')}"
        result = self._dav.get_raw_file(uri)
        check_dav_status(result)
        return io.BytesIO(result.content or b"")

    # ------------------------------------------------------------------
    # Pending federated shares
    # ------------------------------------------------------------------

    def list_open_remote_shares(self) -> list[dict[str, str]]:
        """List federated shares offered to the user and not yet accepted."""
        root = self._ocs_request("GET", OCS_SERVICE_SHARE, "remote_shares/pending")
        return parsing.get_element_dicts(root)

    def accept_remote_share(self, share_id: int) -> None:
        self._ocs_request("POST", OCS_SERVICE_SHARE, f"remote_shares/pending/{int(share_id)}")
        logger.info(f"Accepted remote share {share_id}")

    def decline_remote_share(self, share_id: int) -> None:
        self._ocs_request("DELETE", OCS_SERVICE_SHARE, f"remote_shares/pending/{int(share_id)}")
        logger.info(f"Declined remote share {share_id}")

    # ------------------------------------------------------------------
    # Shares
    # ------------------------------------------------------------------

    def create_share(
        self,
        path: str,
        share_type: ShareType,
        share_with: str | None = None,
        permissions: Permission | int = Permission.READ,
        public_upload: bool | None = None,
        password: str | None = None,
        expiration: Expiration | None = None,
        name: str | None = None,
        note: str | None = None,
    ) -> Share:
        """Share a file or directory.

        Args:
            path: Absolute path of the shared file or directory
            share_type: Kind of recipient
            share_with: Recipient (user, group, federated id ...); not used for links
            permissions: Granted permissions, between READ and ALL
            public_upload: Allow uploads into a shared folder (links only)
            password: Password protecting a link
            expiration: Expiration date
            name: Display name of the share
            note: Note for the recipient

        Returns:
            The created share, as the variant matching the returned share type

        Raises:
            InvalidArgumentError: If path, share_with or permissions are invalid
            ProtocolError: If the server rejects the share
        """
        _require(path, "path")
        share_type = ShareType(share_type)
        if share_type != ShareType.LINK and not share_with:
            raise InvalidArgumentError("share_with must not be empty unless sharing by link")
        data: dict[str, Any] = {
            "shareType": int(share_type),
            "path": path,
            "permissions": _check_permissions(permissions),
        }
        if share_with:
            data["shareWith"] = share_with
        if name:
            # OwnCloud reads "name", Nextcloud "label"
            data["name"] = name
            data["label"] = name
        if password is not None:
            data["password"] = password
        if public_upload is not None:
            data["publicUpload"] = _bool_param(public_upload)
        if expiration is not None:
            data["expireDate"] = _format_expiration(expiration)
        if note is not None:
            data["note"] = note

        root = self._ocs_request("POST", OCS_SERVICE_SHARE, "shares", data=data)
        share = parsing.get_share_from_data(root)
        logger.info(f"Created {share_type_name(share.share_type)} share {share.share_id} for {path}")
        return share

    def create_share_with_link(
        self,
        path: str,
        permissions: Permission | int = Permission.READ,
        public_upload: bool | None = None,
        name: str | None = None,
        expiration: Expiration | None = None,
        password: str | None = None,
    ) -> PublicShare:
        """Create a public link share."""
        share = self.create_share(
            path,
            ShareType.LINK,
            None,
            permissions,
            public_upload=public_upload,
            password=password,
            expiration=expiration,
            name=name,
        )
        return cast(PublicShare, share)

    def create_share_with_user(
        self,
        path: str,
        username: str,
        permissions: Permission | int = Permission.READ,
        expiration: Expiration | None = None,
    ) -> UserShare:
        _require(username, "username")
        share = self.create_share(path, ShareType.USER, username, permissions, expiration=expiration)
        return cast(UserShare, share)

    def create_share_with_remote_user(
        self,
        path: str,
        username: str,
        permissions: Permission | int = Permission.READ,
        expiration: Expiration | None = None,
    ) -> RemoteShare:
        """Share with a user on another server, given as ``user@server``."""
        _require(username, "username")
        share = self.create_share(
            path, ShareType.REMOTE, username, permissions, expiration=expiration
        )
        return cast(RemoteShare, share)

    def create_share_with_group(
        self,
        path: str,
        group_name: str,
        permissions: Permission | int = Permission.READ,
        expiration: Expiration | None = None,
    ) -> GroupShare:
        _require(group_name, "group_name")
        share = self.create_share(
            path, ShareType.GROUP, group_name, permissions, expiration=expiration
        )
        return cast(GroupShare, share)

    def update_share(
        self,
        share_id: int,
        permissions: Permission | int | None = None,
        public_upload: bool | None = None,
        name: str | None = None,
        expiration: Expiration | None = None,
        password: str | None = None,
        note: str | None = None,
    ) -> None:
        """Update an existing share. Arguments left as None stay unchanged.

        Args:
            share_id: Id of the share
            permissions: New permissions, between READ and ALL
            public_upload: Allow or forbid public uploads (links only)
            name: New display name
            expiration: New expiration date; ``CLEAR_EXPIRATION`` removes it
            password: New link password
            note: New note for the recipient

        Raises:
            InvalidArgumentError: If nothing is to be updated or permissions are invalid
            ShareNotFoundError: If no share has this id
            ShareIdCollisionError: If several shares have this id
            ProtocolError: If the server rejects the update
        """
        if all(
            value is None
            for value in (permissions, public_upload, name, expiration, password, note)
        ):
            raise InvalidArgumentError("Nothing to update")
        data: dict[str, Any] = {}
        if permissions is not None:
            data["permissions"] = _check_permissions(permissions)
        if public_upload is not None:
            data["publicUpload"] = _bool_param(public_upload)
        if name is not None:
            data["name"] = name
            data["label"] = name
        if expiration is not None:
            data["expireDate"] = _format_expiration(expiration)
        if password is not None:
            data["password"] = password
        if note is not None:
            data["note"] = note

        self.get_share(share_id)
        self._ocs_request("PUT", OCS_SERVICE_SHARE, f"shares/{int(share_id)}", data=data)
        logger.info(f"Updated share {share_id}: {', '.join(sorted(data))}")

    def delete_share(self, share_id: int) -> None:
        """Revoke a share."""
        self._ocs_request("DELETE", OCS_SERVICE_SHARE, f"shares/{int(share_id)}")
        logger.info(f"Deleted share {share_id}")

    def get_share(self, share_id: int) -> Share:
        """Get a share by id.

        Raises:
            ShareNotFoundError: If the response lists no share
            ShareIdCollisionError: If the response lists more than one share
        """
        root = self._ocs_request("GET", OCS_SERVICE_SHARE, f"shares/{int(share_id)}")
        shares = parsing.get_share_list(root)
        if not shares:
            raise ShareNotFoundError(share_id)
        if len(shares) > 1:
            raise ShareIdCollisionError(share_id, len(shares))
        return shares[0]

    def get_shares(
        self,
        path: str = "",
        reshares: bool | None = None,
        subfiles: bool | None = None,
    ) -> list[Share]:
        """List shares.

        Args:
            path: Only shares of this path; empty for all shares visible to the user
            reshares: Include shares made by others on the same path
            subfiles: List the shares of the children of the directory ``path``
        """
        params: dict[str, Any] = {}
        if path:
            params["path"] = path
        if reshares is not None:
            params["reshares"] = _bool_param(reshares)
        if subfiles is not None:
            params["subfiles"] = _bool_param(subfiles)
        root = self._ocs_request("GET", OCS_SERVICE_SHARE, "shares", params=params)
        return parsing.get_share_list(root)

    def is_shared(self, path: str) -> bool:
        return len(self.get_shares(path)) > 0

    def sharees(
        self, search: str, lookup_globally: bool = False, item_type: str = "file"
    ) -> list[Sharee]:
        """Search for possible share recipients.

        Args:
            search: Search term
            lookup_globally: Also query the global lookup server
            item_type: ``file`` or ``folder``
        """
        root = self._ocs_request(
            "GET",
            OCS_SERVICE_SHARE,
            "sharees",
            params={
                "search": search,
                "lookup": _bool_param(lookup_globally),
                "itemType": item_type,
            },
        )
        return parsing.get_sharees(root)

    def sharees_recommended(self, item_type: str = "file") -> list[Sharee]:
        """Get recipients the server suggests without a search term."""
        root = self._ocs_request(
            "GET", OCS_SERVICE_SHARE, "sharees_recommended", params={"itemType": item_type}
        )
        return parsing.get_sharees(root)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, username: str, initial_password: str) -> None:
        self._ocs_request(
            "POST",
            OCS_SERVICE_CLOUD,
            "users",
            data={"userid": username, "password": initial_password},
        )
        logger.info(f"Created user: {username}")

    def delete_user(self, username: str) -> None:
        self._ocs_request("DELETE", OCS_SERVICE_CLOUD, f"users/{_segment(username)}")
        logger.info(f"Deleted user: {username}")

    def user_exists(self, username: str) -> bool:
        return username in self.search_users(username)

    def search_users(self, search: str | None = None) -> list[str]:
        """Search user ids; without a search term all users are listed."""
        params = {"search": search} if search else None
        root = self._ocs_request("GET", OCS_SERVICE_CLOUD, "users", params=params)
        return parsing.get_list_from_data(root)

    def get_user_attributes(self, username: str) -> User:
        root = self._ocs_request("GET", OCS_SERVICE_CLOUD, f"users/{_segment(username)}")
        return parsing.get_user(root)

    def set_user_attribute(self, username: str, key: UserAttributeKey | str, value: str) -> None:
        """Set one attribute (display name, quota, password or email) of a user."""
        self._ocs_request(
            "PUT",
            OCS_SERVICE_CLOUD,
            f"users/{_segment(username)}",
            data={"key": user_attribute_key_name(key), "value": value},
        )
        logger.info(f"Updated {UserAttributeKey(key).name.lower()} of user {username}")

    def add_user_to_group(self, username: str, group_name: str) -> None:
        self._ocs_request(
            "POST",
            OCS_SERVICE_CLOUD,
            f"users/{_segment(username)}/groups",
            data={"groupid": group_name},
        )
        logger.info(f"Added user {username} to group {group_name}")

    def remove_user_from_group(self, username: str, group_name: str) -> None:
        self._ocs_request(
            "DELETE",
            OCS_SERVICE_CLOUD,
            f"users/{_segment(username)}/groups",
            data={"groupid": group_name},
        )
        logger.info(f"Removed user {username} from group {group_name}")

    def get_user_groups(self, username: str) -> list[str]:
        root = self._ocs_request("GET", OCS_SERVICE_CLOUD, f"users/{_segment(username)}/groups")
        return parsing.get_list_from_data(root)

    def is_user_in_group(self, username: str, group_name: str) -> bool:
        return group_name in self.get_user_groups(username)

    def add_user_to_subadmin_group(self, username: str, group_name: str) -> None:
        self._ocs_request(
            "POST",
            OCS_SERVICE_CLOUD,
            f"users/{_segment(username)}/subadmins",
            data={"groupid": group_name},
        )
        logger.info(f"Made user {username} subadmin of group {group_name}")

    def remove_user_from_subadmin_group(self, username: str, group_name: str) -> None:
        self._ocs_request(
            "DELETE",
            OCS_SERVICE_CLOUD,
            f"users/{_segment(username)}/subadmins",
            data={"groupid": group_name},
        )
        logger.info(f"Removed user {username} as subadmin of group {group_name}")

    def get_user_subadmin_groups(self, username: str) -> list[str]:
        """Get the groups a user is subadmin of.

        Some servers answer a user without subadmin groups with OCS status
        102 instead of an empty list; that status is returned as ``[]``.
        """
        try:
            root = self._ocs_request(
                "GET", OCS_SERVICE_CLOUD, f"users/{_segment(username)}/subadmins"
            )
        except ProtocolError as e:
            if e.ocs_status_code == OCS_EMPTY_SUBADMIN_STATUS_CODE:
                logger.debug(f"No subadmin groups for {username} (OCS status 102)")
                return []
            raise
        return parsing.get_list_from_data(root)

    def is_user_in_subadmin_group(self, username: str, group_name: str) -> bool:
        return group_name in self.get_user_subadmin_groups(username)

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def create_group(self, group_name: str) -> None:
        self._ocs_request("POST", OCS_SERVICE_CLOUD, "groups", data={"groupid": group_name})
        logger.info(f"Created group: {group_name}")

    def delete_group(self, group_name: str) -> None:
        self._ocs_request("DELETE", OCS_SERVICE_CLOUD, f"groups/{_segment(group_name)}")
        logger.info(f"Deleted group: {group_name}")

    def group_exists(self, group_name: str) -> bool:
        return group_name in self.search_groups(group_name)

    def search_groups(self, search: str | None = None) -> list[str]:
        """Search group ids; without a search term all groups are listed."""
        params = {"search": search} if search else None
        root = self._ocs_request("GET", OCS_SERVICE_CLOUD, "groups", params=params)
        return parsing.get_list_from_data(root)

    # ------------------------------------------------------------------
    # Config
    # ------------------------------------------------------------------

    def get_config(self) -> Config:
        root = self._ocs_request("GET", "", "config")
        return parsing.get_config(root)

    # ------------------------------------------------------------------
    # Application attributes
    # ------------------------------------------------------------------

    def get_attribute(self, app: str = "", key: str = "") -> list[AppAttribute]:
        """List stored attributes, of all apps, of one app, or a single key."""
        action = "getattribute"
        if app:
            action += f"/{_segment(app)}"
            if key:
                action += f"/{_segment(key)}"
        root = self._ocs_request("GET", OCS_SERVICE_DATA, action)
        return parsing.get_attribute_list(root)

    def get_app_attribute(self, app: str, key: str) -> str | None:
        """Get a single attribute value, None if it is not set."""
        _require(app, "app")
        _require(key, "key")
        for attribute in self.get_attribute(app, key):
            if attribute.key == key:
                return attribute.value
        return None

    def set_app_attribute(self, app: str, key: str, value: str) -> None:
        _require(app, "app")
        _require(key, "key")
        self._ocs_request(
            "POST",
            OCS_SERVICE_DATA,
            f"setattribute/{_segment(app)}/{_segment(key)}",
            data={"value": value},
        )
        logger.info(f"Set attribute {app}/{key}")

    def delete_app_attribute(self, app: str, key: str) -> None:
        _require(app, "app")
        _require(key, "key")
        self._ocs_request(
            "POST", OCS_SERVICE_DATA, f"deleteattribute/{_segment(app)}/{_segment(key)}"
        )
        logger.info(f"Deleted attribute {app}/{key}")

    # ------------------------------------------------------------------
    # Apps
    # ------------------------------------------------------------------

    def get_apps(self) -> list[str]:
        root = self._ocs_request("GET", OCS_SERVICE_CLOUD, "apps")
        return parsing.get_list_from_data(root)

    def get_app(self, app_name: str) -> AppInfo:
        root = self._ocs_request("GET", OCS_SERVICE_CLOUD, f"apps/{_segment(app_name)}")
        return parsing.get_app_info(root)

    def enable_app(self, app_name: str) -> None:
        self._ocs_request("POST", OCS_SERVICE_CLOUD, f"apps/{_segment(app_name)}")
        logger.info(f"Enabled app: {app_name}")

    def disable_app(self, app_name: str) -> None:
        self._ocs_request("DELETE", OCS_SERVICE_CLOUD, f"apps/{_segment(app_name)}")
        logger.info(f"Disabled app: {app_name}")
