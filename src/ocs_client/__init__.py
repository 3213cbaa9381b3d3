"""OCS Client - A Python library for the OCS API and WebDAV of OwnCloud and Nextcloud.

Example usage:
    from ocs_client import OcsClient, Permission

    # Using context manager (recommended)
    with OcsClient("https://cloud.example.com", "alice", "secret") as client:
        client.upload("/Documents/report.pdf", open("report.pdf", "rb"))
        share = client.create_share_with_link("/Documents/report.pdf", Permission.READ)
        print(share.url)

    # Configuration from OCS_URL, OCS_USER and OCS_PASSWORD
    client = OcsClient.from_env()
    print(client.get_user_groups("alice"))
    client.close()
"""

from ocs_client.client import OcsClient
from ocs_client.constants import (
    CLEAR_EXPIRATION,
    DIRECTORY_CONTENT_TYPE,
    Permission,
    ShareType,
    UserAttributeKey,
)
from ocs_client.exceptions import (
    DavError,
    InvalidArgumentError,
    OcsError,
    ProtocolError,
    ShareIdCollisionError,
    ShareNotFoundError,
    TransportError,
)
from ocs_client.models import (
    AdvancedShareProperties,
    AppAttribute,
    AppInfo,
    Config,
    GroupShare,
    OcsMeta,
    PublicShare,
    Quota,
    RemoteShare,
    ResourceInfo,
    Share,
    Sharee,
    User,
    UserShare,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "OcsClient",
    # Constants
    "CLEAR_EXPIRATION",
    "DIRECTORY_CONTENT_TYPE",
    "Permission",
    "ShareType",
    "UserAttributeKey",
    # Models
    "AdvancedShareProperties",
    "AppAttribute",
    "AppInfo",
    "Config",
    "GroupShare",
    "OcsMeta",
    "PublicShare",
    "Quota",
    "RemoteShare",
    "ResourceInfo",
    "Share",
    "Sharee",
    "User",
    "UserShare",
    # Exceptions
    "OcsError",
    "InvalidArgumentError",
    "TransportError",
    "ProtocolError",
    "DavError",
    "ShareNotFoundError",
    "ShareIdCollisionError",
]
