"""Enumerations and fixed values of the OCS share and provisioning APIs."""

from __future__ import annotations

import datetime
from enum import Enum, IntEnum, IntFlag

# Base paths below the server URL
DAV_PATH = "remote.php/webdav"
OCS_PATH = "ocs/v1.php"

# OCS services
OCS_SERVICE_SHARE = "apps/files_sharing/api/v1"
OCS_SERVICE_DATA = "privatedata"
OCS_SERVICE_CLOUD = "cloud"

# Server-specific (non-WebDAV) endpoint for zipped directory downloads
ZIP_DOWNLOAD_PATH = "/index.php/apps/files/ajax/download.php"

OCS_SUCCESS_STATUS_CODE = 100

# Returned by the subadmin lookup when a user has no subadmin groups
OCS_EMPTY_SUBADMIN_STATUS_CODE = 102

OCS_REQUEST_HEADERS = {
    "OCS-APIREQUEST": "true",
    "Accept": "text/xml, application/xml",
}

DIRECTORY_CONTENT_TYPE = "dav/directory"

DIRECTORY_SEPARATOR = "/"

# Wire format of dates sent to the share API
EXPIRE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Pass as ``expiration`` to update_share() to remove an expiration date
CLEAR_EXPIRATION = datetime.date.min


class Permission(IntFlag):
    """Share permissions. Combine members with ``|`` to grant several."""

    READ = 1
    UPDATE = 2
    CREATE = 4
    DELETE = 8
    SHARE = 16
    ALL = 31


class ShareType(IntEnum):
    """Share types as numbered by the OCS share API."""

    USER = 0
    GROUP = 1
    LINK = 3
    EMAIL = 4
    REMOTE = 6
    CIRCLE = 7
    TALK_CONVERSATION = 10


class UserAttributeKey(str, Enum):
    """Editable user attributes, valued with their provisioning API key."""

    DISPLAY_NAME = "display"
    QUOTA = "quota"
    PASSWORD = "password"
    EMAIL = "email"


def user_attribute_key_name(key: UserAttributeKey | str) -> str:
    """Return the wire name the provisioning API expects for ``key``."""
    return UserAttributeKey(key).value


def share_type_name(share_type: ShareType | int) -> str:
    """Return the member name of a known share type, the number of an unknown one."""
    if isinstance(share_type, ShareType):
        return share_type.name
    return str(share_type)
