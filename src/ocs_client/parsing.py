"""Tolerant extraction of typed values from OCS XML envelopes.

OwnCloud and Nextcloud emit different optional fields for the same
operation, so every lookup returns ``None`` for an absent node instead of
raising; callers decide whether absence is fatal.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from ocs_client.constants import Permission, ShareType
from ocs_client.exceptions import TransportError
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
    Share,
    Sharee,
    User,
    UserShare,
)

logger = logging.getLogger(__name__)

Document = str | ET.Element


# ---------------------------------------------------------------------------
# Node lookup
# ---------------------------------------------------------------------------


def parse_document(content: Document) -> ET.Element:
    """Parse an OCS response body and return its root element.

    Raises:
        TransportError: If the content is empty or not well-formed XML
    """
    if isinstance(content, ET.Element):
        return content
    if not content:
        raise TransportError("Empty response content", response_content=content)
    try:
        return ET.fromstring(content)
    except ET.ParseError as e:
        raise TransportError(
            "Invalid response data", response_content=content, inner_exception=e
        ) from e


def node_text(node: ET.Element | None) -> str | None:
    """Return the full text of ``node``, ``""`` for an empty node, None if absent."""
    if node is None:
        return None
    return "".join(node.itertext())


def child_nodes(parent: ET.Element, name: str | None = None) -> list[ET.Element]:
    """Return the direct children of ``parent``, optionally only those named ``name``."""
    if name is None:
        return list(parent)
    return parent.findall(name)


def single_child_node(parent: ET.Element | None, name: str) -> ET.Element | None:
    """Return the direct child ``name`` which may appear at most once.

    Raises:
        TransportError: If the child appears more than once
    """
    if parent is None:
        return None
    found = parent.findall(name)
    if len(found) > 1:
        raise TransportError(f"More than 1 child <{name}> found below <{parent.tag}>")
    return found[0] if found else None


def child_text(parent: ET.Element | None, name: str) -> str | None:
    if parent is None:
        return None
    return node_text(parent.find(name))


def _non_empty(value: str | None) -> str | None:
    return value if value else None


def _meta_node(content: Document) -> ET.Element | None:
    root = parse_document(content)
    return root.find("meta")


def data_node(content: Document) -> ET.Element | None:
    """Return the ``<data>`` element directly below the envelope root."""
    root = parse_document(content)
    return root.find("data")


# ---------------------------------------------------------------------------
# Envelope and scalar values
# ---------------------------------------------------------------------------


def get_from_meta(content: Document, name: str) -> str | None:
    """Get a value from the ``<meta>`` block (``""`` when present but empty)."""
    return child_text(_meta_node(content), name)


def get_meta(content: Document) -> OcsMeta:
    """Read status, statuscode and message from the ``<meta>`` block."""
    meta = _meta_node(content)
    status_code = child_text(meta, "statuscode")
    return OcsMeta(
        status=child_text(meta, "status"),
        status_code=int(status_code) if status_code and status_code.strip().isdigit() else None,
        message=child_text(meta, "message"),
    )


def get_value_from_data(content: Document, name: str) -> str | None:
    """Get the text of a single named child of ``<data>``."""
    return child_text(data_node(content), name)


def get_list_from_data(content: Document, container: str | None = None) -> list[str]:
    """Get the text of every ``<element>`` below ``<data>``.

    Args:
        content: OCS response body or parsed root
        container: Name of a child of ``<data>`` to restrict the search to,
            e.g. ``"groups"`` or ``"users"``
    """
    parent = data_node(content)
    if parent is not None and container is not None:
        parent = parent.find(container)
    if parent is None:
        return []
    return [node_text(node) or "" for node in parent.iter("element")]


def get_element_dicts(content: Document) -> list[dict[str, str]]:
    """Get each ``<data>/<element>`` as a flat child-name to text mapping."""
    data = data_node(content)
    if data is None:
        return []
    return [xml_children_to_dict(element) for element in data.findall("element")]


def xml_elements_to_list(node: ET.Element) -> list[str]:
    return [node_text(element) or "" for element in node.iter("element")]


def xml_children_to_dict(node: ET.Element) -> dict[str, str]:
    """Map each direct child's tag to its text; grandchildren are not expected."""
    return {child.tag: node_text(child) or "" for child in node}


def parse_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    return value.strip().lower() in ("true", "1")


def parse_float(value: str | None) -> float | None:
    """Parse a period-decimal number; ``float`` never consults the host locale."""
    if not value:
        return None
    return float(value)


def parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return date_parser.parse(value)


# ---------------------------------------------------------------------------
# Shares
# ---------------------------------------------------------------------------


def _share_fields(element: ET.Element, share_type: ShareType | int) -> dict[str, Any]:
    """Read the fields every share type carries."""
    share_id = child_text(element, "id")
    permissions = child_text(element, "permissions")
    # OwnCloud reports the link name as <name>, Nextcloud as <label>
    name = _non_empty(child_text(element, "name")) or _non_empty(child_text(element, "label"))
    return {
        "share_id": int(share_id) if share_id else None,
        "share_type": share_type,
        "target_path": child_text(element, "file_target"),
        "permissions": Permission(int(permissions)) if permissions else None,
        "expiration": parse_datetime(child_text(element, "expiration")),
        "name": name,
        "note": _non_empty(child_text(element, "note")),
        "advanced_properties": AdvancedShareProperties(
            item_type=child_text(element, "item_type"),
            item_source=child_text(element, "item_source"),
            parent=child_text(element, "parent"),
            stime=child_text(element, "stime"),
            expiration=child_text(element, "expiration"),
            storage=child_text(element, "storage"),
            mail_send=child_text(element, "mail_send"),
            owner=child_text(element, "uid_owner"),
            storage_id=child_text(element, "storage_id"),
            file_source=child_text(element, "file_source"),
            file_parent=child_text(element, "file_parent"),
            file_owner=child_text(element, "uid_file_owner"),
            file_owner_display_name=child_text(element, "displayname_file_owner"),
            shared_with_display_name=child_text(element, "share_with_displayname"),
            display_name_owner=child_text(element, "displayname_owner"),
            password=child_text(element, "password"),
        ),
    }


def _no_extra_fields(element: ET.Element) -> dict[str, Any]:
    return {}


def _public_share_fields(element: ET.Element) -> dict[str, Any]:
    return {"url": child_text(element, "url"), "token": child_text(element, "token")}


def _shared_with_fields(element: ET.Element) -> dict[str, Any]:
    return {"shared_with": child_text(element, "share_with")}


_SHARE_VARIANTS: dict[ShareType, tuple[type[Share], Callable[[ET.Element], dict[str, Any]]]] = {
    ShareType.USER: (UserShare, _shared_with_fields),
    ShareType.GROUP: (GroupShare, _shared_with_fields),
    ShareType.LINK: (PublicShare, _public_share_fields),
    ShareType.EMAIL: (Share, _no_extra_fields),
    ShareType.REMOTE: (RemoteShare, _shared_with_fields),
    ShareType.CIRCLE: (Share, _no_extra_fields),
    ShareType.TALK_CONVERSATION: (Share, _no_extra_fields),
}


def to_share_type(value: str | int) -> ShareType | int:
    """Convert a wire share type to ShareType.

    Newer servers add share types (remote groups, Deck, ScienceMesh ...);
    numbers ShareType does not name are returned unchanged.

    Raises:
        TransportError: If the value is not a number
    """
    try:
        number = int(value)
    except ValueError as e:
        raise TransportError(f"Unexpected share type returned: {value}") from e
    try:
        return ShareType(number)
    except ValueError:
        logger.debug(f"Keeping unknown share type {number}")
        return number


def parse_share(element: ET.Element) -> Share | None:
    """Build the Share variant matching the element's ``share_type``.

    Returns None if the element carries no ``share_type``.
    """
    raw_type = child_text(element, "share_type")
    if not raw_type:
        return None
    share_type = to_share_type(raw_type)
    share_class, extra_fields = _SHARE_VARIANTS.get(share_type, (Share, _no_extra_fields))
    return share_class(**_share_fields(element, share_type), **extra_fields(element))


def get_share_list(content: Document) -> list[Share]:
    """Get the shares listed as ``<data>/<element>`` entries."""
    data = data_node(content)
    if data is None:
        return []
    shares = []
    for element in data.findall("element"):
        share = parse_share(element)
        if share is None:
            logger.debug("Skipping share element without share_type")
            continue
        shares.append(share)
    return shares


def get_share_from_data(content: Document) -> Share:
    """Get the single share a create-share response carries in ``<data>``.

    Raises:
        TransportError: If ``<data>`` has no ``share_type``
    """
    data = data_node(content)
    share = parse_share(data) if data is not None else None
    if share is None:
        raise TransportError(
            "Result data not in expected format",
            response_content=content if isinstance(content, str) else None,
        )
    return share


# ---------------------------------------------------------------------------
# Sharees
# ---------------------------------------------------------------------------


def parse_sharee(element: ET.Element, *, is_exact_result: bool = False) -> Sharee:
    value = single_child_node(element, "value")
    raw_type = node_text(single_child_node(value, "shareType"))
    if not raw_type:
        raise TransportError("Sharee entry without shareType")
    additional_info = child_text(value, "shareWithAdditionalInfo")
    if additional_info is None:
        additional_info = child_text(element, "shareWithAdditionalInfo")
    return Sharee(
        share_type=to_share_type(raw_type),
        share_with=child_text(value, "shareWith"),
        share_with_display_name=child_text(element, "shareWithDisplayNameUnique"),
        share_with_additional_info=additional_info,
        icon=child_text(element, "icon"),
        label=child_text(element, "label"),
        is_exact_result=is_exact_result,
    )


def get_sharees(content: Document) -> list[Sharee]:
    """Get the sharees of a sharee search or recommendation response.

    The category names below ``<data>`` (``users``, ``groups``, ``remotes``,
    ``emails`` ...) depend on the server, so they are discovered first.
    ``<exact>`` holds one more level of such categories whose members are
    flagged as exact results.
    """
    data = data_node(content)
    if data is None:
        return []
    categories = list(dict.fromkeys(node.tag for node in child_nodes(data)))

    sharees: list[Sharee] = []
    for category in categories:
        for category_node in child_nodes(data, category):
            if category == "exact":
                for exact_category in child_nodes(category_node):
                    sharees.extend(
                        parse_sharee(item, is_exact_result=True)
                        for item in child_nodes(exact_category, "element")
                    )
            else:
                sharees.extend(
                    parse_sharee(item) for item in child_nodes(category_node, "element")
                )
    return sharees


# ---------------------------------------------------------------------------
# Provisioning
# ---------------------------------------------------------------------------


def get_user(content: Document) -> User:
    """Get the user attributes of a provisioning user response."""
    data = data_node(content)
    quota = None
    # Only <data>/<quota>: a nested node of the same name is something else
    quota_node = data.find("quota") if data is not None else None
    if quota_node is not None:
        quota = Quota(
            free=parse_float(child_text(quota_node, "free")),
            used=parse_float(child_text(quota_node, "used")),
            total=parse_float(child_text(quota_node, "total")),
            relative=parse_float(child_text(quota_node, "relative")),
        )
    return User(
        display_name=child_text(data, "displayname"),
        email=child_text(data, "email"),
        enabled=parse_bool(child_text(data, "enabled")),
        quota=quota,
    )


def get_config(content: Document) -> Config:
    data = data_node(content)
    return Config(
        website=child_text(data, "website"),
        host=child_text(data, "host"),
        ssl=parse_bool(child_text(data, "ssl")),
        contact=child_text(data, "contact"),
        version=child_text(data, "version"),
    )


def get_app_info(content: Document) -> AppInfo:
    """Get application metadata.

    ``standalone`` and ``default_enable`` are presence markers: the node's
    existence means true whatever its text.
    """
    data = data_node(content)
    if data is None:
        return AppInfo()

    def mapping(name: str) -> dict[str, str]:
        node = data.find(name)
        return xml_children_to_dict(node) if node is not None else {}

    types_node = data.find("types")
    return AppInfo(
        id=child_text(data, "id"),
        display_name=child_text(data, "name"),
        description=child_text(data, "description"),
        license=child_text(data, "licence"),
        author=child_text(data, "author"),
        require_min=child_text(data, "requiremin"),
        shipped=child_text(data, "shipped") == "true",
        standalone=data.find("standalone") is not None,
        default_enable=data.find("default_enable") is not None,
        types=tuple(xml_elements_to_list(types_node)) if types_node is not None else (),
        remote=mapping("remote"),
        documentation=mapping("documentation"),
        info=mapping("info"),
        public=mapping("public"),
    )


def get_attribute_list(content: Document) -> list[AppAttribute]:
    data = data_node(content)
    if data is None:
        return []
    return [
        AppAttribute(
            app=child_text(element, "app"),
            key=child_text(element, "key"),
            value=child_text(element, "value"),
        )
        for element in data.iter("element")
    ]
