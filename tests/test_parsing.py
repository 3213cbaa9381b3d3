"""Tests for OCS response parsing."""

from __future__ import annotations

from datetime import datetime

import pytest
from helpers import elements, ocs_envelope, share_element

from ocs_client import (
    GroupShare,
    Permission,
    PublicShare,
    RemoteShare,
    Share,
    ShareType,
    TransportError,
    UserShare,
)
from ocs_client import parsing


class TestEnvelope:
    """Tests for meta and data lookups."""

    def test_groups_list_from_container(self) -> None:
        """Test the list extractor restricted to a container."""
        content = (
            "<ocs><meta><status>ok</status><statuscode>100</statuscode><message/></meta>"
            "<data><groups><element>testgroup</element></groups></data></ocs>"
        )

        meta = parsing.get_meta(content)

        assert meta.status_code == 100
        assert meta.status == "ok"
        assert parsing.get_list_from_data(content, "groups") == ["testgroup"]

    def test_list_from_data_without_container(self) -> None:
        content = ocs_envelope(f"<users>{elements('alice', 'bob')}</users>")

        assert parsing.get_list_from_data(content) == ["alice", "bob"]

    def test_list_from_missing_container_is_empty(self) -> None:
        content = ocs_envelope(f"<users>{elements('alice')}</users>")

        assert parsing.get_list_from_data(content, "groups") == []

    def test_get_from_meta_empty_node(self) -> None:
        """Test that a present but empty node is read as empty string."""
        content = ocs_envelope()

        assert parsing.get_from_meta(content, "message") == ""
        assert parsing.get_from_meta(content, "missing") is None

    def test_get_value_from_data(self) -> None:
        content = ocs_envelope("<website>ownCloud</website>")

        assert parsing.get_value_from_data(content, "website") == "ownCloud"

    def test_empty_content_raises(self) -> None:
        with pytest.raises(TransportError, match="Empty response content"):
            parsing.get_meta("")

    def test_malformed_content_raises(self) -> None:
        with pytest.raises(TransportError, match="Invalid response data"):
            parsing.get_meta("<ocs><meta>")

    def test_single_child_node_rejects_duplicates(self) -> None:
        root = parsing.parse_document("<value><shareType>0</shareType><shareType>1</shareType></value>")

        with pytest.raises(TransportError, match="More than 1 child"):
            parsing.single_child_node(root, "shareType")

    def test_element_dicts(self) -> None:
        content = ocs_envelope(
            "<element><id>7</id><remote>https://other</remote></element>"
        )

        assert parsing.get_element_dicts(content) == [{"id": "7", "remote": "https://other"}]


class TestShares:
    """Tests for share parsing."""

    def test_link_share(self) -> None:
        """Test that a link share becomes a PublicShare."""
        content = ocs_envelope(
            share_element(42, 3, url="http://x/s/abc", token="abc")
        )

        shares = parsing.get_share_list(content)

        assert len(shares) == 1
        share = shares[0]
        assert isinstance(share, PublicShare)
        assert share.share_id == 42
        assert share.share_type == ShareType.LINK
        assert share.url == "http://x/s/abc"
        assert share.token == "abc"
        assert share.permissions == Permission.READ

    @pytest.mark.parametrize(
        ("share_type", "expected_class"),
        [
            (0, UserShare),
            (1, GroupShare),
            (6, RemoteShare),
        ],
    )
    def test_shared_with_variants(self, share_type: int, expected_class: type) -> None:
        content = ocs_envelope(share_element(5, share_type, share_with="bob"))

        share = parsing.get_share_list(content)[0]

        assert type(share) is expected_class
        assert share.shared_with == "bob"  # type: ignore[attr-defined]

    def test_email_share_is_base_share(self) -> None:
        content = ocs_envelope(share_element(5, 4, share_with="bob@example.com"))

        share = parsing.get_share_list(content)[0]

        assert type(share) is Share
        assert share.share_type == ShareType.EMAIL

    def test_unknown_share_type_is_kept(self) -> None:
        """Test that a share type newer than ShareType does not abort the list."""
        content = ocs_envelope(
            share_element(1, 3, url="http://x/s/abc", token="abc")
            + share_element(2, 12, path="/Deck/card.md", share_with="board-7")
        )

        link, deck = parsing.get_share_list(content)

        assert isinstance(link, PublicShare)
        assert type(deck) is Share
        assert deck.share_id == 2
        assert deck.share_type == 12
        assert not isinstance(deck.share_type, ShareType)
        assert deck.target_path == "/Deck/card.md"
        assert deck.permissions == Permission.READ

    def test_non_numeric_share_type_raises(self) -> None:
        content = ocs_envelope(share_element(5, "link"))  # type: ignore[arg-type]

        with pytest.raises(TransportError, match="Unexpected share type returned: link"):
            parsing.get_share_list(content)

    def test_missing_id(self) -> None:
        content = ocs_envelope("<element><share_type>0</share_type></element>")

        share = parsing.get_share_list(content)[0]

        assert share.share_id is None

    def test_element_without_share_type_is_skipped(self) -> None:
        content = ocs_envelope("<element><id>1</id></element>" + share_element(2, 0))

        shares = parsing.get_share_list(content)

        assert [share.share_id for share in shares] == [2]

    def test_name_falls_back_to_label(self) -> None:
        """Test that the Nextcloud label is used when name is empty."""
        content = ocs_envelope(share_element(3, 3, name="", label="Public report"))

        share = parsing.get_share_list(content)[0]

        assert share.name == "Public report"

    def test_expiration_and_advanced_properties(self) -> None:
        content = ocs_envelope(
            share_element(
                3,
                0,
                expiration="2026-12-31 00:00:00",
                uid_owner="alice",
                share_with_displayname="Bob",
            )
        )

        share = parsing.get_share_list(content)[0]

        assert share.expiration == datetime(2026, 12, 31)
        assert share.advanced_properties.owner == "alice"
        assert share.advanced_properties.shared_with_display_name == "Bob"
        assert share.advanced_properties.password is None

    def test_share_from_data(self) -> None:
        """Test a create-share response, where the share is <data> itself."""
        content = ocs_envelope(
            "<id>9</id><share_type>3</share_type><permissions>1</permissions>"
            "<url>https://cloud/s/xyz</url><token>xyz</token>"
        )

        share = parsing.get_share_from_data(content)

        assert isinstance(share, PublicShare)
        assert share.share_id == 9
        assert share.url == "https://cloud/s/xyz"

    def test_share_from_data_without_type_raises(self) -> None:
        content = ocs_envelope("<id>9</id>")

        with pytest.raises(TransportError, match="Result data not in expected format"):
            parsing.get_share_from_data(content)


class TestSharees:
    """Tests for sharee parsing."""

    def _sharee(self, share_type: int, share_with: str, label: str) -> str:
        return (
            f"<element><label>{label}</label>"
            f"<value><shareType>{share_type}</shareType><shareWith>{share_with}</shareWith></value>"
            "</element>"
        )

    def test_categories_and_exact_subtree(self) -> None:
        content = ocs_envelope(
            "<exact>"
            f"<users>{self._sharee(0, 'bob', 'Bob')}</users>"
            "<groups/>"
            "</exact>"
            f"<users>{self._sharee(0, 'bobby', 'Bobby')}</users>"
            f"<groups>{self._sharee(1, 'bobs', 'Bobs')}</groups>"
        )

        sharees = parsing.get_sharees(content)

        assert [(s.share_with, s.is_exact_result) for s in sharees] == [
            ("bob", True),
            ("bobby", False),
            ("bobs", False),
        ]
        assert sharees[2].share_type == ShareType.GROUP
        assert sharees[0].label == "Bob"

    def test_additional_info_from_element(self) -> None:
        content = ocs_envelope(
            "<users><element>"
            "<label>Bob</label><shareWithDisplayNameUnique>bob@example.com</shareWithDisplayNameUnique>"
            "<shareWithAdditionalInfo>Sales</shareWithAdditionalInfo>"
            "<value><shareType>0</shareType><shareWith>bob</shareWith></value>"
            "</element></users>"
        )

        sharee = parsing.get_sharees(content)[0]

        assert sharee.share_with_additional_info == "Sales"
        assert sharee.share_with_display_name == "bob@example.com"

    def test_unknown_sharee_type_is_kept(self) -> None:
        """Test a remote group sharee, whose type ShareType does not name."""
        content = ocs_envelope(
            f"<users>{self._sharee(0, 'bob', 'Bob')}</users>"
            f"<remote_groups>{self._sharee(9, 'devs@other.example.com', 'devs')}</remote_groups>"
        )

        bob, devs = parsing.get_sharees(content)

        assert bob.share_type == ShareType.USER
        assert devs.share_type == 9
        assert devs.share_with == "devs@other.example.com"
        assert str(devs) == "Sharee (9): devs (devs@other.example.com|None)"

    def test_empty_data(self) -> None:
        assert parsing.get_sharees(ocs_envelope()) == []


class TestProvisioning:
    """Tests for user, config and app parsing."""

    def test_user_with_quota(self) -> None:
        content = ocs_envelope(
            "<enabled>true</enabled><email>bob@example.com</email>"
            "<displayname>Bob</displayname>"
            "<quota><free>100.5</free><used>20</used><total>120.5</total>"
            "<relative>16.6</relative></quota>"
        )

        user = parsing.get_user(content)

        assert user.display_name == "Bob"
        assert user.email == "bob@example.com"
        assert user.enabled is True
        assert user.quota is not None
        assert user.quota.free == 100.5
        assert user.quota.relative == 16.6

    def test_user_enabled_as_digit(self) -> None:
        assert parsing.get_user(ocs_envelope("<enabled>1</enabled>")).enabled is True
        assert parsing.get_user(ocs_envelope("<enabled>false</enabled>")).enabled is False

    def test_nested_quota_is_ignored(self) -> None:
        """Test that only a direct <data>/<quota> child is read."""
        content = ocs_envelope("<backend><quota><free>1</free></quota></backend>")

        assert parsing.get_user(content).quota is None

    def test_config(self) -> None:
        content = ocs_envelope(
            "<version>1.7</version><website>ownCloud</website><host>cloud.example.com</host>"
            "<contact></contact><ssl>false</ssl>"
        )

        config = parsing.get_config(content)

        assert config.host == "cloud.example.com"
        assert config.ssl is False
        assert config.contact == ""

    def test_app_info_presence_markers(self) -> None:
        """Test that standalone and default_enable only need to be present."""
        content = ocs_envelope(
            "<id>files_sharing</id><name>Sharing</name><licence>AGPL</licence>"
            "<shipped>true</shipped><standalone/><default_enable></default_enable>"
            f"<types>{elements('filesystem')}</types>"
            "<remote><files>appinfo/remote.php</files></remote>"
        )

        app = parsing.get_app_info(content)

        assert app.id == "files_sharing"
        assert app.display_name == "Sharing"
        assert app.license == "AGPL"
        assert app.shipped is True
        assert app.standalone is True
        assert app.default_enable is True
        assert app.types == ("filesystem",)
        assert app.remote == {"files": "appinfo/remote.php"}
        assert app.public == {}

    def test_app_info_absent_markers(self) -> None:
        app = parsing.get_app_info(ocs_envelope("<id>x</id><shipped>1</shipped>"))

        assert app.standalone is False
        assert app.default_enable is False
        assert app.shipped is False

    def test_attribute_list(self) -> None:
        content = ocs_envelope(
            "<element><app>notes</app><key>color</key><value>blue</value></element>"
        )

        attributes = parsing.get_attribute_list(content)

        assert len(attributes) == 1
        assert attributes[0].key == "color"
        assert attributes[0].value == "blue"
