"""Tests for data models."""

from __future__ import annotations

import pytest

from ocs_client import (
    DIRECTORY_CONTENT_TYPE,
    OcsMeta,
    Permission,
    PublicShare,
    ResourceInfo,
    ShareType,
)


class TestResourceInfo:
    """Tests for ResourceInfo path decomposition."""

    def test_root(self) -> None:
        info = ResourceInfo.from_path("/")

        assert info.full_path == "/"
        assert info.item_name == ""
        assert info.directory_name == ""

    @pytest.mark.parametrize(
        ("path", "directory_name", "item_name"),
        [
            ("/report.pdf", "", "report.pdf"),
            ("/Documents/report.pdf", "/Documents", "report.pdf"),
            ("/a/b/c", "/a/b", "c"),
        ],
    )
    def test_decomposition(self, path: str, directory_name: str, item_name: str) -> None:
        info = ResourceInfo.from_path(path)

        assert info.directory_name == directory_name
        assert info.item_name == item_name
        assert f"{info.directory_name}/{info.item_name}" == path

    def test_trailing_separator_is_stripped(self) -> None:
        info = ResourceInfo.from_path("/Documents/Photos/", content_type=DIRECTORY_CONTENT_TYPE)

        assert info.full_path == "/Documents/Photos"
        assert info.item_name == "Photos"
        assert info.is_directory

    def test_file_is_not_directory(self) -> None:
        info = ResourceInfo.from_path("/a.txt", content_type="text/plain", size=12)

        assert not info.is_directory
        assert info.size == 12
        assert str(info) == "/a.txt"

    @pytest.mark.parametrize("path", ["", "relative/path"])
    def test_invalid_paths(self, path: str) -> None:
        with pytest.raises(ValueError):
            ResourceInfo.from_path(path)


class TestStringForms:
    """Tests for human-readable summaries."""

    def test_share(self) -> None:
        share = PublicShare(
            share_id=42,
            share_type=ShareType.LINK,
            target_path="/report.pdf",
            permissions=Permission.READ,
        )

        assert str(share) == "Share ID 42 (Permission: READ) /report.pdf"

    def test_meta(self) -> None:
        assert str(OcsMeta("ok", 100, "")) == "Status 100 (ok)"
        assert str(OcsMeta("failure", 997, "Unauthorised")) == "Status 997 (failure), Message: Unauthorised"

    def test_models_are_immutable(self) -> None:
        info = ResourceInfo.from_path("/a.txt")

        with pytest.raises(AttributeError):
            info.size = 5  # type: ignore[misc]
