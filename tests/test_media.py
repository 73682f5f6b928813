"""Tests for Media ingestion."""

from __future__ import annotations

import base64
import copy
import dataclasses
import os
from pathlib import Path

import pytest

from visionreport import (
    InvalidInputError,
    Media,
    MediaError,
    MediaNotFoundError,
    MediaReadError,
    MediaType,
    MediaUnreadableError,
)


class TestFromUrl:
    """Tests for Media.from_url."""

    @pytest.mark.parametrize(
        "url",
        ["https://a.b/c.png", "http://localhost:8080/shot.jpg"],
    )
    def test_accepts_http_urls_verbatim(self, url: str):
        media = Media.from_url(url)
        assert media.data == url
        assert media.media_type == MediaType.URL
        assert media.is_url

    @pytest.mark.parametrize(
        "url",
        ["ftp://x", "www.example.com/a.png", "", " https://a.b/c.png", "HTTPS://A.B", None, 42],
    )
    def test_rejects_non_http_input(self, url):
        with pytest.raises(InvalidInputError):
            Media.from_url(url)


class TestFromBase64:
    """Tests for Media.from_base64."""

    def test_accepts_data_uri_unchanged(self):
        media = Media.from_base64("data:image/png;base64,AAAA")
        assert media.data == "data:image/png;base64,AAAA"
        assert media.media_type == MediaType.BASE64
        assert not media.is_url

    def test_leading_whitespace_is_allowed_and_kept(self):
        raw = "  data:image/png;base64,AAAA"
        assert Media.from_base64(raw).data == raw

    @pytest.mark.parametrize("raw", ["not-a-uri", "", "   ", "image/png;base64,AAAA", None])
    def test_rejects_non_data_uri(self, raw):
        with pytest.raises(InvalidInputError):
            Media.from_base64(raw)


class TestFromPath:
    """Tests for Media.from_path."""

    def test_embeds_file_as_data_uri(self, png_file: Path):
        media = Media.from_path(str(png_file))
        expected = base64.b64encode(png_file.read_bytes()).decode("ascii")
        assert media.data == f"data:image/png;base64,{expected}"
        assert media.media_type == MediaType.BASE64

    def test_accepts_path_objects(self, png_file: Path):
        assert Media.from_path(png_file).data.startswith("data:image/png;base64,")

    def test_unknown_extension_falls_back_to_octet_stream(self, tmp_path: Path):
        path = tmp_path / "blob.unknownext"
        path.write_bytes(b"\x00\x01")
        assert Media.from_path(path).data == "data:application/octet-stream;base64,AAE="

    def test_empty_file_gives_empty_payload(self, tmp_path: Path):
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert Media.from_path(path).data == "data:text/plain;base64,"

    def test_missing_file_raises_not_found(self, tmp_path: Path):
        with pytest.raises(MediaNotFoundError):
            Media.from_path(tmp_path / "missing.png")

    def test_directory_raises_unreadable(self, tmp_path: Path):
        with pytest.raises(MediaUnreadableError):
            Media.from_path(tmp_path)

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read files without permission bits",
    )
    def test_unreadable_file_raises_unreadable(self, png_file: Path):
        png_file.chmod(0)
        try:
            with pytest.raises(MediaUnreadableError):
                Media.from_path(png_file)
        finally:
            png_file.chmod(0o644)

    @pytest.mark.parametrize("path", ["", "   ", "bad\x00name.png", None, 12])
    def test_malformed_path_raises_invalid_input(self, path):
        with pytest.raises(InvalidInputError):
            Media.from_path(path)

    def test_read_failure_is_wrapped(self, png_file: Path, monkeypatch):
        def broken_read(self):
            raise PermissionError("device gone")

        monkeypatch.setattr(Path, "read_bytes", broken_read)

        with pytest.raises(MediaReadError) as exc_info:
            Media.from_path(png_file)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_all_failures_share_media_error_base(self, tmp_path: Path):
        with pytest.raises(MediaError):
            Media.from_path(tmp_path / "nope.png")


class TestMediaInvariants:
    """Media can only come from the factories and never changes."""

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError):
            Media("https://a.b/c.png", MediaType.URL)

    def test_replace_cannot_bypass_factories(self):
        media = Media.from_url("https://a.b/c.png")
        with pytest.raises(TypeError):
            dataclasses.replace(media, data="ftp://x")

    def test_copies_keep_factory_data(self):
        media = Media.from_base64("data:image/png;base64,AAAA")
        assert copy.deepcopy(media) == media

    def test_media_is_frozen(self):
        media = Media.from_url("https://a.b/c.png")
        with pytest.raises(dataclasses.FrozenInstanceError):
            media.data = "https://evil.example"

    def test_equal_sources_compare_equal(self):
        assert Media.from_url("https://a.b/c.png") == Media.from_url("https://a.b/c.png")

    def test_to_dict(self):
        assert Media.from_url("https://a.b/c.png").to_dict() == {
            "type": "url",
            "data": "https://a.b/c.png",
        }
