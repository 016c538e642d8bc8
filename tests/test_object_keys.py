"""
Uploader Backend — Object Key Unit Tests
========================================

What:  Tests for key construction, sanitization, shape validation, and
       public URL building.
"""

import re
import uuid

import pytest

from app.services.object_keys import (
    build_object_key,
    build_public_url,
    is_valid_object_key,
    sanitize_filename,
)

KEY_RE = re.compile(r"^uploads/(\d+)-([0-9a-f\-]{36})-(.*)$")


class TestSanitizeFilename:

    def test_safe_filename_unchanged(self):
        assert sanitize_filename("photo-01_final.PNG") == "photo-01_final.PNG"

    def test_space_replaced(self):
        assert sanitize_filename("my photo.png") == "my_photo.png"

    def test_path_separators_replaced(self):
        """Slashes must never reach the key (no nested prefixes, no traversal)."""
        assert sanitize_filename("../../etc/passwd") == ".._.._etc_passwd"
        assert sanitize_filename("a\\b.txt") == "a_b.txt"

    def test_non_ascii_replaced_per_character(self):
        assert sanitize_filename("café.jpg") == "caf_.jpg"
        assert sanitize_filename("写真.png") == "__.png"

    @pytest.mark.parametrize("name", ["a b", "x?y&z=1", "tab\there", "semi;colon", "émoji🙂.gif"])
    def test_only_allowed_characters_remain(self, name):
        assert re.fullmatch(r"[A-Za-z0-9_.\-]*", sanitize_filename(name))


class TestBuildObjectKey:

    def test_key_shape(self):
        key = build_object_key("my photo.png")
        match = KEY_RE.match(key)
        assert match is not None
        assert match.group(3) == "my_photo.png"
        uuid.UUID(match.group(2))

    def test_key_uses_pinned_components(self):
        key = build_object_key("a.txt", timestamp_ms=1700000000000, unique_id="abc")
        assert key == "uploads/1700000000000-abc-a.txt"

    def test_timestamp_is_milliseconds(self):
        key = build_object_key("a.txt")
        ts = int(KEY_RE.match(key).group(1))
        assert ts > 1_000_000_000_000

    def test_identical_inputs_produce_distinct_keys(self):
        keys = {build_object_key("same.png") for _ in range(200)}
        assert len(keys) == 200

    def test_built_keys_pass_validation(self):
        assert is_valid_object_key(build_object_key("weird name (1).jpeg"))


class TestIsValidObjectKey:

    @pytest.mark.parametrize(
        "key",
        [
            "uploads/1717171717171-0b6f0d8e-3c1a-4a63-9a43-58a0c7f0f0a1-my_photo.png",
            "uploads/1-x-",
            "uploads/123-abc-anything goes/here",
        ],
    )
    def test_accepts_well_shaped_keys(self, key):
        assert is_valid_object_key(key)

    @pytest.mark.parametrize(
        "key",
        [
            "",
            "uploads/",
            "uploads/abc-uuid-file.png",
            "uploads/123-file.png",
            "uploads/123--file.png",
            "other/123-uuid-file.png",
            "/uploads/123-uuid-file.png",
            "uploads/123-uu/id-file.png",
            "uploads/123-uu id-file.png",
            "uploads/123-uuid-file.png\n",
        ],
    )
    def test_rejects_malformed_keys(self, key):
        assert not is_valid_object_key(key)


class TestBuildPublicUrl:

    def test_default_domain(self):
        assert (
            build_public_url("bucket", "uploads/1-x-a.png")
            == "https://bucket.s3.amazonaws.com/uploads/1-x-a.png"
        )

    def test_custom_domain(self):
        assert (
            build_public_url("b", "uploads/1-x-a.png", "s3.eu-west-1.amazonaws.com")
            == "https://b.s3.eu-west-1.amazonaws.com/uploads/1-x-a.png"
        )
