"""Unit tests for media field bound checks."""

import pytest

from media_ledger.errors import InvalidNameError, InvalidSizeError, MalformedLabelError
from media_ledger.services.validator import (
    check_media_fields,
    validate_byte_count,
    validate_label,
    validate_label_set,
    validate_name,
    validate_summary,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", False), ("a", True), ("x" * 32, True), ("x" * 33, False), (None, False), (7, False)],
)
def test_validate_label(text, expected) -> None:
    assert validate_label(text) is expected


def test_validate_label_set_bounds() -> None:
    assert validate_label_set(["video"]) is True
    assert validate_label_set(["x" * 32] * 10) is True
    assert validate_label_set([]) is False
    assert validate_label_set(["a"] * 11) is False
    assert validate_label_set(["ok", ""]) is False
    assert validate_label_set(["ok", "x" * 33]) is False


def test_validate_label_set_rejects_non_sequences() -> None:
    assert validate_label_set("video") is False
    assert validate_label_set(None) is False


def test_validate_name_bounds() -> None:
    assert validate_name("a") is True
    assert validate_name("x" * 63) is True
    assert validate_name("") is False
    assert validate_name("x" * 64) is False
    assert validate_name(b"clip") is False


def test_validate_summary_bounds() -> None:
    assert validate_summary("d") is True
    assert validate_summary("x" * 127) is True
    assert validate_summary("") is False
    assert validate_summary("x" * 128) is False


def test_validate_byte_count_bounds() -> None:
    assert validate_byte_count(1) is True
    assert validate_byte_count(999_999_999) is True
    assert validate_byte_count(0) is False
    assert validate_byte_count(-5) is False
    assert validate_byte_count(1_000_000_000) is False
    assert validate_byte_count(True) is False
    assert validate_byte_count(10.0) is False


def test_check_media_fields_accepts_valid_input() -> None:
    check_media_fields("clip.mp4", 1024, "demo", ["video"])


def test_check_media_fields_reports_first_violation() -> None:
    # Both name and size are bad; name is checked first
    with pytest.raises(InvalidNameError):
        check_media_fields("", 0, "demo", [])
    with pytest.raises(InvalidSizeError):
        check_media_fields("clip.mp4", 0, "demo", [])
    with pytest.raises(MalformedLabelError):
        check_media_fields("clip.mp4", 10, "demo", [])


def test_check_media_fields_summary_uses_name_kind() -> None:
    with pytest.raises(InvalidNameError) as exc_info:
        check_media_fields("clip.mp4", 10, "", ["video"])
    assert exc_info.value.kind == "invalid-name"
    assert "Summary" in exc_info.value.message
