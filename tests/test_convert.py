import pytest

from qstools.convert import (
    ByteSizeError,
    ReadableSizeFormatError,
    parse_byte_size,
    unix_readable_size,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1B", 1),
        ("1GB", 1024 * 1024 * 1024),
        ("1 GB", 1024 * 1024 * 1024),
        ("1 G", 1024 * 1024 * 1024),
    ],
)
def test_parse_byte_size(text, expected):
    assert parse_byte_size(text) == expected


@pytest.mark.parametrize("text", ["Gb", "G"])
def test_parse_byte_size_invalid(text):
    with pytest.raises(ByteSizeError) as info:
        parse_byte_size(text)
    assert info.value.value == text


def test_parse_byte_size_unknown_unit():
    with pytest.raises(ByteSizeError):
        parse_byte_size("1 xyz")


def test_parse_byte_size_units_are_case_insensitive():
    assert parse_byte_size("3 mb") == parse_byte_size("3MB")
    assert parse_byte_size("3 mb") == 3 * parse_byte_size("1 MB")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 EB", "1E"),
        ("1 PB", "1P"),
        ("1 TB", "1T"),
        ("1 GB", "1G"),
        ("1 MB", "1M"),
        ("1 KB", "1K"),
        ("1 B", "1B"),
    ],
)
def test_unix_readable_size(text, expected):
    assert unix_readable_size(text) == expected


@pytest.mark.parametrize("text", ["1PB", "1 ", " 1"])
def test_unix_readable_size_invalid(text):
    with pytest.raises(ReadableSizeFormatError) as info:
        unix_readable_size(text)
    assert info.value.value == text