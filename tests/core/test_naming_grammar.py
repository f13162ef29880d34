# topmark:header:start
#
#   project      : KvgKit
#   file         : test_naming_grammar.py
#   file_relpath : tests/core/test_naming_grammar.py
#   license      : MIT
#   copyright    : (c) 2026 KvgKit contributors
#
# topmark:header:end

"""File name and identifier grammar."""

from __future__ import annotations

import pytest

from kvgkit.core.errors import ValidationError
from kvgkit.naming import (
    VARIANT_SUFFIXES,
    FileName,
    base_tail,
    codepoint_to_hex_id,
    file_codepoint,
    group_id_number,
    hex_id_to_codepoint,
    is_backup_file,
    is_variant_suffix,
    parse_element_id,
    parse_file_name,
    path_id_number,
)
from tests.conftest import parametrize


def test_parse_plain_file_name() -> None:
    """A bare hex id names the standard form of a character."""
    parsed: FileName | None = parse_file_name("04e00.svg")
    assert parsed is not None
    assert parsed.id == "04e00"
    assert parsed.codepoint == 0x4E00
    assert parsed.character == "一"
    assert parsed.variant is None
    assert parsed.extension == ".svg"
    assert parsed.base == "kvg:04e00"


def test_parse_variant_file_name_ignores_directories() -> None:
    """Leading directories are not part of the name."""
    parsed: FileName | None = parse_file_name("kanji/sub/05b57-Kaisho.svg")
    assert parsed is not None
    assert parsed.id == "05b57-Kaisho"
    assert parsed.variant == "Kaisho"
    assert parsed.base == "kvg:05b57-Kaisho"


def test_longest_variant_suffix_wins() -> None:
    """`HzFstLeRi` is not cut short at `HzFst`."""
    parsed: FileName | None = parse_file_name("0826d-HzFstLeRi.svg")
    assert parsed is not None
    assert parsed.variant == "HzFstLeRi"


@parametrize(
    "name",
    ["04E00.svg", "4e00.svg", "04e00-Unknown.svg", "04e00.xml", "04e00-.svg", "#04e00.svg#"],
)
def test_parse_file_name_rejects_off_grammar_names(name: str) -> None:
    """Uppercase digits, short ids, unknown suffixes and other extensions are rejected."""
    assert parse_file_name(name) is None


def test_file_codepoint_is_lenient_about_suffixes() -> None:
    """Any suffix is accepted when only the code point matters."""
    assert file_codepoint("05b57-Whatever.svg") == 0x5B57
    assert file_codepoint("kanji/04e00.svg") == 0x4E00
    with pytest.raises(ValidationError):
        file_codepoint("README.md")


def test_hex_id_conversions() -> None:
    """Hex ids are five lowercase digits."""
    assert hex_id_to_codepoint("05b57") == 0x5B57
    assert codepoint_to_hex_id(0x4E00) == "04e00"
    assert codepoint_to_hex_id(0x20B9F) == "20b9f"
    with pytest.raises(ValidationError):
        hex_id_to_codepoint("5B57")


def test_variant_suffix_set() -> None:
    """The closed set of suffixes is exposed for membership tests."""
    assert len(VARIANT_SUFFIXES) == 26
    assert is_variant_suffix("Kaisho")
    assert is_variant_suffix("MdFst2")
    assert not is_variant_suffix("kaisho")


def test_parse_element_ids() -> None:
    """Group and path ids decompose into base and number."""
    group = parse_element_id("kvg:05b57-Kaisho-g12")
    assert group is not None
    assert (group.hex_id, group.tail, group.kind, group.number) == ("05b57", "-Kaisho", "g", 12)
    assert group.base == "kvg:05b57-Kaisho"

    path = parse_element_id("kvg:04e00-s1")
    assert path is not None
    assert (path.kind, path.number, path.base) == ("s", 1, "kvg:04e00")

    assert parse_element_id("kvg:04e00") is None
    assert parse_element_id("kvg:StrokePaths_04e00") is None


def test_id_number_helpers_check_the_kind() -> None:
    """Asking for a path number of a group id is a caller error."""
    assert path_id_number("kvg:04e00-s3") == 3
    assert group_id_number("kvg:04e00-g2") == 2
    with pytest.raises(ValidationError):
        path_id_number("kvg:04e00-g2")
    with pytest.raises(ValidationError):
        group_id_number("nonsense")


def test_base_tail_requires_prefix() -> None:
    """Base identifiers carry the `kvg:` prefix."""
    assert base_tail("kvg:05b57-Kaisho") == "05b57-Kaisho"
    with pytest.raises(ValidationError):
        base_tail("05b57")


@parametrize(
    ("path", "expected"),
    [
        ("kanji/.#04e00.svg", True),
        ("kanji/#04e00.svg#", True),
        ("kanji/04e00.svg~", True),
        ("kanji/04e00.svg", False),
    ],
)
def test_is_backup_file(path: str, expected: bool) -> None:
    """Editor lock and backup files are recognized by name."""
    assert is_backup_file(path) is expected
