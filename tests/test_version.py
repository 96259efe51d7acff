import pytest

from osinfo.version import (
    CustomVersion,
    RollingVersion,
    SemanticVersion,
    UnknownVersion,
    parse_version,
    version_from_string,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", None),
        ("version", None),
        ("1", (1, 0, 0, 0)),
        ("1.", (1, 0, 0, 0)),
        ("1.2", (1, 2, 0, 0)),
        ("1.2.", (1, 2, 0, 0)),
        ("1.2.3", (1, 2, 3, 0)),
        ("1.2.3.", (1, 2, 3, 0)),
        ("1.2.3.  ", (1, 2, 3, 0)),
        ("   1.2.3.", (1, 2, 3, 0)),
        ("   1.2.3.  ", (1, 2, 3, 0)),
        ("1.2.3.4", (1, 2, 3, 4)),
        ("1.2.3.4.", (1, 2, 3, 4)),
        ("1.2.3.4.5.6.7.8.9", None),
    ],
)
def test_parse_semantic_version(text, expected):
    assert parse_version(text) == expected


@pytest.mark.parametrize("text", [".", "1..2", ".5", "1.x", "4294967296", "-1"])
def test_parse_rejects_malformed(text):
    assert parse_version(text) is None


def test_parse_accepts_upper_bound():
    assert parse_version("4294967295") == (4294967295, 0, 0, 0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", UnknownVersion()),
        ("1.2.3.4", SemanticVersion(1, 2, 3, 4)),
        ("some version", CustomVersion("some version")),
        ("custom", CustomVersion("custom")),
    ],
)
def test_from_string(text, expected):
    assert version_from_string(text) == expected


def test_default_rolling_has_no_date():
    assert RollingVersion() == RollingVersion(None)


@pytest.mark.parametrize(
    "version, expected",
    [
        (UnknownVersion(), "Unknown"),
        (SemanticVersion(1, 5, 0, 1), "1.5.0.1"),
        (RollingVersion(None), "Rolling Release"),
        (RollingVersion("date"), "Rolling Release (date)"),
        (CustomVersion("22H2"), "22H2"),
    ],
)
def test_display(version, expected):
    assert str(version) == expected


def test_ordering_by_kind_then_value():
    ordered = [
        UnknownVersion(),
        SemanticVersion(1, 2, 0, 0),
        SemanticVersion(1, 10, 0, 0),
        RollingVersion(None),
        RollingVersion("2024"),
        CustomVersion("a"),
    ]
    assert sorted(reversed(ordered)) == ordered


def test_versions_are_hashable():
    assert len({SemanticVersion(1, 0, 0, 0), version_from_string("1")}) == 1