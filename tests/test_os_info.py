from osinfo.os_info import OSInfo
from osinfo.version import SemanticVersion, UnknownVersion


def test_unknown():
    info = OSInfo.unknown()
    assert info.id == "Unknown"
    assert info.name == ""
    assert info.version == UnknownVersion()
    assert info.variant is None
    assert info.edition is None
    assert info.codename is None


def test_default():
    assert OSInfo() == OSInfo.unknown()


def test_with_id_sets_id():
    info = OSInfo.with_id("test_id")
    assert info.id == "test_id"
    assert info.name == ""


def test_with_name_sets_name():
    info = OSInfo.with_name("TestOS")
    assert info.name == "TestOS"
    assert info.id == "Unknown"


def test_display_format():
    info = OSInfo.with_id("linux")
    info.name = "Ubuntu"
    info.variant = "Server"
    display = str(info)
    assert "linux" in display
    assert "Ubuntu" in display
    assert "Server" in display
    assert display == "linux (Ubuntu) (Server)"


def test_display_unknown():
    assert str(OSInfo.unknown()) == "Unknown ()"


def test_display_without_id_or_name():
    info = OSInfo(id=None, name=None)
    assert str(info) == ""


def test_ordering_none_before_value():
    assert OSInfo(id=None) < OSInfo(id="a")
    assert OSInfo(id="a", version=UnknownVersion()) < OSInfo(id="a", version=SemanticVersion(1, 0, 0, 0))


def test_distinct_instances_do_not_share_version():
    first = OSInfo.unknown()
    second = OSInfo.unknown()
    first.version = SemanticVersion(2, 0, 0, 0)
    assert second.version == UnknownVersion()