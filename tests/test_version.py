import platform
import sys

from dddplayer.version import CURRENT_VERSION, Version, build_version_string


def test_version_string_format():
    assert str(Version(1, 2, 3, "-rc")) == "1.2.3-rc"
    assert str(Version(0, 4, 1)) == str(CURRENT_VERSION)


def test_current_version_fields():
    assert str(CURRENT_VERSION) == "0.4.1"
    assert Version(0, 4, 1) == CURRENT_VERSION


def test_build_version_string():
    banner = build_version_string()
    assert banner.startswith(f"dddplayer v{CURRENT_VERSION} ")
    assert f"{sys.platform}/{platform.machine()}" in banner
    assert banner.endswith("BuildDate=unknown")