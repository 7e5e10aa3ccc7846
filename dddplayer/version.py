"""Program version and the version banner."""

from __future__ import annotations

import functools
import platform
import sys
from dataclasses import dataclass

PROGRAM = "dddplayer"


@dataclass(frozen=True)
class Version:
    """A release version."""

    major: int
    minor: int
    patch_level: int
    suffix: str = ""

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch_level}{self.suffix}"


CURRENT_VERSION = Version(0, 4, 1, "")


@dataclass(frozen=True)
class _BuildInfo:
    revision: str
    revision_time: str
    os: str
    arch: str


@functools.lru_cache(maxsize=None)
def _build_info() -> _BuildInfo:
    return _BuildInfo(
        revision="",
        revision_time="",
        os=sys.platform,
        arch=platform.machine(),
    )


def build_version_string() -> str:
    """Return the banner: program, version, platform and build date."""
    version = f"v{CURRENT_VERSION}"
    info = _build_info()
    if info.revision:
        version += f"-{info.revision}"
    date = info.revision_time or "unknown"
    return f"{PROGRAM} {version} {info.os}/{info.arch} BuildDate={date}"