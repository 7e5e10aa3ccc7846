"""Edge styles and short port names for dot diagrams."""

from __future__ import annotations

from enum import Enum

PORT_JOINER = ":"
JOINER = "_"

_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


class EdgeArrowHead(str, Enum):
    """Arrow head shapes."""

    NORMAL = "normal"
    ONORMAL = "onormal"
    DIAMOND = "diamond"
    NONE = "none"


class EdgeType(str, Enum):
    """Edge line styles."""

    SOLID = "solid"
    DOT = "dotted"
    DASH = "dashed"


def port_str(name: str) -> str:
    """Return the short port name for an identifier."""
    for old in (".", "-", "/"):
        name = name.replace(old, JOINER)
    return generate_short_url(name)


def generate_short_url(original_url: str) -> str:
    """Hash a string with 32-bit FNV-1a and encode it in base 62, prefixed by 'd'."""
    value = _FNV_OFFSET
    for byte in original_url.encode():
        value = ((value ^ byte) * _FNV_PRIME) & 0xFFFFFFFF
    digits = ""
    while value > 0:
        value, index = divmod(value, 62)
        digits = _CHARSET[index] + digits
    return "d" + digits