"""Open a dot diagram in the web viewer."""

from __future__ import annotations

import os
import subprocess
from urllib.parse import quote

SITE_URL_ENV = "DDDPLAYER_SITE_URL"
DEFAULT_SITE_URL = "http://localhost:8080"


def _site_url() -> str:
    return os.environ.get(SITE_URL_ENV, DEFAULT_SITE_URL).rstrip("/")


def encode_uri_component(text: str) -> str:
    """Percent-encode everything except unreserved characters; spaces become %20."""
    return quote(text, safe="")


def open_diagram(raw: str) -> None:
    """Open the viewer with the diagram source carried in the URL fragment."""
    open_browser(f"{_site_url()}/#{encode_uri_component(raw)}")


def open_browser(url: str) -> None:
    """Start the system's ``open`` command on ``url`` without waiting for it."""
    subprocess.Popen(["open", url])