# bikeflow/util/fetch.py
from __future__ import annotations

import urllib.request
from pathlib import Path

from bikeflow.config import FETCH_TIMEOUT


def is_url(src: str | Path) -> bool:
    return isinstance(src, str) and src.startswith(("http://", "https://"))


def read_text(src: str | Path, timeout: int = FETCH_TIMEOUT) -> str:
    """
    Read a local file or an http(s) URL as text.
    Network and file errors propagate to the caller.
    """
    if is_url(src):
        req = urllib.request.Request(
            src,
            headers={"User-Agent": "bikeflow/1.0"},
        )
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.read().decode("utf-8-sig", errors="replace")

    with open(src, encoding="utf-8-sig", errors="replace") as f:
        return f.read()
