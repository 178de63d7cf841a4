"""Digest identifying the translation resource a table was built from."""
from __future__ import annotations

import hashlib


def text_digest(text: str, algorithm: str = "sha256") -> str:
    """Compute hex digest of *text* encoded as UTF-8."""
    h = hashlib.new(algorithm)
    h.update(text.encode("utf-8"))
    return f"{algorithm}:{h.hexdigest()}"
