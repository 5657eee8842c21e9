"""Hashing helpers."""

from __future__ import annotations

import hashlib


def sha256_hex(value: str) -> str:
    """Return SHA-256 hex digest for the provided string value."""
    return hashlib.sha256(value.encode("utf-8", "surrogatepass")).hexdigest()


def token_fingerprint(token_text: str) -> str:
    """Short stable identifier for a token, safe to log."""
    return sha256_hex(token_text.strip())[:16]
