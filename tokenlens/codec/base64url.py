"""Unpadded URL-safe Base64 as used by compact token segments."""

from __future__ import annotations

import base64
import binascii

_TO_STANDARD = str.maketrans("-_", "+/")


class InvalidEncoding(ValueError):
    """Raised when text is not a decodable Base64URL string."""


def encode(data: bytes) -> str:
    """Encode bytes with the URL-safe alphabet and strip ``=`` padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").replace("=", "")


def decode(text: str) -> bytes:
    """Decode Base64URL text, restoring padding as needed.

    A length with remainder 1 modulo 4 can never be produced by an encoder
    and is rejected before touching :mod:`base64`. Empty input decodes to
    ``b""``.
    """
    standard = text.translate(_TO_STANDARD)
    pad = len(standard) % 4
    if pad == 1:
        raise InvalidEncoding("Invalid base64url string: length has remainder 1 modulo 4")
    if pad:
        standard += "=" * (4 - pad)
    try:
        raw = standard.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidEncoding("Invalid base64url string: non-ASCII character") from exc
    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as exc:
        raise InvalidEncoding(f"Invalid base64url string: {exc}") from exc
