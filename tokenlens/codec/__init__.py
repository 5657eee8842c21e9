"""Base64URL codec for compact token segments."""

from .base64url import InvalidEncoding, decode, encode

__all__ = ["encode", "decode", "InvalidEncoding"]
