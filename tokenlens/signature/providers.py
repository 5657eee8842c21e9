"""Keyed-hash providers backing signature computation."""

from __future__ import annotations

import hmac
from abc import ABC, abstractmethod


class KeyedHashProvider(ABC):
    """Computes a MAC over a message; the only awaited step of verification."""

    @abstractmethod
    async def digest(self, key: bytes, message: bytes, hash_name: str) -> bytes:
        """Return raw MAC bytes for ``message`` under ``key``."""


class HashlibHmacProvider(KeyedHashProvider):
    """HMAC provider using the standard :mod:`hmac` module."""

    async def digest(self, key: bytes, message: bytes, hash_name: str) -> bytes:
        return hmac.new(key, message, hash_name).digest()
