"""Capability table mapping algorithm names to signing strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .providers import KeyedHashProvider


class SignatureStrategy(ABC):
    """How to compute the expected signature bytes for one algorithm."""

    @abstractmethod
    async def sign(self, provider: KeyedHashProvider, signing_input: bytes, secret: str) -> bytes:
        """Return raw signature bytes."""


@dataclass(frozen=True)
class HmacStrategy(SignatureStrategy):
    """Symmetric keyed hash; the secret is used as raw UTF-8 key bytes."""

    hash_name: str

    async def sign(self, provider: KeyedHashProvider, signing_input: bytes, secret: str) -> bytes:
        return await provider.digest(secret.encode("utf-8"), signing_input, self.hash_name)


class AlgorithmTable:
    """Allowlist of verifiable algorithms. Names not registered are denied."""

    def __init__(self, strategies: Optional[Dict[str, SignatureStrategy]] = None) -> None:
        self._strategies: Dict[str, SignatureStrategy] = dict(strategies or {})

    def register(self, name: str, strategy: SignatureStrategy) -> None:
        self._strategies[name] = strategy

    def get(self, name: Any) -> Optional[SignatureStrategy]:
        if not isinstance(name, str):
            return None
        return self._strategies.get(name)

    def supported(self) -> list[str]:
        return sorted(self._strategies)


def default_algorithms() -> AlgorithmTable:
    """Table with HS256 as the only entry."""
    return AlgorithmTable({"HS256": HmacStrategy("sha256")})
