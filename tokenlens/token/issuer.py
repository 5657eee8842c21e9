"""Compact token issuer for symmetric algorithms."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from ..codec import base64url
from ..signature.algorithms import AlgorithmTable, default_algorithms
from ..signature.providers import HashlibHmacProvider, KeyedHashProvider
from ..signature.verifier import signing_input
from ..utils.time import utc_now


def _segment(value: Mapping[str, Any]) -> str:
    return base64url.encode(json.dumps(value, separators=(",", ":")).encode("utf-8"))


class TokenIssuer:
    """Issue compact signed tokens; the secret is supplied per call and not kept."""

    def __init__(
        self,
        *,
        algorithms: Optional[AlgorithmTable] = None,
        provider: Optional[KeyedHashProvider] = None,
    ) -> None:
        self.algorithms = algorithms if algorithms is not None else default_algorithms()
        self.provider = provider or HashlibHmacProvider()

    async def issue(
        self,
        payload: Mapping[str, Any],
        secret: str,
        *,
        algorithm: str = "HS256",
        header: Optional[Mapping[str, Any]] = None,
        ttl_seconds: Optional[int] = None,
    ) -> str:
        strategy = self.algorithms.get(algorithm)
        if strategy is None:
            raise ValueError(f"Unsupported signing algorithm '{algorithm}'.")
        if not secret:
            raise ValueError("A secret is required to sign a token.")

        token_header: Dict[str, Any] = {"alg": algorithm, "typ": "JWT"}
        token_header.update(header or {})
        token_header["alg"] = algorithm

        claims = dict(payload)
        if ttl_seconds is not None:
            issued_at = int(utc_now().timestamp())
            claims.setdefault("iat", issued_at)
            claims["exp"] = issued_at + ttl_seconds

        header_raw = _segment(token_header)
        payload_raw = _segment(claims)
        sig = await strategy.sign(self.provider, signing_input(header_raw, payload_raw), secret)
        return f"{header_raw}.{payload_raw}.{base64url.encode(sig)}"
