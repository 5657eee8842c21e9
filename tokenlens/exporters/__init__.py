"""Exporter implementations for tokenlens."""

from .base import Exporter
from .memory import InMemoryExporter

__all__ = ["Exporter", "InMemoryExporter", "PostgresExporter", "create_exporter_from_env"]


def __getattr__(name: str):
    if name in ("PostgresExporter", "create_exporter_from_env"):
        from . import postgres

        return getattr(postgres, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
