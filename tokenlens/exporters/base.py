"""Base exporter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..record import InspectionRecord


class Exporter(ABC):
    """Abstract base class for verification audit exporters."""

    @abstractmethod
    async def export(self, record: InspectionRecord) -> None:
        """Export one verification record."""

    async def close(self) -> None:
        """Close exporter resources if needed."""
