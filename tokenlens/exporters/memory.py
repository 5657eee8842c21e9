"""In-process exporter, mostly useful for tests and the CLI."""

from __future__ import annotations

from typing import List

from ..record import InspectionRecord
from .base import Exporter


class InMemoryExporter(Exporter):
    """Keeps exported records in a list."""

    def __init__(self) -> None:
        self.records: List[InspectionRecord] = []

    async def export(self, record: InspectionRecord) -> None:
        self.records.append(record)
