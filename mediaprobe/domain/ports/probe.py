from __future__ import annotations
from pathlib import Path
from typing import Protocol
from mediaprobe.domain.entities.report import Report

class MediaProbePort(Protocol):
    def probe(self, path: str | Path) -> Report: ...

    async def probe_async(self, path: str | Path) -> Report: ...
