# mediaprobe/domain/entities/report.py
from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mediaprobe.domain.entities.chapter import Chapter
from mediaprobe.domain.entities.format import Format
from mediaprobe.domain.entities.streams import STREAM_TYPES, AudioStream, Stream, VideoStream
from mediaprobe.domain.enums import StreamKind


class Report(BaseModel):
    """
    Fully typed result of one ffprobe run.
    Stream order is ffprobe's order, so positions line up with `-map 0:N`.
    `format` and `chapters` are None when the section was not requested.
    """
    model_config = ConfigDict(frozen=True)

    streams: Tuple[Stream, ...] = Field(default_factory=tuple)
    format: Optional[Format] = None
    chapters: Optional[Tuple[Chapter, ...]] = None

    def streams_of(self, kind: StreamKind | str) -> List[Stream]:
        cls = STREAM_TYPES[StreamKind(kind)]
        return [s for s in self.streams if isinstance(s, cls)]

    def video_streams(self) -> List[VideoStream]:
        return self.streams_of(StreamKind.video)  # type: ignore[return-value]

    def audio_streams(self) -> List[AudioStream]:
        return self.streams_of(StreamKind.audio)  # type: ignore[return-value]

    def stream(self, index: int) -> Optional[Stream]:
        """Lookup by ffprobe `index`, which is not necessarily the position."""
        return next((s for s in self.streams if s.index == index), None)
