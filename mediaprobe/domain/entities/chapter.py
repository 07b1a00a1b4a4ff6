from __future__ import annotations

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict

from mediaprobe.domain.entities.tags import ChapterTags
from mediaprobe.domain.scalars import Duration, FlexInt, RatioField


class Chapter(BaseModel):
    """
    One entry of the `chapters` section. `start`/`end` are ticks of `time_base`;
    `start_time`/`end_time` are the same instants already converted by ffprobe.
    """
    model_config = ConfigDict(frozen=True)

    id: FlexInt
    time_base: RatioField
    start: FlexInt
    end: FlexInt
    start_time: Optional[Duration] = None
    end_time: Optional[Duration] = None
    tags: Optional[ChapterTags] = None

    @property
    def title(self) -> Optional[str]:
        return self.tags.title if self.tags else None

    @property
    def length(self) -> Optional[timedelta]:
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time
