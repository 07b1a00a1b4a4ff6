# mediaprobe/domain/entities/format.py
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from mediaprobe.common.strings.splitters import split_names
from mediaprobe.domain.entities.tags import FormatTags
from mediaprobe.domain.scalars import Duration, FlexInt


class Format(BaseModel):
    """Container-level facts (the `format` section, -show_format)."""
    model_config = ConfigDict(frozen=True)

    filename: Optional[str] = None
    nb_streams: Optional[FlexInt] = None
    nb_programs: Optional[FlexInt] = None
    nb_stream_groups: Optional[FlexInt] = None
    format_name: Optional[str] = None
    format_long_name: Optional[str] = None
    start_time: Optional[Duration] = None
    duration: Optional[Duration] = None
    size: Optional[FlexInt] = None
    bit_rate: Optional[FlexInt] = None
    probe_score: Optional[FlexInt] = None
    tags: Optional[FormatTags] = None

    @property
    def format_names(self) -> Tuple[str, ...]:
        return split_names(self.format_name)
