# mediaprobe/domain/entities/disposition.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict


class Disposition(BaseModel):
    """Role flags of a stream. ffprobe writes them as 0/1; absent means False."""
    model_config = ConfigDict(frozen=True)

    default: bool = False
    dub: bool = False
    original: bool = False
    comment: bool = False
    lyrics: bool = False
    karaoke: bool = False
    forced: bool = False
    hearing_impaired: bool = False
    visual_impaired: bool = False
    clean_effects: bool = False
    attached_pic: bool = False
    timed_thumbnails: bool = False
    non_diegetic: bool = False
    captions: bool = False
    descriptions: bool = False
    metadata: bool = False
    dependent: bool = False
    still_image: bool = False

    def active(self) -> List[str]:
        return [name for name, on in self.model_dump().items() if on]
