# mediaprobe/domain/entities/tags.py
from __future__ import annotations

from typing import Dict, Iterator, Optional

from pydantic import BaseModel, ConfigDict


class Tags(BaseModel):
    """
    Free-form metadata as written by the muxer. Known keys get attributes,
    everything else is kept as an extra so newer ffprobe/muxer keys survive.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    __pydantic_extra__: Dict[str, str]

    def as_dict(self) -> Dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.as_dict().get(key, default)

    def __getitem__(self, key: str) -> str:
        return self.as_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.as_dict()

    def __len__(self) -> int:
        return len(self.as_dict())

    def keys(self):
        return self.as_dict().keys()

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.as_dict())


class StreamTags(Tags):
    language: Optional[str] = None
    title: Optional[str] = None
    handler_name: Optional[str] = None


class VideoTags(StreamTags):
    vendor_id: Optional[str] = None
    encoder: Optional[str] = None
    timecode: Optional[str] = None
    rotate: Optional[str] = None


class AudioTags(StreamTags):
    vendor_id: Optional[str] = None


class SubtitleTags(StreamTags):
    pass


class DataTags(Tags):
    handler_name: Optional[str] = None
    timecode: Optional[str] = None


class AttachmentTags(Tags):
    filename: Optional[str] = None
    mimetype: Optional[str] = None


class FormatTags(Tags):
    title: Optional[str] = None
    encoder: Optional[str] = None
    creation_time: Optional[str] = None
    major_brand: Optional[str] = None
    minor_version: Optional[str] = None
    compatible_brands: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    date: Optional[str] = None
    comment: Optional[str] = None


class ChapterTags(Tags):
    title: Optional[str] = None
