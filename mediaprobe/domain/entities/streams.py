# mediaprobe/domain/entities/streams.py
from __future__ import annotations

from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from mediaprobe.domain.entities.disposition import Disposition
from mediaprobe.domain.entities.side_data import SideData
from mediaprobe.domain.entities.tags import (
    AttachmentTags,
    AudioTags,
    DataTags,
    SubtitleTags,
    VideoTags,
)
from mediaprobe.domain.enums import StreamKind
from mediaprobe.domain.scalars import AspectRatio, Duration, FlexInt, FlexStr, Ratio, RatioField


class StreamBase(BaseModel):
    """
    Fields every ffprobe stream record may carry, whatever its codec_type.
    Fields that belong to other kinds are ignored (extra="ignore").
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    index: FlexInt
    id: Optional[str] = None
    codec_name: Optional[str] = None
    codec_long_name: Optional[str] = None
    profile: Optional[str] = None
    codec_tag_string: Optional[str] = None
    codec_tag: Optional[str] = None
    extradata_size: Optional[FlexInt] = None

    time_base: Optional[RatioField] = None
    r_frame_rate: Optional[RatioField] = None
    avg_frame_rate: Optional[RatioField] = None
    start_pts: Optional[FlexInt] = None
    start_time: Optional[Duration] = None
    duration_ts: Optional[FlexInt] = None
    duration: Optional[Duration] = None

    bit_rate: Optional[FlexInt] = None
    max_bit_rate: Optional[FlexInt] = None
    bits_per_raw_sample: Optional[FlexInt] = None
    nb_frames: Optional[FlexInt] = None
    nb_read_frames: Optional[FlexInt] = None
    nb_read_packets: Optional[FlexInt] = None

    disposition: Optional[Disposition] = None
    side_data_list: Optional[Tuple[SideData, ...]] = None

    @property
    def kind(self) -> StreamKind:
        return StreamKind(self.codec_type)  # type: ignore[attr-defined]

    def side_data(self, side_data_type: str) -> Optional[SideData]:
        for sd in self.side_data_list or ():
            if sd.side_data_type == side_data_type:
                return sd
        return None


class VideoStream(StreamBase):
    codec_type: Literal["video"]
    width: FlexInt
    height: FlexInt
    coded_width: Optional[FlexInt] = None
    coded_height: Optional[FlexInt] = None
    closed_captions: Optional[FlexInt] = None
    film_grain: Optional[FlexInt] = None
    has_b_frames: Optional[FlexInt] = None
    sample_aspect_ratio: Optional[AspectRatio] = None
    display_aspect_ratio: Optional[AspectRatio] = None
    pix_fmt: Optional[str] = None
    level: Optional[FlexInt] = None
    color_range: Optional[str] = None
    color_space: Optional[str] = None
    color_transfer: Optional[str] = None
    color_primaries: Optional[str] = None
    chroma_location: Optional[str] = None
    field_order: Optional[str] = None
    refs: Optional[FlexInt] = None
    is_avc: Optional[FlexStr] = None
    nal_length_size: Optional[FlexInt] = None
    tags: Optional[VideoTags] = None

    @property
    def frame_rate(self) -> Optional[Ratio]:
        return self.r_frame_rate

    @property
    def rotation(self) -> Optional[float]:
        # newer ffprobe: display matrix side data; older: "rotate" tag (opposite sign)
        sd = self.side_data("Display Matrix")
        if sd is not None and sd.rotation is not None:
            return sd.rotation
        if self.tags is not None and self.tags.rotate is not None:
            try:
                return -float(self.tags.rotate)
            except ValueError:
                return None
        return None


class AudioStream(StreamBase):
    codec_type: Literal["audio"]
    sample_rate: FlexInt
    channels: FlexInt
    channel_layout: Optional[str] = None
    sample_fmt: Optional[str] = None
    bits_per_sample: Optional[FlexInt] = None
    initial_padding: Optional[FlexInt] = None
    tags: Optional[AudioTags] = None


class SubtitleStream(StreamBase):
    codec_type: Literal["subtitle"]
    # bitmap subtitles (dvd_subtitle, hdmv_pgs_subtitle) report a canvas size
    width: Optional[FlexInt] = None
    height: Optional[FlexInt] = None
    tags: Optional[SubtitleTags] = None


class DataStream(StreamBase):
    codec_type: Literal["data"]
    tags: Optional[DataTags] = None


class AttachmentStream(StreamBase):
    codec_type: Literal["attachment"]
    tags: Optional[AttachmentTags] = None


Stream = Annotated[
    Union[VideoStream, AudioStream, SubtitleStream, DataStream, AttachmentStream],
    Field(discriminator="codec_type"),
]

STREAM_TYPES = {
    StreamKind.video: VideoStream,
    StreamKind.audio: AudioStream,
    StreamKind.subtitle: SubtitleStream,
    StreamKind.data: DataStream,
    StreamKind.attachment: AttachmentStream,
}
