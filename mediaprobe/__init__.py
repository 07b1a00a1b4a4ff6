"""
Typed access to ffprobe reports.

    from mediaprobe import ffprobe
    report = ffprobe("movie.mkv")
    report.video_streams()[0].width
"""
from mediaprobe.domain.entities.chapter import Chapter
from mediaprobe.domain.entities.disposition import Disposition
from mediaprobe.domain.entities.format import Format
from mediaprobe.domain.entities.report import Report
from mediaprobe.domain.entities.side_data import SideData
from mediaprobe.domain.entities.streams import (
    AttachmentStream,
    AudioStream,
    DataStream,
    Stream,
    StreamBase,
    SubtitleStream,
    VideoStream,
)
from mediaprobe.domain.entities.tags import (
    AttachmentTags,
    AudioTags,
    ChapterTags,
    DataTags,
    FormatTags,
    StreamTags,
    SubtitleTags,
    Tags,
    VideoTags,
)
from mediaprobe.domain.enums import ErrorKind, StreamKind
from mediaprobe.domain.errors import ExitFailure, FFprobeError, LaunchFailure, ShapeError
from mediaprobe.domain.scalars import Ratio, parse_duration, parse_ratio
from mediaprobe.services.probe.decoder import decode_report, decode_report_data
from mediaprobe.services.probe.ffprobe_adapter import (
    FFprobeAdapter,
    ProbeConfig,
    build_ffprobe_cmd,
    decode_output,
    ffprobe,
    ffprobe_async,
)

__all__ = [
    "AttachmentStream",
    "AttachmentTags",
    "AudioStream",
    "AudioTags",
    "Chapter",
    "ChapterTags",
    "DataStream",
    "DataTags",
    "Disposition",
    "ErrorKind",
    "ExitFailure",
    "FFprobeAdapter",
    "FFprobeError",
    "Format",
    "FormatTags",
    "LaunchFailure",
    "ProbeConfig",
    "Ratio",
    "Report",
    "ShapeError",
    "SideData",
    "Stream",
    "StreamBase",
    "StreamKind",
    "StreamTags",
    "SubtitleStream",
    "SubtitleTags",
    "Tags",
    "VideoStream",
    "VideoTags",
    "build_ffprobe_cmd",
    "decode_output",
    "decode_report",
    "decode_report_data",
    "ffprobe",
    "ffprobe_async",
    "parse_duration",
    "parse_ratio",
]
