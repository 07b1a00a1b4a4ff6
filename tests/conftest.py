# tests/conftest.py
from __future__ import annotations

import copy
import json

import pytest

from mediaprobe.common import settings as settings_mod

# Trimmed real output of: ffprobe -v error -print_format json -show_chapters -show_format -show_streams
SAMPLE = {
    "streams": [
        {
            "index": 0,
            "codec_name": "h264",
            "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
            "profile": "High",
            "codec_type": "video",
            "codec_tag_string": "avc1",
            "codec_tag": "0x31637661",
            "width": 1920,
            "height": 1080,
            "coded_width": 1920,
            "coded_height": 1080,
            "closed_captions": 0,
            "has_b_frames": 2,
            "sample_aspect_ratio": "1:1",
            "display_aspect_ratio": "16:9",
            "pix_fmt": "yuv420p",
            "level": 40,
            "color_range": "tv",
            "chroma_location": "left",
            "refs": 1,
            "is_avc": "true",
            "nal_length_size": "4",
            "id": "0x1",
            "r_frame_rate": "24000/1001",
            "avg_frame_rate": "24000/1001",
            "time_base": "1/24000",
            "start_pts": 0,
            "start_time": "0.000000",
            "duration_ts": 1441440,
            "duration": "60.060000",
            "bit_rate": "4982613",
            "bits_per_raw_sample": "8",
            "nb_frames": "1440",
            "disposition": {"default": 1, "dub": 0, "forced": 0, "hearing_impaired": 0},
            "tags": {
                "language": "und",
                "handler_name": "VideoHandler",
                "vendor_id": "[0][0][0][0]",
                "encoder": "Lavc60.3.100 libx264",
            },
            "side_data_list": [
                {
                    "side_data_type": "Display Matrix",
                    "displaymatrix": "\n00000000:            0       65536           0\n",
                    "rotation": -90,
                }
            ],
        },
        {
            "index": 1,
            "codec_name": "aac",
            "codec_long_name": "AAC (Advanced Audio Coding)",
            "profile": "LC",
            "codec_type": "audio",
            "sample_fmt": "fltp",
            "sample_rate": "48000",
            "channels": 2,
            "channel_layout": "stereo",
            "bits_per_sample": 0,
            "r_frame_rate": "0/0",
            "avg_frame_rate": "0/0",
            "time_base": "1/48000",
            "start_pts": -1024,
            "start_time": "-0.021333",
            "duration": "60.053333",
            "bit_rate": "128000",
            "disposition": {"default": 1},
            "tags": {"language": "eng", "handler_name": "SoundHandler"},
        },
        {
            "index": 2,
            "codec_name": "mov_text",
            "codec_long_name": "MOV text",
            "codec_type": "subtitle",
            "time_base": "1/1000",
            "disposition": {"default": 0, "forced": 1},
            "tags": {"language": "fre", "handler_name": "SubtitleHandler"},
        },
        {
            "index": 3,
            "codec_type": "data",
            "codec_tag_string": "tmcd",
            "codec_tag": "0x64636d74",
            "time_base": "1/24000",
            "tags": {"handler_name": "TimeCodeHandler", "timecode": "00:00:00:00"},
        },
    ],
    "chapters": [
        {
            "id": 0,
            "time_base": "1/1000",
            "start": 0,
            "start_time": "0.000000",
            "end": 30000,
            "end_time": "30.000000",
            "tags": {"title": "Opening"},
        },
        {
            "id": 1,
            "time_base": "1/1000",
            "start": 30000,
            "start_time": "30.000000",
            "end": 60060,
            "end_time": "60.060000",
            "tags": {"title": "Credits"},
        },
    ],
    "format": {
        "filename": "sample.mp4",
        "nb_streams": 4,
        "nb_programs": 0,
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "format_long_name": "QuickTime / MOV",
        "start_time": "-0.021333",
        "duration": "60.060000",
        "size": "38432211",
        "bit_rate": "5119198",
        "probe_score": 100,
        "tags": {
            "major_brand": "isom",
            "minor_version": "512",
            "compatible_brands": "isomiso2avc1mp41",
            "encoder": "Lavf60.3.100",
            "com.apple.quicktime.make": "Apple",
        },
    },
}


@pytest.fixture()
def sample_data() -> dict:
    return copy.deepcopy(SAMPLE)


@pytest.fixture()
def sample_bytes(sample_data) -> bytes:
    return json.dumps(sample_data).encode("utf-8")


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()
