import json
from datetime import timedelta

import pytest

from mediaprobe.common.settings import FeatureFlags
from mediaprobe.domain.entities.streams import SubtitleStream, VideoStream
from mediaprobe.domain.enums import ErrorKind
from mediaprobe.domain.errors import ShapeError
from mediaprobe.services.probe.decoder import decode_report, decode_report_data


def test_minimal_document_end_to_end():
    raw = (
        b'{"format":{"duration":"10.0","format_name":"mov,mp4"},'
        b'"streams":[{"index":0,"codec_type":"video","codec_name":"h264","width":1280,"height":720}]}'
    )
    report = decode_report(raw)
    assert len(report.streams) == 1
    video = report.streams[0]
    assert isinstance(video, VideoStream)
    assert (video.width, video.height) == (1280, 720)
    assert report.format.duration == timedelta(seconds=10)
    assert report.format.format_name == "mov,mp4"
    assert report.chapters is None


def test_full_sample(sample_bytes):
    report = decode_report(sample_bytes)
    assert [s.kind for s in report.streams] == ["video", "audio", "subtitle", "data"]
    assert report.streams[0].time_base.denominator == 24000
    assert report.streams[1].start_time == timedelta(0)
    assert isinstance(report.streams[2], SubtitleStream)
    assert report.streams[2].disposition.forced is True
    assert report.chapters[0].title == "Opening"


def test_absent_sections_are_none_or_empty():
    report = decode_report(b"{}")
    assert report.streams == ()
    assert report.format is None
    assert report.chapters is None


@pytest.mark.parametrize("raw", [b"", b"  \n", ""])
def test_empty_output_is_shape_error(raw):
    with pytest.raises(ShapeError) as ei:
        decode_report(raw)
    assert ei.value.kind is ErrorKind.shape


@pytest.mark.parametrize("duration", ["1e20", "99999999999999"])
def test_out_of_range_duration_is_shape_error(sample_data, duration):
    sample_data["streams"][0]["duration"] = duration
    with pytest.raises(ShapeError) as ei:
        decode_report(json.dumps(sample_data).encode())
    assert ei.value.text == duration
    assert ei.value.path == "streams.0.video.duration"

    with pytest.raises(ShapeError):
        decode_report(json.dumps({"format": {"duration": duration}}).encode())


def test_one_bad_stream_fails_whole_report(sample_data):
    streams = sample_data["streams"][:3] + [{"index": 3, "codec_type": "bogus"}]
    with pytest.raises(ShapeError) as ei:
        decode_report(json.dumps({"streams": streams}).encode())
    assert ei.value.kind is ErrorKind.shape
    assert ei.value.path == "streams.3"


def test_missing_discriminant_reports_path(sample_data):
    del sample_data["streams"][1]["codec_type"]
    with pytest.raises(ShapeError) as ei:
        decode_report_data(sample_data)
    assert ei.value.path == "streams.1"
    assert ei.value.errors


def test_bad_ratio_reports_text_and_path(sample_data):
    sample_data["streams"][0]["time_base"] = "1/24000/2"
    with pytest.raises(ShapeError) as ei:
        decode_report_data(sample_data)
    assert ei.value.text == "1/24000/2"
    assert ei.value.path == "streams.0.video.time_base"


def test_bad_duration_reports_text(sample_data):
    sample_data["format"]["duration"] = "notanumber"
    with pytest.raises(ShapeError) as ei:
        decode_report_data(sample_data)
    assert ei.value.text == "notanumber"
    assert ei.value.path == "format.duration"


@pytest.mark.parametrize("raw", [b"{not json", b"[]", b'"streams"', b"\xff\xfe"])
def test_not_a_report_document(raw):
    with pytest.raises(ShapeError):
        decode_report(raw)


def test_numeric_encoding_does_not_matter(sample_data):
    quoted = json.loads(json.dumps(sample_data))
    quoted["streams"][0]["width"] = "1920"
    quoted["streams"][1]["channels"] = "2"
    quoted["format"]["probe_score"] = "100"
    assert decode_report_data(quoted) == decode_report_data(sample_data)


def test_disabled_capabilities_are_not_decoded(sample_data):
    sample_data["chapters"] = [{"garbage": True}]
    report = decode_report_data(sample_data, FeatureFlags(chapters=False))
    assert report.chapters is None
    assert len(report.streams) == 4

    report = decode_report_data(sample_data, FeatureFlags(streams=False, chapters=False))
    assert report.streams == ()
    assert report.format is not None
