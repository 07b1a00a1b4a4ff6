# mediaprobe/services/probe/decoder.py
"""
bytes -> Report. Pure and synchronous: no I/O, no logging, no retries.
Any problem anywhere in the document fails the whole decode.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from mediaprobe.common.settings import FeatureFlags
from mediaprobe.domain.entities.report import Report
from mediaprobe.domain.errors import ShapeError

_SECTIONS = ("streams", "format", "chapters")


def _error_path(loc) -> str:
    return ".".join(str(p) for p in loc)


def _shape_error_from(exc: ValidationError) -> ShapeError:
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {}
    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, ShapeError):
        message, text = cause.message, cause.text
    else:
        message, text = first.get("msg", str(exc)), first.get("input")
    return ShapeError(
        f"{message} ({exc.error_count()} error(s))",
        text=text,
        path=_error_path(first.get("loc", ())) or None,
        errors=errors,
    )


def decode_report_data(data: Any, capabilities: Optional[FeatureFlags] = None) -> Report:
    """Validate an already-parsed ffprobe document."""
    if not isinstance(data, Mapping):
        raise ShapeError(f"expected a JSON object at top level, got {type(data).__name__}", text=data)
    if capabilities is not None:
        data = {k: v for k, v in data.items() if k not in _SECTIONS or getattr(capabilities, k)}
    try:
        return Report.model_validate(data)
    except ValidationError as e:
        raise _shape_error_from(e) from e


def decode_report(raw: bytes | str, capabilities: Optional[FeatureFlags] = None) -> Report:
    """
    Decode ffprobe's `-print_format json` output.
    Empty output is not a document and fails like any other invalid JSON.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ShapeError("ffprobe output is not valid UTF-8", text=bytes(raw[e.start:e.end])) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ShapeError(f"ffprobe produced invalid JSON: {e.msg}", text=raw[e.pos:e.pos + 40]) from e
    return decode_report_data(data, capabilities)
