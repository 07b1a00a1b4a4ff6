from __future__ import annotations
from enum import StrEnum


class ErrorKind(StrEnum):
    launch = "launch"  # binary missing / not executable: fix the install or the path
    exit = "exit"      # ffprobe ran and refused the input
    shape = "shape"    # output does not match the report schema
