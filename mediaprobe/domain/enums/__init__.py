from mediaprobe.domain.enums.error_kind import ErrorKind
from mediaprobe.domain.enums.stream_kind import StreamKind
__all__ = [
    "ErrorKind",
    "StreamKind",
]
