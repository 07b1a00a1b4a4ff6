from typing import List, Tuple


def csv_to_list(v: str | List[str] | None, sep: str = ",") -> List[str]:
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(s).strip() for s in v if s is not None and str(s).strip()]
    return [s.strip() for s in str(v).split(sep) if s.strip()]


def split_names(v: str | None) -> Tuple[str, ...]:
    """ffprobe joins demuxer aliases with commas: "mov,mp4,m4a" -> ("mov", "mp4", "m4a")."""
    return tuple(csv_to_list(v))
