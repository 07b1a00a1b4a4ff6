# mediaprobe/domain/errors.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from mediaprobe.domain.enums import ErrorKind


class FFprobeError(RuntimeError):
    """
    Base of every failure surfaced by a probe.
    `kind` alone tells the caller what to do next: reinstall/relocate the binary
    (launch), report the input as unreadable (exit), or report a malformed or
    unsupported report (shape).
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class LaunchFailure(FFprobeError):
    kind = ErrorKind.launch

    def __init__(self, message: str, *, binary: Optional[str] = None, os_error: Optional[OSError] = None) -> None:
        super().__init__(message)
        self.binary = binary
        self.os_error = os_error


class ExitFailure(FFprobeError):
    kind = ErrorKind.exit

    def __init__(
        self,
        message: str,
        *,
        returncode: Optional[int] = None,
        stdout: bytes = b"",
        stderr: bytes = b"",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace").strip()

    def __str__(self) -> str:
        detail = f" (rc={self.returncode})" if self.returncode is not None else ""
        tail = f": {self.stderr_text}" if self.stderr else ""
        return f"{self.kind}: {self.message}{detail}{tail}"


class ShapeError(FFprobeError, ValueError):
    """
    The document is not JSON, or is JSON that does not fit the report model.
    Also a ValueError so that pydantic validators can raise it directly and have it
    folded into a ValidationError with the field location attached.
    """
    kind = ErrorKind.shape

    def __init__(
        self,
        message: str,
        *,
        text: Any = None,
        path: Optional[str] = None,
        errors: Optional[Sequence[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.path = path
        self.errors: List[Dict[str, Any]] = list(errors or [])

    def __str__(self) -> str:
        where = f" at {self.path}" if self.path else ""
        return f"{self.kind}: {self.message}{where}"
