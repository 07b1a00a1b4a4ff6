# mediaprobe/services/probe/ffprobe_adapter.py
from __future__ import annotations

import asyncio
import os
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from mediaprobe.common.logging import get_logger
from mediaprobe.common.settings import FeatureFlags, Settings, get_settings
from mediaprobe.domain.entities.report import Report
from mediaprobe.domain.errors import ExitFailure, LaunchFailure
from mediaprobe.domain.ports.probe import MediaProbePort
from mediaprobe.services.probe.decoder import decode_report

logger = get_logger(__name__)

# keep a console window from flashing up on Windows
_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0)


class ProbeConfig(BaseModel):
    ffprobe_bin: str = "ffprobe"
    count_frames: bool = False
    capabilities: FeatureFlags = Field(default_factory=FeatureFlags)
    log_level: str = "error"
    timeout_sec: float = Field(30, gt=0)
    extra_args: List[str] = Field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ProbeConfig":
        cfg = settings or get_settings()
        return cls(
            ffprobe_bin=cfg.ffprobe.bin,
            count_frames=cfg.ffprobe.count_frames,
            capabilities=cfg.features,
            log_level=cfg.ffprobe.log_level,
            timeout_sec=cfg.ffprobe.timeout_sec,
            extra_args=cfg.ffprobe.extra_arg_list,
        )


def build_ffprobe_cmd(input_path: str | os.PathLike, config: Optional[ProbeConfig] = None) -> List[str]:
    """
    Build the ffprobe command line for one input (file path or URL).
    Only the sections enabled in `config.capabilities` are requested.
    """
    config = config or ProbeConfig()
    caps = config.capabilities
    cmd = [config.ffprobe_bin, "-v", config.log_level, "-print_format", "json"]
    if caps.chapters:
        cmd.append("-show_chapters")
    if caps.format:
        cmd.append("-show_format")
    if caps.streams:
        cmd.append("-show_streams")
    if config.count_frames:
        cmd.append("-count_frames")
    cmd.extend(config.extra_args)
    cmd.append(os.fspath(input_path))
    return cmd


def decode_output(
    returncode: Optional[int],
    stdout: bytes,
    stderr: bytes = b"",
    capabilities: Optional[FeatureFlags] = None,
) -> Report:
    """
    Turn a finished ffprobe run into a Report.
    A failed run never gets its stdout parsed.
    """
    if returncode != 0:
        raise ExitFailure(
            "ffprobe returned non-zero exit code",
            returncode=returncode,
            stdout=stdout or b"",
            stderr=stderr or b"",
        )
    return decode_report(stdout or b"", capabilities)


async def _reap(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is None:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    await proc.wait()


class FFprobeAdapter(MediaProbePort):
    """
    Runs ffprobe and decodes its JSON report.
    Safe to share between threads; every call owns its own process and buffers.
    """

    def __init__(self, config: Optional[ProbeConfig] = None):
        if config is None:
            cfg = get_settings()
            get_logger(level=cfg.log_level)
            config = ProbeConfig.from_settings(cfg)
        self.config = config

    def command(self, path: str | Path) -> List[str]:
        return build_ffprobe_cmd(path, self.config)

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: str | Path) -> Report:
        cmd = self.command(path)
        logger.debug("ffprobe cmd: %s", shlex.join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.config.timeout_sec,
                check=False,  # rc handled in decode_output so stderr is kept
                creationflags=_CREATION_FLAGS,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning("ffprobe timed out after %ss: %s", self.config.timeout_sec, path)
            raise ExitFailure(
                f"ffprobe timed out after {self.config.timeout_sec}s",
                stdout=e.stdout or b"",
                stderr=e.stderr or b"",
            ) from e
        except OSError as e:
            logger.warning("failed to execute %s: %s", self.config.ffprobe_bin, e)
            raise LaunchFailure(
                f"Failed to execute ffprobe ({e.strerror or e})",
                binary=self.config.ffprobe_bin,
                os_error=e,
            ) from e

        if proc.returncode != 0:
            logger.warning("ffprobe exited with %s for %s", proc.returncode, path)
        return decode_output(proc.returncode, proc.stdout, proc.stderr, self.config.capabilities)

    async def probe_async(self, path: str | Path) -> Report:
        cmd = self.command(path)
        logger.debug("ffprobe cmd (async): %s", shlex.join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                creationflags=_CREATION_FLAGS,
            )
        except OSError as e:
            logger.warning("failed to execute %s: %s", self.config.ffprobe_bin, e)
            raise LaunchFailure(
                f"Failed to execute ffprobe ({e.strerror or e})",
                binary=self.config.ffprobe_bin,
                os_error=e,
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.config.timeout_sec)
        except asyncio.TimeoutError as e:
            await _reap(proc)
            logger.warning("ffprobe timed out after %ss: %s", self.config.timeout_sec, path)
            raise ExitFailure(f"ffprobe timed out after {self.config.timeout_sec}s") from e
        except BaseException:
            # cancelled while waiting: never leave ffprobe running behind us
            await _reap(proc)
            raise

        if proc.returncode != 0:
            logger.warning("ffprobe exited with %s for %s", proc.returncode, path)
        return decode_output(proc.returncode, stdout, stderr, self.config.capabilities)


def ffprobe(path: str | Path, config: Optional[ProbeConfig] = None) -> Report:
    """Probe one input with `config` (defaults come from Settings)."""
    return FFprobeAdapter(config).probe(path)


async def ffprobe_async(path: str | Path, config: Optional[ProbeConfig] = None) -> Report:
    return await FFprobeAdapter(config).probe_async(path)
