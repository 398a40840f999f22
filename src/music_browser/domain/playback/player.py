"""
MPV audio output with JSON IPC for Music Browser
Functional process helpers plus the MpvOutput handle used by the session
"""

import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional, Protocol

from loguru import logger

from music_browser.core.config import Config
from music_browser.domain.library.metadata import probe_duration

from .exceptions import AudioOutputError

# Seconds to wait for mpv to create its IPC socket
SOCKET_TIMEOUT = 5.0


class AudioOutput(Protocol):
    """Capability the playback session needs from an audio backend."""

    def open(self, path: Path) -> float:
        """Replace the current stream with ``path`` and return its duration.

        Raises DecodeError or AudioOutputError; the previous stream keeps
        playing when this fails.
        """
        ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...

    def close(self) -> None: ...


class MpvHandle(NamedTuple):
    """Immutable handle on a running mpv process."""

    socket_path: Optional[str] = None
    process: Optional[subprocess.Popen] = None


def check_mpv_available() -> bool:
    """Check if MPV is available on the system."""
    try:
        result = subprocess.run(
            ["mpv", "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def start_mpv(config: Config) -> Optional[MpvHandle]:
    """Start MPV idle with JSON IPC and return its handle."""
    if config.player.mpv_socket_path:
        socket_path = config.player.mpv_socket_path
    else:
        temp_dir = Path(tempfile.gettempdir())
        socket_path = str(temp_dir / f"music-browser-mpv-{os.getpid()}")

    logger.info(f"Starting MPV player with socket: {socket_path}")

    try:
        if os.path.exists(socket_path):
            logger.debug(f"Removing existing socket: {socket_path}")
            os.unlink(socket_path)

        cmd = [
            "mpv",
            "--idle=yes",
            "--no-video",
            "--no-terminal",
            f"--input-ipc-server={socket_path}",
            f"--volume={round(config.player.volume * 100)}",
            "--keep-open=no",
            "--load-scripts=no",
        ]

        process = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )

        start_time = time.time()
        while not os.path.exists(socket_path):
            if time.time() - start_time > SOCKET_TIMEOUT:
                logger.error(f"MPV socket creation timeout after {SOCKET_TIMEOUT}s")
                stop_mpv(MpvHandle(socket_path=socket_path, process=process))
                return None
            time.sleep(0.1)

        if send_mpv_command(socket_path, {"command": ["get_property", "idle-active"]}):
            logger.info("MPV started successfully")
            return MpvHandle(socket_path=socket_path, process=process)

        logger.error("MPV socket connection test failed")
        stop_mpv(MpvHandle(socket_path=socket_path, process=process))
        return None

    except (subprocess.SubprocessError, OSError) as e:
        logger.error(f"Failed to start MPV: {e}")
        return None


def stop_mpv(handle: MpvHandle) -> None:
    """Stop MPV process and cleanup its socket."""
    if handle.process:
        try:
            handle.process.kill()
            handle.process.wait(timeout=2.0)
        except (OSError, subprocess.TimeoutExpired):
            pass  # Process already terminated or couldn't be killed

    if handle.socket_path and os.path.exists(handle.socket_path):
        try:
            os.unlink(handle.socket_path)
        except OSError:
            pass

    logger.info("MPV stopped")


def is_mpv_running(handle: MpvHandle) -> bool:
    """Check if MPV process is still running.

    Called several times per tick, so it does not log.
    """
    if not handle.process:
        return False

    if handle.process.poll() is not None:
        return False

    if not handle.socket_path or not os.path.exists(handle.socket_path):
        return False

    return True


def send_mpv_command(socket_path: Optional[str], command: dict[str, Any]) -> bool:
    """Send JSON IPC command to MPV."""
    if not socket_path or not os.path.exists(socket_path):
        return False

    try:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(2.0)
        sock.connect(socket_path)

        command_json = json.dumps(command) + "\n"
        sock.send(command_json.encode("utf-8"))

        response = sock.recv(4096).decode("utf-8").strip()
        sock.close()

        if response:
            # mpv may interleave events; the command reply carries "error"
            for line in response.splitlines():
                try:
                    response_data = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if "error" in response_data:
                    return response_data.get("error") == "success"
            return False

        return True

    except (socket.error, OSError):
        return False


class MpvOutput:
    """Audio output backed by an idle mpv process.

    Owns the process for its whole lifetime; use as a context manager so the
    process and socket are released on every exit path.
    """

    def __init__(self, handle: MpvHandle):
        self._handle = handle

    @classmethod
    def start(cls, config: Config) -> "MpvOutput":
        handle = start_mpv(config)
        if handle is None:
            raise AudioOutputError("Failed to start mpv")
        return cls(handle)

    def __enter__(self) -> "MpvOutput":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _command(self, *args: Any) -> bool:
        if not is_mpv_running(self._handle):
            return False
        return send_mpv_command(self._handle.socket_path, {"command": list(args)})

    def open(self, path: Path) -> float:
        # Probe before loading so a bad file never replaces a playing one
        duration = probe_duration(path)

        if not is_mpv_running(self._handle):
            raise AudioOutputError("mpv is not running")

        # "replace" swaps the stream in a single command
        if not self._command("loadfile", str(path), "replace"):
            raise AudioOutputError(f"mpv rejected file: {path}")

        logger.info(f"Loaded {path} ({duration:.1f}s)")
        return duration

    def play(self) -> None:
        if not self._command("set_property", "pause", False):
            logger.warning("mpv did not accept unpause")

    def pause(self) -> None:
        if not self._command("set_property", "pause", True):
            logger.warning("mpv did not accept pause")

    def set_volume(self, volume: float) -> None:
        volume = max(0.0, min(1.0, volume))
        if not self._command("set_property", "volume", round(volume * 100, 1)):
            logger.debug(f"mpv did not accept volume {volume:.2f}")

    def close(self) -> None:
        if self._handle.process is None:
            return
        stop_mpv(self._handle)
        self._handle = MpvHandle()
