"""Daemon spawning and socket liveness."""

import logging
import socket
import subprocess  # nosec B404
import tempfile
from pathlib import Path

from revault_client.daemon.errors import StartError

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "revaultd"


def is_connectable(sock_path: Path) -> bool:
    """Check if the daemon socket is accepting connections."""
    try:
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as s:
            s.settimeout(1.0)
            s.connect(str(sock_path))
    except OSError:
        return False
    else:
        return True


def start_daemon(config_path: Path, *, binary: str = DEFAULT_BINARY, timeout: float | None = None) -> None:
    """Launch revaultd and wait for the launcher process to exit.

    revaultd forks into the background and the foreground process exits once
    the handoff succeeded, so only the launcher is waited for. Exactly one
    spawn attempt is made.

    Args:
        config_path: revaultd configuration file passed as ``--conf``.
        binary: Daemon executable name or path.
        timeout: Seconds to wait for the launcher to exit (None waits indefinitely).

    Raises:
        StartError: Spawn failed, launcher timed out, or it exited non-zero.

    """
    logger.debug("Starting %s with config %s", binary, config_path)
    # stderr goes to a file, not a pipe: the forked daemon may keep the descriptor open
    with tempfile.TemporaryFile() as stderr_file:
        try:
            # S603: binary comes from the user's own configuration
            proc = subprocess.Popen(  # noqa: S603  # nosec B603
                [binary, "--conf", str(config_path)],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=stderr_file,
            )
        except OSError as e:
            raise StartError(f"Failed to launch {binary}: {e}") from e

        logger.debug("Waiting for %s launcher (pid %d) to exit", binary, proc.pid)
        try:
            returncode = proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            proc.kill()
            proc.wait()
            raise StartError(f"{binary} did not terminate within {timeout}s") from e

        stderr_file.seek(0)
        stderr = stderr_file.read().decode(errors="replace")

    if returncode != 0:
        raise StartError(f"{binary} terminated with status: {returncode} and stderr: {stderr}")

    logger.info("%s daemon started", binary)
