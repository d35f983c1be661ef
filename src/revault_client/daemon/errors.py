"""Error kinds surfaced by the revaultd client.

Every failure observed while starting or talking to the daemon is raised as
one of five ``RevaultDError`` subclasses. Raw socket, JSON, and validation
errors never cross the client boundary unclassified.
"""

import errno
from enum import StrEnum


class IOErrorKind(StrEnum):
    """OS-level category of a transport failure."""

    NOT_FOUND = "not_found"
    CONNECTION_REFUSED = "connection_refused"
    CONNECTION_RESET = "connection_reset"
    CONNECTION_ABORTED = "connection_aborted"
    BROKEN_PIPE = "broken_pipe"
    TIMED_OUT = "timed_out"
    PERMISSION_DENIED = "permission_denied"
    UNEXPECTED_EOF = "unexpected_eof"
    OTHER = "other"


class RevaultDError(Exception):
    """Base class for every error reported by the revaultd client."""

    code = "revaultd_error"


class UnexpectedError(RevaultDError):
    """Internal failure unrelated to the wire protocol."""

    code = "unexpected"

    def __init__(self, message: str) -> None:
        super().__init__(f"Revaultd unexpected error: {message}")


class StartError(RevaultDError):
    """Daemon process could not be launched or exited non-zero."""

    code = "start_error"

    def __init__(self, message: str) -> None:
        super().__init__(f"Revaultd error while starting: {message}")


class RPCError(RevaultDError):
    """Daemon replied with an error payload, or the reply could not be decoded."""

    code = "rpc_error"

    def __init__(self, message: str, *, rpc_code: int | None = None) -> None:
        """Initialize with the daemon (or decoder) message.

        Args:
            message: Human-readable error description.
            rpc_code: JSON-RPC error code when the daemon supplied one.

        """
        super().__init__(f"Revaultd error rpc call: {message}")
        self.message = message
        self.rpc_code = rpc_code


class DaemonIOError(RevaultDError):
    """Transport-level failure, tagged with the OS error category."""

    code = "io_error"

    def __init__(self, kind: IOErrorKind, detail: str = "") -> None:
        msg = f"Revaultd io error: {kind}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.kind = kind


class NoAnswerError(RevaultDError):
    """Response carried neither a result nor an error."""

    code = "no_answer"

    def __init__(self) -> None:
        super().__init__("Revaultd returned no answer")


_ERRNO_KINDS = {
    errno.ENOENT: IOErrorKind.NOT_FOUND,
    errno.ECONNREFUSED: IOErrorKind.CONNECTION_REFUSED,
    errno.ECONNRESET: IOErrorKind.CONNECTION_RESET,
    errno.ECONNABORTED: IOErrorKind.CONNECTION_ABORTED,
    errno.EPIPE: IOErrorKind.BROKEN_PIPE,
    errno.ETIMEDOUT: IOErrorKind.TIMED_OUT,
    errno.EACCES: IOErrorKind.PERMISSION_DENIED,
    errno.EPERM: IOErrorKind.PERMISSION_DENIED,
}


def classify_os_error(exc: OSError) -> IOErrorKind:
    """Return the IOErrorKind matching an OSError raised by the transport."""
    # socket.timeout carries no errno
    if isinstance(exc, TimeoutError):
        return IOErrorKind.TIMED_OUT
    if exc.errno is not None and exc.errno in _ERRNO_KINDS:
        return _ERRNO_KINDS[exc.errno]
    match exc:
        case FileNotFoundError():
            return IOErrorKind.NOT_FOUND
        case ConnectionRefusedError():
            return IOErrorKind.CONNECTION_REFUSED
        case ConnectionResetError():
            return IOErrorKind.CONNECTION_RESET
        case ConnectionAbortedError():
            return IOErrorKind.CONNECTION_ABORTED
        case BrokenPipeError():
            return IOErrorKind.BROKEN_PIPE
        case PermissionError():
            return IOErrorKind.PERMISSION_DENIED
        case _:
            return IOErrorKind.OTHER


def io_error(exc: OSError | EOFError) -> DaemonIOError:
    """Wrap a transport exception into a DaemonIOError."""
    if isinstance(exc, EOFError):
        return DaemonIOError(IOErrorKind.UNEXPECTED_EOF, str(exc))
    return DaemonIOError(classify_os_error(exc), exc.strerror or str(exc))
