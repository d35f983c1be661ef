"""Unix socket transport: one connection per request."""

import json
import socket
from collections.abc import Iterator
from pathlib import Path

# Read buffer size
_BUFSIZE = 65536

_LITERALS = ("true", "false", "null")


def _is_prefix(text: str) -> bool:
    """Check whether text is a whole JSON value or a prefix the decoder ran out of data on."""
    try:
        json.JSONDecoder().raw_decode(text)
    except json.JSONDecodeError as e:
        return e.pos >= len(text) or e.msg.startswith("Unterminated string")
    return True


def _completions(text: str) -> Iterator[str]:
    """Yield text with the token cut at its end finished in each plausible way.

    The decoder reports a partial literal or number at the start of the token,
    not at the end of the data, so the cut token is finished before checking.
    """
    yield text
    for literal in _LITERALS:
        for i in range(1, len(literal)):
            if text.endswith(literal[:i]):
                yield text + literal[i:]
    # Digits finish a number ("-", "0.", "1e+") or a \uXXXX escape
    for n in range(1, 6):
        yield text + "0" * n


def _parse_state(buf: bytes) -> tuple[bool, bool]:
    """Return (complete, truncated) for the bytes received so far.

    ``complete`` is True once a whole JSON value has arrived. ``truncated`` is
    True when the data is a prefix of a JSON value that was cut short.
    """
    try:
        text = buf.decode().lstrip()
    except UnicodeDecodeError as e:
        # A multi-byte character split across reads fails at the end of the data
        return False, e.reason == "unexpected end of data"
    if not text:
        return False, False
    try:
        json.JSONDecoder().raw_decode(text)
    except json.JSONDecodeError:
        return False, any(_is_prefix(candidate) for candidate in _completions(text))
    return True, False


def _is_complete(buf: bytes) -> bool:
    try:
        json.JSONDecoder().raw_decode(buf.decode().lstrip())
    except (json.JSONDecodeError, UnicodeDecodeError):
        return False
    return True


def _recv_response(s: socket.socket) -> bytes:
    """Read from socket until a complete JSON value is received or the peer closes.

    Raises:
        EOFError: Peer closed before sending anything, or in the middle of a value.

    """
    chunks: list[bytes] = []
    while True:
        chunk = s.recv(_BUFSIZE)
        if not chunk:
            break
        chunks.append(chunk)
        if _is_complete(b"".join(chunks)):
            return b"".join(chunks)

    data = b"".join(chunks)
    if not data.strip():
        raise EOFError("connection closed before a response was received")
    _, truncated = _parse_state(data)
    if truncated:
        raise EOFError("connection closed before the response was complete")
    # Malformed but finished; the caller reports it as a protocol failure
    return data


class UnixTransport:
    """Send one serialized request to the daemon socket and return the raw reply."""

    def __init__(self, socket_path: Path, timeout: float | None = None) -> None:
        """Initialize the transport.

        Args:
            socket_path: Path of the daemon's listening socket.
            timeout: Per-operation socket timeout in seconds (None blocks indefinitely).

        """
        self._socket_path = socket_path
        self._timeout = timeout

    @property
    def socket_path(self) -> Path:
        """Daemon socket path this transport connects to."""
        return self._socket_path

    def request(self, payload: bytes) -> bytes:
        """Open a connection, write the payload, and read the complete reply.

        Raises:
            OSError: Socket missing, connection refused or reset, broken pipe, timeout.
            EOFError: Daemon closed the connection before a full response arrived.

        """
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as s:
            s.settimeout(self._timeout)
            s.connect(str(self._socket_path))
            s.sendall(payload)
            return _recv_response(s)
