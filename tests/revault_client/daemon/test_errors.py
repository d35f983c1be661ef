"""Tests for error kinds and OS error classification."""

import errno

import pytest

from revault_client.daemon.errors import (
    DaemonIOError,
    IOErrorKind,
    NoAnswerError,
    RevaultDError,
    RPCError,
    StartError,
    UnexpectedError,
    classify_os_error,
    io_error,
)


class TestClassifyOsError:
    """OSError → IOErrorKind."""

    @pytest.mark.parametrize(
        ("exc", "kind"),
        [
            (FileNotFoundError(errno.ENOENT, "No such file or directory"), IOErrorKind.NOT_FOUND),
            (ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused"), IOErrorKind.CONNECTION_REFUSED),
            (ConnectionResetError(errno.ECONNRESET, "Connection reset by peer"), IOErrorKind.CONNECTION_RESET),
            (BrokenPipeError(errno.EPIPE, "Broken pipe"), IOErrorKind.BROKEN_PIPE),
            (PermissionError(errno.EACCES, "Permission denied"), IOErrorKind.PERMISSION_DENIED),
            (TimeoutError("timed out"), IOErrorKind.TIMED_OUT),
            (OSError(errno.EIO, "Input/output error"), IOErrorKind.OTHER),
        ],
    )
    def test_kinds(self, exc: OSError, kind: IOErrorKind) -> None:
        """Each OS error maps to its category."""
        assert classify_os_error(exc) == kind

    def test_subclass_without_errno(self) -> None:
        """Exception class is used when errno is missing."""
        assert classify_os_error(ConnectionRefusedError()) == IOErrorKind.CONNECTION_REFUSED


class TestIoError:
    """Transport exceptions wrapped as DaemonIOError."""

    def test_eof(self) -> None:
        """EOFError becomes unexpected_eof."""
        err = io_error(EOFError("closed early"))
        assert err.kind == IOErrorKind.UNEXPECTED_EOF
        assert "closed early" in str(err)

    def test_os_error(self) -> None:
        """OSError keeps its category and text."""
        err = io_error(ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused"))
        assert err.kind == IOErrorKind.CONNECTION_REFUSED
        assert "Connection refused" in str(err)


class TestErrorKinds:
    """Messages and codes of the five kinds."""

    def test_all_are_revaultd_errors(self) -> None:
        """Every kind can be caught as RevaultDError."""
        errors = [
            UnexpectedError("x"),
            StartError("x"),
            RPCError("x"),
            DaemonIOError(IOErrorKind.OTHER),
            NoAnswerError(),
        ]
        assert all(isinstance(e, RevaultDError) for e in errors)
        assert len({e.code for e in errors}) == 5

    def test_rpc_error_keeps_payload(self) -> None:
        """RPCError exposes the daemon message and code."""
        err = RPCError("Invalid params", rpc_code=-32602)
        assert err.message == "Invalid params"
        assert err.rpc_code == -32602
        assert "Invalid params" in str(err)

    def test_messages(self) -> None:
        """Human-readable descriptions name the failure."""
        assert str(NoAnswerError()) == "Revaultd returned no answer"
        assert str(StartError("boom")) == "Revaultd error while starting: boom"
        assert str(DaemonIOError(IOErrorKind.BROKEN_PIPE)) == "Revaultd io error: broken_pipe"
