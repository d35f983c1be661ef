"""Daemon subsystem: transport, call dispatch, error kinds, and process management."""

from revault_client.daemon.client import DaemonClient as DaemonClient
from revault_client.daemon.errors import DaemonIOError as DaemonIOError
from revault_client.daemon.errors import IOErrorKind as IOErrorKind
from revault_client.daemon.errors import NoAnswerError as NoAnswerError
from revault_client.daemon.errors import RevaultDError as RevaultDError
from revault_client.daemon.errors import RPCError as RPCError
from revault_client.daemon.errors import StartError as StartError
from revault_client.daemon.errors import UnexpectedError as UnexpectedError
from revault_client.daemon.process import start_daemon as start_daemon
from revault_client.daemon.transport import UnixTransport as UnixTransport
