"""Synchronous client for revaultd JSON-RPC calls."""

import logging
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from revault_client.daemon.errors import NoAnswerError, RevaultDError, RPCError, io_error
from revault_client.daemon.protocol import ProtocolError, Request, decode_response, encode_request

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Transport(Protocol):
    """Anything that can carry one serialized request and return the raw reply."""

    def request(self, payload: bytes) -> bytes:
        """Send payload and return the raw response bytes."""
        ...


class DaemonClient:
    """Generic call dispatcher: serialize, send, decode, classify."""

    def __init__(self, transport: Transport) -> None:
        """Initialize client with a transport.

        Args:
            transport: Carries requests to the daemon (a fresh connection per call).

        """
        self._transport = transport

    def call(self, method: str, params: list[Any] | None, output_type: type[T]) -> T:
        """Call a daemon method and decode its result into ``output_type``.

        Args:
            method: Daemon method name.
            params: Positional arguments, or None to omit ``params`` from the request.
            output_type: Shape the ``result`` field is validated against.

        Raises:
            DaemonIOError: Transport failure (socket missing, refused, reset, closed early).
            RPCError: Daemon error payload, unparseable reply, or result shape mismatch.
            NoAnswerError: Reply carried neither result nor error.

        """
        logger.info("Request: %s", method)
        try:
            return self._call(method, params, output_type)
        except RevaultDError as e:
            logger.error("method %s failed: %s", method, e)
            raise

    def _call(self, method: str, params: list[Any] | None, output_type: type[T]) -> T:
        payload = encode_request(Request(method=method, params=params))
        try:
            raw = self._transport.request(payload)
        except (OSError, EOFError) as e:
            raise io_error(e) from e

        try:
            resp = decode_response(raw)
        except ProtocolError as e:
            raise RPCError(f"method {method} failed: {e}") from e

        # An error payload wins even if a result is also present
        if resp.error is not None:
            raise RPCError(resp.error.message, rpc_code=resp.error.code)
        if not resp.has_result:
            raise NoAnswerError

        try:
            return TypeAdapter(output_type).validate_python(resp.result)
        except ValidationError as e:
            raise RPCError(f"method {method} failed: {e}") from e
