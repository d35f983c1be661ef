"""Request/Response protocol for client-revaultd communication.

JSON-RPC over a Unix socket, one request per connection. The request carries
positional parameters only; ``params`` is omitted when the method takes no
input.

Request:  {"jsonrpc": "2.0", "id": 0, "method": "listtransactions", "params": [["aaaa:0"]]}
Response: {"jsonrpc": "2.0", "id": 0, "result": {"transactions": [...]}}
Error:    {"jsonrpc": "2.0", "id": 0, "error": {"code": -32602, "message": "Invalid params"}}
"""

import json
from dataclasses import dataclass
from typing import Any

# A connection never carries more than one request, so the id is fixed.
REQUEST_ID = 0


@dataclass(frozen=True)
class Request:
    """Daemon request: a method name with optional positional parameters."""

    method: str
    params: list[Any] | None = None


@dataclass(frozen=True)
class ErrorPayload:
    """Error reported by the daemon."""

    message: str
    code: int | None = None


@dataclass(frozen=True)
class Response:
    """Daemon response: either a result or an error, or (invalidly) neither."""

    result: Any = None
    error: ErrorPayload | None = None

    @property
    def has_result(self) -> bool:
        """Check if the response carries a non-null result."""
        return self.result is not None


class ProtocolError(ValueError):
    """Raw response could not be parsed as a JSON-RPC response object."""


def encode_request(req: Request) -> bytes:
    """Serialize a Request to JSON bytes."""
    payload: dict[str, object] = {"jsonrpc": "2.0", "id": REQUEST_ID, "method": req.method}
    if req.params is not None:
        payload["params"] = req.params
    return json.dumps(payload).encode()


def _decode_error(raw: object) -> ErrorPayload:
    """Build an ErrorPayload from whatever the daemon put in the ``error`` field."""
    if isinstance(raw, dict):
        code = raw.get("code")
        message = raw.get("message")
        return ErrorPayload(
            message=str(message) if message is not None else json.dumps(raw),
            code=code if isinstance(code, int) else None,
        )
    return ErrorPayload(message=str(raw))


def decode_response(data: bytes) -> Response:
    """Deserialize JSON bytes into a Response.

    Raises:
        ProtocolError: Not valid JSON, or not a JSON object.

    """
    try:
        obj = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProtocolError(f"invalid JSON response: {e}") from e
    if not isinstance(obj, dict):
        raise ProtocolError(f"response is not a JSON object: {type(obj).__name__}")
    error = obj.get("error")
    return Response(result=obj.get("result"), error=_decode_error(error) if error is not None else None)
