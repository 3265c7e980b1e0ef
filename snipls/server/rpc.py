"""JSON-RPC envelopes exchanged with the editor."""

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from ..lsp.protocol import LSPProtocolError, LSPResponseError


class Envelope(BaseModel):
    """An inbound request (id present) or notification (id absent)."""
    method: str
    params: Any = None
    id: int | str | None = None

    @property
    def is_request(self) -> bool:
        return self.id is not None


def decode_envelope(body: bytes) -> Envelope:
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LSPProtocolError(f"Malformed message body ({len(body)} bytes): {e}") from e

    if not isinstance(data, dict):
        raise LSPProtocolError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return Envelope.model_validate(data)
    except ValidationError as e:
        raise LSPProtocolError(f"Invalid envelope: {e}") from e


def make_response(request_id: int | str, result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def make_error_response(request_id: int | str, error: LSPResponseError) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": error.to_dict()}
