"""Base handler context shared by all method handlers."""

from dataclasses import dataclass

from ...utils.config import Config
from ..session import ConnectionState, DocumentStore


class _NoResponse:
    def __repr__(self) -> str:
        return "NO_RESPONSE"


# Returned by a handler when nothing must be sent back, even for a request.
NO_RESPONSE = _NoResponse()


@dataclass
class HandlerContext:
    state: ConnectionState
    documents: DocumentStore
    config: Config
