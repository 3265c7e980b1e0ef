"""Method handlers for the language server."""

from .base import NO_RESPONSE, HandlerContext
from .completion import handle_completion
from .documents import handle_did_change, handle_did_close, handle_did_open
from .lifecycle import handle_exit, handle_initialize, handle_shutdown

__all__ = [
    "NO_RESPONSE",
    "HandlerContext",
    "handle_completion",
    "handle_did_change",
    "handle_did_close",
    "handle_did_open",
    "handle_exit",
    "handle_initialize",
    "handle_shutdown",
]
