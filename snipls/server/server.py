"""Stdio language server: reassembles framed messages and dispatches them."""

import asyncio
import logging
import signal
import sys
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from .handlers import (
    NO_RESPONSE,
    HandlerContext,
    handle_completion,
    handle_did_change,
    handle_did_close,
    handle_did_open,
    handle_exit,
    handle_initialize,
    handle_shutdown,
)
from .rpc import Envelope, decode_envelope, make_error_response, make_response
from .session import ConnectionState, DocumentStore
from ..lsp.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    LSPProtocolError,
    LSPResponseError,
    MessageReassembler,
    encode_message,
)
from ..lsp.types import (
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    InitializeParams,
    NoParams,
)
from ..utils.config import Config, get_log_path, load_config

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024

HANDLERS: dict[str, tuple[type[BaseModel], Callable[[HandlerContext, Any], Any]]] = {
    "initialize": (InitializeParams, handle_initialize),
    "shutdown": (NoParams, handle_shutdown),
    "exit": (NoParams, handle_exit),
    "textDocument/didOpen": (DidOpenTextDocumentParams, handle_did_open),
    "textDocument/didChange": (DidChangeTextDocumentParams, handle_did_change),
    "textDocument/didClose": (DidCloseTextDocumentParams, handle_did_close),
    "textDocument/completion": (CompletionParams, handle_completion),
}


def write_stdout(data: bytes) -> None:
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


class LanguageServer:
    def __init__(
        self,
        config: Config | None = None,
        write: Callable[[bytes], None] = write_stdout,
    ):
        self.config = config if config is not None else load_config()
        self.state = ConnectionState()
        self.documents = DocumentStore()
        self._reassembler = MessageReassembler()
        self._write = write
        self._ctx = HandlerContext(
            state=self.state,
            documents=self.documents,
            config=self.config,
        )

    def feed(self, chunk: bytes) -> list[bytes]:
        """Process one chunk of input, writing and returning the framed responses.

        Bodies are handled strictly in arrival order and each response is
        written before the next body is dispatched. Nothing is processed once
        the connection has exited.
        """
        responses: list[bytes] = []
        for body in self._reassembler.feed(chunk):
            if self.state.exited:
                break
            response = self.dispatch(body)
            if response is not None:
                logger.debug(f"Sending {response!r}")
                self._write(response)
                responses.append(response)
        return responses

    def dispatch(self, body: bytes) -> bytes | None:
        try:
            envelope = decode_envelope(body)
        except LSPProtocolError as e:
            logger.warning(f"Dropping message: {e}")
            return None

        logger.debug(f"Received {envelope.method} (id={envelope.id})")

        handler_info = HANDLERS.get(envelope.method)
        if not handler_info:
            logger.debug(f"Ignoring unknown method: {envelope.method}")
            return None

        params_class, handler = handler_info

        try:
            typed_params = params_class.model_validate(envelope.params or {})
        except ValidationError as e:
            logger.warning(f"Invalid params for {envelope.method}: {e}")
            return self._error(
                envelope, LSPResponseError(INVALID_PARAMS, f"Invalid params for {envelope.method}")
            )

        try:
            result = handler(self._ctx, typed_params)
        except LSPResponseError as e:
            logger.error(f"Error in {envelope.method}: {e.message} (code={e.code})")
            return self._error(envelope, e)
        except Exception as e:
            logger.exception(f"Error in handler {envelope.method}")
            return self._error(envelope, LSPResponseError(INTERNAL_ERROR, str(e)))

        if result is NO_RESPONSE or not envelope.is_request:
            return None

        if isinstance(result, BaseModel):
            result = result.model_dump(mode="json", exclude_none=True)
        return encode_message(make_response(envelope.id, result))

    def _error(self, envelope: Envelope, error: LSPResponseError) -> bytes | None:
        if not envelope.is_request:
            return None
        return encode_message(make_error_response(envelope.id, error))

    async def serve(self, reader: asyncio.StreamReader) -> int:
        while not self.state.exited:
            chunk = await reader.read(READ_CHUNK_SIZE)
            if not chunk:
                logger.info("stdin ended")
                self.state.request_exit(0)
                break
            self.feed(chunk)

        return self.state.exit_code if self.state.exit_code is not None else 0


async def run_server(config: Config | None = None) -> int:
    if config is None:
        config = load_config()

    log_path = get_log_path(config)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log_level = config.get("server", {}).get("log_level", "info")

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_path),
        ],
    )

    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)

    server = LanguageServer(config)
    serve_task = asyncio.create_task(server.serve(reader))

    def handle_termination(sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}, shutting down...")
        server.state.request_exit(1)
        serve_task.cancel()

    for sig in (signal.SIGTERM, signal.SIGINT, signal.SIGHUP):
        loop.add_signal_handler(sig, handle_termination, sig)

    logger.info("Language server started, waiting for initialize...")

    try:
        return await serve_task
    except asyncio.CancelledError:
        return server.state.exit_code if server.state.exit_code is not None else 1
    except Exception:
        logger.exception("Unexpected error while serving")
        return 1
