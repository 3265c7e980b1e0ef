"""Handlers for initialize, shutdown and exit."""

import logging

from ... import __version__
from ...lsp.capabilities import get_server_capabilities
from ...lsp.types import InitializeParams, InitializeResult, NoParams, ServerInfo
from .base import NO_RESPONSE, HandlerContext

logger = logging.getLogger(__name__)


def handle_initialize(ctx: HandlerContext, params: InitializeParams) -> InitializeResult:
    logger.info(f"Initializing for client process {params.processId} (root: {params.rootUri})")
    ctx.state.initialized = True
    return InitializeResult(
        capabilities=get_server_capabilities(),
        serverInfo=ServerInfo(name="snipls", version=__version__),
    )


def handle_shutdown(ctx: HandlerContext, _params: NoParams) -> None:
    logger.info("Received shutdown request")
    ctx.state.shutdown_requested = True
    return None


def handle_exit(ctx: HandlerContext, _params: NoParams):
    logger.info("Received exit notification")
    ctx.state.request_exit(0 if ctx.state.shutdown_requested else 1)
    return NO_RESPONSE
