"""Handlers for full-text document synchronization."""

import logging

from ...lsp.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
)
from .base import NO_RESPONSE, HandlerContext

logger = logging.getLogger(__name__)


def handle_did_open(ctx: HandlerContext, params: DidOpenTextDocumentParams):
    doc = params.textDocument
    logger.debug(f"Opened {doc.uri} ({doc.languageId}, {len(doc.text)} chars)")
    ctx.documents.set(doc.uri, doc.text)
    return NO_RESPONSE


def handle_did_change(ctx: HandlerContext, params: DidChangeTextDocumentParams):
    if not params.contentChanges:
        return NO_RESPONSE
    # Full sync: the last change carries the whole document.
    ctx.documents.set(params.textDocument.uri, params.contentChanges[-1].text)
    return NO_RESPONSE


def handle_did_close(ctx: HandlerContext, params: DidCloseTextDocumentParams):
    logger.debug(f"Closed {params.textDocument.uri}")
    ctx.documents.remove(params.textDocument.uri)
    return NO_RESPONSE
