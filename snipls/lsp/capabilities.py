from .types import CompletionOptions, ServerCapabilities, TextDocumentSyncKind


def get_server_capabilities() -> ServerCapabilities:
    return ServerCapabilities(
        textDocumentSync=TextDocumentSyncKind.Full,
        completionProvider=CompletionOptions(),
    )
