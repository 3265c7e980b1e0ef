from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field


class Position(BaseModel):
    line: int
    character: int


class Range(BaseModel):
    start: Position
    end: Position


class TextDocumentIdentifier(BaseModel):
    uri: str


class VersionedTextDocumentIdentifier(TextDocumentIdentifier):
    version: int | None = None


class TextDocumentItem(BaseModel):
    uri: str
    languageId: str = "plaintext"
    version: int = 0
    text: str


class TextEdit(BaseModel):
    range: Range
    newText: str


# =============================================================================
# Document synchronization
# =============================================================================


class TextDocumentSyncKind(IntEnum):
    None_ = 0
    Full = 1
    Incremental = 2


class TextDocumentContentChangeEvent(BaseModel):
    text: str
    range: Range | None = None


class DidOpenTextDocumentParams(BaseModel):
    textDocument: TextDocumentItem


class DidChangeTextDocumentParams(BaseModel):
    textDocument: VersionedTextDocumentIdentifier
    contentChanges: list[TextDocumentContentChangeEvent]


class DidCloseTextDocumentParams(BaseModel):
    textDocument: TextDocumentIdentifier


# =============================================================================
# Completion
# =============================================================================


class CompletionItemKind(IntEnum):
    Text = 1
    Method = 2
    Function = 3
    Constructor = 4
    Field = 5
    Variable = 6
    Class = 7
    Interface = 8
    Module = 9
    Property = 10
    Unit = 11
    Value = 12
    Enum = 13
    Keyword = 14
    Snippet = 15
    Color = 16
    File = 17
    Reference = 18
    Folder = 19
    EnumMember = 20
    Constant = 21
    Struct = 22
    Event = 23
    Operator = 24
    TypeParameter = 25


class InsertTextFormat(IntEnum):
    PlainText = 1
    Snippet = 2


class CompletionContext(BaseModel):
    triggerKind: int
    triggerCharacter: str | None = None


class CompletionParams(BaseModel):
    textDocument: TextDocumentIdentifier
    position: Position
    context: CompletionContext | None = None


class CompletionItem(BaseModel):
    label: str
    kind: CompletionItemKind | None = None
    documentation: str | None = None
    insertText: str | None = None
    insertTextFormat: InsertTextFormat | None = None
    textEdit: TextEdit | None = None
    sortText: str | None = None
    filterText: str | None = None


class CompletionList(BaseModel):
    isIncomplete: bool = False
    items: list[CompletionItem] = Field(default_factory=list)


# =============================================================================
# Lifecycle
# =============================================================================


class CompletionOptions(BaseModel):
    triggerCharacters: list[str] | None = None
    resolveProvider: bool | None = None


class ServerCapabilities(BaseModel):
    textDocumentSync: TextDocumentSyncKind = TextDocumentSyncKind.Full
    completionProvider: CompletionOptions | None = None


class ServerInfo(BaseModel):
    name: str
    version: str | None = None


class InitializeParams(BaseModel, extra="allow"):
    processId: int | None = None
    rootUri: str | None = None
    capabilities: dict[str, Any] = Field(default_factory=dict)


class InitializeResult(BaseModel):
    capabilities: ServerCapabilities
    serverInfo: ServerInfo | None = None


class NoParams(BaseModel):
    pass
