"""Handler for textDocument/completion."""

import logging

from ...lsp.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    InsertTextFormat,
    Position,
    Range,
    TextEdit,
)
from ...snippets import classify, expand, get_static_snippets
from ...snippets.markup import DEFAULT_INDENT
from ...utils.text import get_line_at, line_until_cursor, utf16_length
from .base import HandlerContext

logger = logging.getLogger(__name__)

DYNAMIC_LABEL = "dynamic snippet"
DYNAMIC_SORT_TEXT = "0000"


def build_dynamic_item(text: str, line: int, line_length: int, indent: str) -> CompletionItem | None:
    """Build the completion item that replaces the whole line with the expanded tag.

    line_length is measured in UTF-16 code units, as LSP columns are.
    """
    markup = expand(text, indent=indent)
    if markup is None:
        return None

    return CompletionItem(
        label=DYNAMIC_LABEL,
        documentation=f'React Dynamic Component\nInput: "{text}"',
        insertTextFormat=InsertTextFormat.Snippet,
        kind=CompletionItemKind.Snippet,
        sortText=DYNAMIC_SORT_TEXT,
        filterText=text,
        textEdit=TextEdit(
            range=Range(
                start=Position(line=line, character=0),
                end=Position(line=line, character=line_length),
            ),
            newText=markup,
        ),
    )


def handle_completion(ctx: HandlerContext, params: CompletionParams) -> CompletionList | None:
    uri = params.textDocument.uri
    content = ctx.documents.get(uri)
    if content is None:
        logger.warning(f"No content found for document {uri}")
        return None

    completion_config = ctx.config.get("completion", {})
    line = params.position.line
    current_line = get_line_at(content, line)
    text = line_until_cursor(content, line, params.position.character).strip()

    classification = classify(text)
    logger.debug(
        f"Completion at {line}:{params.position.character} for {text!r}: "
        f"dynamic={classification.is_dynamic} pattern={classification.pattern_match} "
        f"separator={classification.contains_separator} "
        f"identifier={classification.starts_with_identifier}"
    )

    items: list[CompletionItem] = []
    if classification.is_dynamic:
        item = build_dynamic_item(
            text, line, utf16_length(current_line), completion_config.get("indent", DEFAULT_INDENT)
        )
        if item is not None:
            items.append(item)
        else:
            logger.debug(f"Not a valid tag shorthand, falling back to static snippets: {text!r}")

    if completion_config.get("static_snippets", True):
        items.extend(get_static_snippets())

    return CompletionList(isIncomplete=False, items=items)
