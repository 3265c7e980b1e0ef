import copy

import pytest

from snipls.lsp.types import CompletionItemKind, CompletionParams, InsertTextFormat
from snipls.server.handlers import HandlerContext, handle_completion
from snipls.server.session import ConnectionState, DocumentStore
from snipls.snippets.catalog import get_static_snippets
from snipls.utils.config import DEFAULT_CONFIG

URI = "file:///project/App.jsx"


@pytest.fixture
def ctx():
    return HandlerContext(
        state=ConnectionState(),
        documents=DocumentStore(),
        config=copy.deepcopy(DEFAULT_CONFIG),
    )


def complete(ctx, text, line=0, character=None):
    ctx.documents.set(URI, text)
    if character is None:
        character = len(text.splitlines()[line]) if text else 0
    params = CompletionParams.model_validate(
        {"textDocument": {"uri": URI}, "position": {"line": line, "character": character}}
    )
    return handle_completion(ctx, params)


class TestDynamicCompletion:
    def test_dynamic_item_first(self, ctx):
        result = complete(ctx, "Greet0onPress(handlePress)")
        item = result.items[0]

        assert item.label == "dynamic snippet"
        assert item.kind == CompletionItemKind.Snippet
        assert item.insertTextFormat == InsertTextFormat.Snippet
        assert item.sortText == "0000"
        assert item.filterText == "Greet0onPress(handlePress)"
        assert item.textEdit.newText == "<Greet onPress={${1:handlePress}}>\n  ${2}\n</Greet>"
        assert 'Input: "Greet0onPress(handlePress)"' in item.documentation

    def test_followed_by_static_catalog(self, ctx):
        result = complete(ctx, "View")
        assert result.isIncomplete is False
        assert [i.label for i in result.items[1:]] == [i.label for i in get_static_snippets()]

    def test_plain_identifier_is_dynamic(self, ctx):
        result = complete(ctx, "View")
        assert result.items[0].textEdit.newText == "<View>${0}</View>"

    def test_replaces_whole_line(self, ctx):
        text = "import x;\n    Card0title\nmore"
        result = complete(ctx, text, line=1)
        edit = result.items[0].textEdit

        assert edit.range.start.line == 1
        assert edit.range.start.character == 0
        assert edit.range.end.line == 1
        assert edit.range.end.character == len("    Card0title")

    def test_only_text_before_cursor_is_used(self, ctx):
        result = complete(ctx, "Card0title0subtitle", character=len("Card0title"))
        assert result.items[0].textEdit.newText == "<Card title={${1:value}}>\n  ${2}\n</Card>"
        assert result.items[0].textEdit.range.end.character == len("Card0title0subtitle")

    def test_nested(self, ctx):
        result = complete(ctx, "List0data(items)>Item0key")
        assert result.items[0].textEdit.newText == (
            "<List data={${1:items}}>\n"
            "  <Item key={${2:value}}>\n"
            "    ${3}\n"
            "  </Item>\n"
            "</List>"
        )

    def test_form_feed_does_not_shift_lines(self, ctx):
        result = complete(ctx, "const s = 'a\x0cb';\nCard0title", line=1, character=10)
        item = result.items[0]
        assert item.label == "dynamic snippet"
        assert item.textEdit.range.start.line == 1
        assert item.textEdit.newText == "<Card title={${1:value}}>\n  ${2}\n</Card>"

    def test_range_end_counts_utf16_units(self, ctx):
        result = complete(ctx, "Card0title // 😀 smile", character=10)
        edit = result.items[0].textEdit
        assert edit.range.end.character == 22
        assert edit.newText == "<Card title={${1:value}}>\n  ${2}\n</Card>"

    def test_cursor_after_astral_character(self, ctx):
        # The emoji is two UTF-16 units, so column 16 sits right after "0s".
        result = complete(ctx, "Text0label(😀)0style", character=16)
        item = result.items[0]
        assert item.label == "dynamic snippet"
        assert item.filterText == "Text0label(😀)0s"
        assert item.textEdit.newText == "<Text label={${1:😀}} s={${2:value}}>\n  ${3}\n</Text>"
        assert item.textEdit.range.end.character == 20

    def test_configured_indent(self, ctx):
        ctx.config["completion"]["indent"] = "    "
        result = complete(ctx, "Card0title")
        assert result.items[0].textEdit.newText == "<Card title={${1:value}}>\n    ${2}\n</Card>"


class TestStaticFallback:
    def test_not_dynamic(self, ctx):
        result = complete(ctx, "<div>")
        assert [i.label for i in result.items] == [i.label for i in get_static_snippets()]

    def test_dynamic_but_invalid(self, ctx):
        # Classified as dynamic (identifier plus separator) but "x-y" is not a tag name.
        result = complete(ctx, "x-y0z")
        assert all(i.label != "dynamic snippet" for i in result.items)
        assert len(result.items) == len(get_static_snippets())

    def test_empty_line(self, ctx):
        result = complete(ctx, "\n", line=0, character=0)
        assert len(result.items) == len(get_static_snippets())

    def test_line_out_of_range(self, ctx):
        result = complete(ctx, "View", line=5, character=3)
        assert len(result.items) == len(get_static_snippets())

    def test_static_snippets_disabled(self, ctx):
        ctx.config["completion"]["static_snippets"] = False
        assert complete(ctx, "<div>").items == []
        assert [i.label for i in complete(ctx, "View").items] == ["dynamic snippet"]

    def test_missing_document(self, ctx):
        params = CompletionParams.model_validate(
            {"textDocument": {"uri": "file:///nope.jsx"}, "position": {"line": 0, "character": 0}}
        )
        assert handle_completion(ctx, params) is None


class TestStaticCatalog:
    def test_labels(self):
        labels = [item.label for item in get_static_snippets()]
        assert labels[:3] == ["rnf", "rnfe", "rnfs"]
        assert "useState" in labels
        assert "rnnav" in labels
        assert "styleObj" in labels

    def test_exported_variants(self):
        items = {item.label: item for item in get_static_snippets()}
        assert "\nexport const ${1:ComponentName}" in items["rnfe"].insertText
        assert items["rfe"].insertText.startswith("export const ${1:ComponentName}")
        assert items["useCustomHookExport"].insertText.startswith("export const use${1:CustomHook}")

    def test_components_are_plain_text(self):
        items = {item.label: item for item in get_static_snippets()}
        assert items["View"].kind == CompletionItemKind.Class
        assert items["View"].insertTextFormat is None
        assert items["View"].insertText == "<View></View>"

    def test_fresh_list_each_call(self):
        first = get_static_snippets()
        first.clear()
        assert get_static_snippets()
