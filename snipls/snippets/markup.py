from .shorthand import Attribute, TagNode, parse

DEFAULT_INDENT = "  "
FINAL_CURSOR = "${0}"


class PlaceholderCounter:
    """Hands out ascending snippet placeholder indices for one expansion."""

    def __init__(self, start: int = 1):
        self.value = start

    def next(self) -> int:
        index = self.value
        self.value += 1
        return index


def placeholder(index: int, label: str | None = None) -> str:
    if label is None:
        return f"${{{index}}}"
    return f"${{{index}:{label}}}"


def render_attribute(attribute: Attribute, counter: PlaceholderCounter) -> str:
    if attribute.arguments is None:
        return f"{attribute.name}={{{placeholder(counter.next(), 'value')}}}"
    values = ", ".join(placeholder(counter.next(), arg) for arg in attribute.arguments)
    return f"{attribute.name}={{{values}}}"


def render(
    node: TagNode,
    depth: int = 0,
    counter: PlaceholderCounter | None = None,
    indent: str = DEFAULT_INDENT,
) -> str:
    if counter is None:
        counter = PlaceholderCounter()

    current_indent = indent * depth
    attributes = " ".join(render_attribute(attr, counter) for attr in node.attributes)
    opening = f"<{node.name} {attributes}>" if attributes else f"<{node.name}>"
    closing = f"</{node.name}>"

    if node.child is not None:
        body = render(node.child, depth + 1, counter, indent)
    elif attributes:
        body = indent * (depth + 1) + placeholder(counter.next())
    else:
        return f"{current_indent}{opening}{FINAL_CURSOR}{closing}"

    return f"{current_indent}{opening}\n{body}\n{current_indent}{closing}"


def expand(line: str, indent: str = DEFAULT_INDENT) -> str | None:
    node = parse(line)
    if node is None:
        return None
    return render(node, indent=indent)
