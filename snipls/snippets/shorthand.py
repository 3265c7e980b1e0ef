"""Parser for the one-line tag shorthand.

A shorthand names a tag, its attributes and optionally a nested child:

    Button0onPress(handlePress, id)0style>Text

Segments are separated by ``0`` (it can never start an identifier, so a tag
name is always unambiguous), ``name(a, b)`` is an attribute with one
placeholder per argument, a bare ``name`` is an attribute with a single
``value`` placeholder, and everything after the first ``>`` is the child
expression.
"""

import re
from dataclasses import dataclass, field

SEPARATOR = "0"
NESTING_MARKER = ">"

IDENTIFIER = r"[a-zA-Z_][a-zA-Z0-9_]*"
CALL_SUFFIX = r"(?:\([^()]*\))?"

TAG_NAME_RE = re.compile(rf"^({IDENTIFIER}){CALL_SUFFIX}$")
CALL_RE = re.compile(rf"^({IDENTIFIER})\(([^)]*)\)$")
LEADING_IDENTIFIER_RE = re.compile(rf"^{IDENTIFIER}")
DYNAMIC_TAG_RE = re.compile(
    rf"^{IDENTIFIER}{CALL_SUFFIX}(?:{SEPARATOR}{IDENTIFIER}{CALL_SUFFIX})*{SEPARATOR}?$"
)


@dataclass
class Attribute:
    name: str
    # None for a bare attribute, otherwise the call arguments in order
    arguments: list[str] | None = None

    @property
    def is_call(self) -> bool:
        return self.arguments is not None


@dataclass
class TagNode:
    name: str
    attributes: list[Attribute] = field(default_factory=list)
    child: "TagNode | None" = None


@dataclass(frozen=True)
class Classification:
    is_dynamic: bool
    pattern_match: bool
    contains_separator: bool
    starts_with_identifier: bool


def parse_attribute(segment: str) -> Attribute:
    """Parse one attribute segment.

    ``name()`` counts as a call with a single empty argument, giving
    ``name={${1:}}``, rather than a bare attribute literally named ``name()``.
    """
    segment = segment.strip()
    match = CALL_RE.match(segment)
    if match:
        arguments = [arg.strip() for arg in match.group(2).split(",")]
        return Attribute(match.group(1), arguments)
    return Attribute(segment)


def parse(line: str) -> TagNode | None:
    """Parse a shorthand line into a tree of tag nodes.

    Returns None when the line is not a valid shorthand: an empty or
    non-identifier tag name anywhere in the chain invalidates the whole
    expression.
    """
    text = line.strip()
    own, marker, rest = text.partition(NESTING_MARKER)

    segments = own.split(SEPARATOR)
    match = TAG_NAME_RE.match(segments[0].strip())
    if not match:
        return None

    child = None
    if marker:
        child = parse(rest)
        if child is None:
            return None

    attributes = [parse_attribute(segment) for segment in segments[1:] if segment.strip()]
    return TagNode(match.group(1), attributes, child)


def classify(line: str) -> Classification:
    """Decide whether a line should be offered as a dynamic tag.

    Any of the structural pattern, or a leading identifier together with a
    separator somewhere in the line, is enough. This over-matches on purpose:
    plain words like ``View`` are offered as dynamic tags too.
    """
    text = line.strip()
    pattern_match = DYNAMIC_TAG_RE.match(text) is not None
    contains_separator = SEPARATOR in text
    starts_with_identifier = LEADING_IDENTIFIER_RE.match(text) is not None

    is_dynamic = pattern_match or (starts_with_identifier and contains_separator)
    return Classification(
        is_dynamic=is_dynamic,
        pattern_match=pattern_match,
        contains_separator=contains_separator,
        starts_with_identifier=starts_with_identifier,
    )
