"""Snippet sources: the static catalog and the dynamic tag expander."""

from .catalog import get_static_snippets
from .markup import PlaceholderCounter, expand, render
from .shorthand import Attribute, Classification, TagNode, classify, parse

__all__ = [
    "Attribute",
    "Classification",
    "PlaceholderCounter",
    "TagNode",
    "classify",
    "expand",
    "get_static_snippets",
    "parse",
    "render",
]
