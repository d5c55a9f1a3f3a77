"""Raw sexp → node tree adapter.

Template parsers in the Slim family emit their result as a symbolic
expression: nested lists whose first items are kind tags. This module
validates that representation once, at the boundary, and converts it into
the closed node types of ``sxalign.nodes``.

Recognized shapes (tags are strings; Ruby-style ``:symbol`` prefixes are
accepted and stripped)::

    ["multi", *children]                       → Multi
    ["newline"]                                → LineBreak
    ["slim", "control", code, body?]           → LanguageConstruct(CONTROL)
    ["slim", "interpolate", text]              → LanguageConstruct(INTERPOLATION)
    ["slim", "output", escape, code, body?]    → LanguageConstruct(OUTPUT)
    ["slim", "embedded", engine, body, ...]    → LanguageConstruct(EMBEDDED_BLOCK)
    ["slim", "text", type, *children]          → TextBlock
    ["html", "tag", name, attrs, content?]     → MarkupElement(TagDescriptor)
    ["html", "attrs", *attr]                   → MarkupElement(AttributeListDescriptor)
    ["html", "attr", name, value]              → Attribute (inside "attrs" only)

Attribute values: ``["static", text]`` is STATIC and reads its text from
index 1; every other value form is DYNAMIC and reads its code from index 3
(``["slim", "attrvalue", escape, code]``).

Shapes with an unknown tag become Unrecognized nodes. Shapes with a known
tag but missing or ill-typed fields raise StructuralError.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sxalign.exceptions import StructuralError
from sxalign.nodes import (
    Attribute,
    AttributeListDescriptor,
    ConstructKind,
    LanguageConstruct,
    LineBreak,
    MarkupElement,
    Multi,
    Node,
    TagDescriptor,
    TextBlock,
    Unrecognized,
    ValueKind,
)

logger = logging.getLogger(__name__)

# Top-level tag → adapter method name
_KIND_ADAPTERS: dict[str, str] = {
    "multi": "_adapt_multi",
    "newline": "_adapt_newline",
    "slim": "_adapt_slim",
    "html": "_adapt_html",
}

# "slim" subtype → adapter method name
_SLIM_ADAPTERS: dict[str, str] = {
    "control": "_adapt_control",
    "interpolate": "_adapt_interpolate",
    "output": "_adapt_output",
    "embedded": "_adapt_embedded",
    "text": "_adapt_text",
}

# "html" subtype → adapter method name
_HTML_ADAPTERS: dict[str, str] = {
    "tag": "_adapt_tag",
    "attrs": "_adapt_attrs",
}

# Index of the value text inside an attribute value, per value form
_STATIC_VALUE_INDEX = 1
_DYNAMIC_VALUE_INDEX = 3


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def symbol(value: Any) -> str | None:
    """Normalize a kind tag: ``"multi"`` and ``":multi"`` both give ``"multi"``."""
    if isinstance(value, str):
        return value[1:] if value.startswith(":") else value
    return None


class SexpAdapter:
    """Convert raw sexp lists into sxalign nodes.

    Args:
        lenient_attributes: Treat a dynamic attribute value without a code
            field as zero width, and stringify non-string value text (None
            counts as empty), instead of raising StructuralError.
    """

    __slots__ = ("_lenient_attributes",)

    def __init__(self, lenient_attributes: bool = False):
        self._lenient_attributes = lenient_attributes

    # ─────────────────────────────────────────────────────────────────────────
    # Entry points
    # ─────────────────────────────────────────────────────────────────────────

    def adapt(self, raw: Any, path: str = "root") -> Node:
        """Convert one raw node."""
        if not _is_list(raw):
            raise StructuralError("Expected a list node", path=path, node=raw)

        kind = symbol(raw[0]) if raw else None
        method_name = _KIND_ADAPTERS.get(kind) if kind else None
        if method_name is None:
            logger.debug("Unrecognized node kind %r at %s", raw[:1], path)
            return Unrecognized(raw)
        return getattr(self, method_name)(raw, path)

    def adapt_sequence(
        self, items: Sequence[Any], path: str = "root", start: int = 0
    ) -> tuple[Node, ...]:
        """Convert a sequence of raw siblings, skipping non-list entries.

        ``start`` is the index of ``items[0]`` within its parent, for error paths.
        """
        nodes: list[Node] = []
        for i, item in enumerate(items, start=start):
            if not _is_list(item):
                continue
            nodes.append(self.adapt(item, f"{path}[{i}]"))
        return tuple(nodes)

    # ─────────────────────────────────────────────────────────────────────────
    # Field helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _field(self, raw: Sequence[Any], index: int, path: str, what: str) -> Any:
        if len(raw) <= index:
            raise StructuralError(
                f"'{symbol(raw[1]) or symbol(raw[0])}' node has no {what} at index {index}",
                path=path,
                node=raw,
            )
        return raw[index]

    def _text(self, raw: Sequence[Any], index: int, path: str, what: str) -> str:
        value = self._field(raw, index, path, what)
        if not isinstance(value, str):
            raise StructuralError(
                f"{what} must be a string, got {type(value).__name__}",
                path=f"{path}[{index}]",
                node=raw,
            )
        return value

    def _body(self, raw: Sequence[Any], index: int, path: str) -> tuple[Node, ...] | None:
        """Optional nested body; a present body is always a one-node tuple."""
        if len(raw) <= index or raw[index] is None:
            return None
        return (self.adapt(raw[index], f"{path}[{index}]"),)

    # ─────────────────────────────────────────────────────────────────────────
    # Kinds
    # ─────────────────────────────────────────────────────────────────────────

    def _adapt_multi(self, raw: Sequence[Any], path: str) -> Multi:
        children = self.adapt_sequence(raw[1:], path, start=1)
        return Multi(children)

    def _adapt_newline(self, raw: Sequence[Any], path: str) -> LineBreak:
        return LineBreak()

    def _adapt_slim(self, raw: Sequence[Any], path: str) -> Node:
        subtype = symbol(raw[1]) if len(raw) > 1 else None
        method_name = _SLIM_ADAPTERS.get(subtype) if subtype else None
        if method_name is None:
            logger.debug("Unrecognized slim construct %r at %s", subtype, path)
            return Unrecognized(raw)
        return getattr(self, method_name)(raw, path)

    def _adapt_html(self, raw: Sequence[Any], path: str) -> Node:
        subtype = symbol(raw[1]) if len(raw) > 1 else None
        method_name = _HTML_ADAPTERS.get(subtype) if subtype else None
        if method_name is None:
            logger.debug("Unrecognized html node %r at %s", subtype, path)
            return Unrecognized(raw)
        return getattr(self, method_name)(raw, path)

    # ─────────────────────────────────────────────────────────────────────────
    # Language constructs
    # ─────────────────────────────────────────────────────────────────────────

    def _adapt_control(self, raw: Sequence[Any], path: str) -> LanguageConstruct:
        code = self._text(raw, 2, path, "code")
        return LanguageConstruct(ConstructKind.CONTROL, code, self._body(raw, 3, path))

    def _adapt_interpolate(self, raw: Sequence[Any], path: str) -> LanguageConstruct:
        text = self._text(raw, 2, path, "text")
        return LanguageConstruct(ConstructKind.INTERPOLATION, text, self._body(raw, 3, path))

    def _adapt_output(self, raw: Sequence[Any], path: str) -> LanguageConstruct:
        # raw[2] is the escape flag, which does not affect the projection
        code = self._text(raw, 3, path, "code")
        return LanguageConstruct(ConstructKind.OUTPUT, code, self._body(raw, 4, path))

    def _adapt_embedded(self, raw: Sequence[Any], path: str) -> LanguageConstruct:
        self._field(raw, 3, path, "body")
        return LanguageConstruct(ConstructKind.EMBEDDED_BLOCK, None, self._body(raw, 3, path))

    def _adapt_text(self, raw: Sequence[Any], path: str) -> TextBlock:
        # raw[2] is the text type (inline, verbatim, ...)
        return TextBlock(self.adapt_sequence(raw[2:], path, start=2))

    # ─────────────────────────────────────────────────────────────────────────
    # Markup
    # ─────────────────────────────────────────────────────────────────────────

    def _adapt_tag(self, raw: Sequence[Any], path: str) -> MarkupElement:
        # raw[3] holds the tag's attributes; only the name is elided as padding
        name = self._text(raw, 2, path, "tag name")
        content = None
        if len(raw) > 4 and _is_list(raw[4]):
            content = self.adapt(raw[4], f"{path}[4]")
        return MarkupElement(TagDescriptor(name), content)

    def _adapt_attrs(self, raw: Sequence[Any], path: str) -> MarkupElement:
        attributes = []
        for i, attr in enumerate(raw[2:], start=2):
            attr_path = f"{path}[{i}]"
            if not _is_list(attr) or len(attr) < 2 or symbol(attr[1]) != "attr":
                raise StructuralError("Expected an 'attr' node", path=attr_path, node=attr)
            attributes.append(self._adapt_attr(attr, attr_path))
        return MarkupElement(AttributeListDescriptor(tuple(attributes)))

    def _adapt_attr(self, raw: Sequence[Any], path: str) -> Attribute:
        name = self._text(raw, 2, path, "attribute name")
        value = self._field(raw, 3, path, "attribute value")
        value_path = f"{path}[3]"
        if not _is_list(value) or not value:
            raise StructuralError("Attribute value must be a list node", path=value_path, node=raw)

        if symbol(value[0]) == "static":
            kind, index = ValueKind.STATIC, _STATIC_VALUE_INDEX
        else:
            kind, index = ValueKind.DYNAMIC, _DYNAMIC_VALUE_INDEX

        if len(value) <= index:
            if kind is ValueKind.DYNAMIC and self._lenient_attributes:
                logger.debug("Dynamic value of %r at %s has no code; counting 0 columns", name, path)
                return Attribute(name, kind, "")
            raise StructuralError(
                f"Attribute {name!r} value has no field at index {index}",
                path=value_path,
                node=raw,
            )
        text = value[index]
        if not isinstance(text, str):
            if not self._lenient_attributes:
                raise StructuralError(
                    f"Attribute {name!r} value text must be a string, got {type(text).__name__}",
                    path=f"{value_path}[{index}]",
                    node=raw,
                )
            text = "" if text is None else str(text)
        return Attribute(name, kind, text)


def from_sexp(raw: Any, *, lenient_attributes: bool = False) -> Node:
    """Convert a raw sexp tree into a node tree."""
    return SexpAdapter(lenient_attributes).adapt(raw)


def from_sexp_sequence(items: Sequence[Any], *, lenient_attributes: bool = False) -> tuple[Node, ...]:
    """Convert a raw sequence of sibling sexp nodes."""
    return SexpAdapter(lenient_attributes).adapt_sequence(items)
