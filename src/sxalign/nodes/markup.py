"""Markup element nodes and their head descriptors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from sxalign.nodes.base import Node


class ValueKind(Enum):
    """How an attribute value was written in the template source."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True, slots=True)
class Attribute:
    """Single attribute: name="value" or name=expr

    ``value_text`` must have the same length as the value in the template
    source (quotes and braces excluded), since padding is derived from it.
    """

    name: str
    value_kind: ValueKind
    value_text: str


@dataclass(frozen=True, slots=True)
class TagDescriptor:
    """Element head consisting of a bare tag name."""

    name: str


@dataclass(frozen=True, slots=True)
class AttributeListDescriptor:
    """Element head consisting of an attribute list.

    ``source_width`` is the width of the attribute list in the template
    source when the parser reports it; padding is checked against it.
    """

    attributes: Sequence[Attribute] = ()
    source_width: int | None = None


Descriptor = TagDescriptor | AttributeListDescriptor


@dataclass(frozen=True, slots=True)
class MarkupElement(Node):
    """Markup element: head descriptor plus optional nested content."""

    descriptor: Descriptor
    content: Node | None = None
