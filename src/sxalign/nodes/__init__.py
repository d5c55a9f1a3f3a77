"""sxalign tree nodes.

Immutable, closed set of node types the projector understands:

- Multi: transparent container of sibling nodes
- LanguageConstruct: embedded block, interpolation, control, output
- MarkupElement: tag or attribute list head with optional content
- LineBreak: a source newline
- TextBlock: literal text, projected only as a markup element's content
- Unrecognized: anything else, skipped during projection

"""

from sxalign.nodes.base import Node
from sxalign.nodes.constructs import ConstructKind, LanguageConstruct
from sxalign.nodes.markup import (
    Attribute,
    AttributeListDescriptor,
    Descriptor,
    MarkupElement,
    TagDescriptor,
    ValueKind,
)
from sxalign.nodes.structure import LineBreak, Multi, TextBlock, Unrecognized

__all__ = [
    "Attribute",
    "AttributeListDescriptor",
    "ConstructKind",
    "Descriptor",
    "LanguageConstruct",
    "LineBreak",
    "MarkupElement",
    "Multi",
    "Node",
    "TagDescriptor",
    "TextBlock",
    "Unrecognized",
    "ValueKind",
]
