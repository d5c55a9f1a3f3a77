"""Placeholder padding for elided markup.

Markup heads (tag names, attribute lists) do not appear in the generated
text. Each one is replaced by as many spaces as it occupied in the template,
so anything emitted later on the same line keeps its original column.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sxalign.exceptions import PaddingMismatchError, StructuralError
from sxalign.nodes import AttributeListDescriptor, TagDescriptor


def descriptor_width(descriptor: Any) -> int:
    """Number of source columns taken by a markup head.

    A tag counts its name. An attribute list counts one separator column
    plus each attribute's name and value text. Unknown descriptors are 0.
    """
    if isinstance(descriptor, TagDescriptor):
        return len(descriptor.name)
    if isinstance(descriptor, AttributeListDescriptor):
        width = 1
        for attr in descriptor.attributes:
            try:
                width += len(attr.name) + len(attr.value_text)
            except (AttributeError, TypeError) as e:
                raise StructuralError(
                    f"Malformed attribute in attribute list: {e}",
                    node=descriptor,
                ) from e
        return width
    return 0


class PaddingMixin:
    """Mixin turning markup descriptors into placeholder whitespace."""

    if TYPE_CHECKING:
        _check_source_width: bool

    def pad(self, descriptor: Any) -> str:
        """Placeholder spaces standing in for ``descriptor`` in the output."""
        width = descriptor_width(descriptor)
        if (
            self._check_source_width
            and isinstance(descriptor, AttributeListDescriptor)
            and descriptor.source_width is not None
            and descriptor.source_width != width
        ):
            raise PaddingMismatchError(width, descriptor.source_width, node=descriptor)
        return " " * width
