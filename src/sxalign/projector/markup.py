"""Markup element projection.

Provides mixin projecting a MarkupElement into its placeholder prefix
followed by its projected content.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from sxalign.exceptions import StructuralError
from sxalign.nodes import LanguageConstruct, MarkupElement, TextBlock


def fragment_code(node: LanguageConstruct) -> str:
    """Trimmed code fragment of a construct that must carry one."""
    if not isinstance(node.fragment, str):
        raise StructuralError(
            f"{node.kind.name} construct has no code fragment",
            node=node,
        )
    return node.fragment.strip()


class MarkupProjectionMixin:
    """Mixin for projecting markup elements.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From IndentMixin
        def indent_space(self, level: int) -> str: ...

        # From PaddingMixin
        def pad(self, descriptor: Any) -> str: ...

        # From Projector core
        def project(self, nodes: Iterable[Any], indent: int = 0, is_root: bool = True) -> str: ...

    def project_markup(self, node: MarkupElement, indent: int) -> str:
        """Project a markup element at ``indent``.

        The element's own line position and its elided head become
        whitespace. Content that is a single bodiless output or
        interpolation collapses into an inline expression terminated by a
        newline. A text block contributes its children in place; any other
        content is projected in place at the same indent.
        """
        prefix = self.indent_space(indent) + self.pad(node.descriptor)
        content = node.content
        if content is None:
            return prefix

        if (
            isinstance(content, LanguageConstruct)
            and content.kind.is_inline
            and content.body is None
        ):
            return f"{prefix}{self.indent_space(indent)}{fragment_code(content)}\n"

        if isinstance(content, TextBlock):
            return prefix + self.project(content.children, indent, False)

        return prefix + self.project((content,), indent, False)
