"""sxalign Projector core — main Projector class.

The Projector walks a node tree and emits target-language source text in
which every piece of elided markup is replaced by placeholder spaces of the
same width. Line and column positions in the output therefore match the
template, and diagnostics reported against the generated code map straight
back onto it.

Design Principles:
1. **Pure**: no I/O, no mutation of the tree; same input → same output
2. **O(1) dispatch**: dict-based node type → handler lookup
3. **Instance-owned memo**: indent strings cached per Projector, never globally

Example:
    >>> from sxalign import Projector
    >>> from sxalign.nodes import ConstructKind, LanguageConstruct, LineBreak
    >>> tree = [
    ...     LanguageConstruct(ConstructKind.CONTROL, "if ok", (LineBreak(),)),
    ... ]
    >>> Projector().project(tree)
    'if ok\\n'

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from sxalign.nodes import (
    ConstructKind,
    LanguageConstruct,
    LineBreak,
    MarkupElement,
    Multi,
    Node,
    TextBlock,
)
from sxalign.options import DEFAULT_OPTIONS, ProjectionOptions
from sxalign.projector.indent import IndentMixin
from sxalign.projector.markup import MarkupProjectionMixin, fragment_code
from sxalign.projector.padding import PaddingMixin

logger = logging.getLogger(__name__)


class Projector(
    IndentMixin,
    PaddingMixin,
    MarkupProjectionMixin,
):
    """Project a node tree into column-aligned source text.

    One instance corresponds to one projection session: it owns the indent
    memo and the options it was created with. Instances hold no tree state,
    so a single Projector may be reused for many trees.

    Attributes:
        options: ProjectionOptions in effect
        _indent_cache: Memo of indent level → whitespace
        _node_dispatch: Node class → handler
        _construct_dispatch: ConstructKind → handler

    Node Dispatch:
        Uses O(1) dict lookup for node type → handler:
            ```python
            dispatch = {
                Multi: self._project_multi,
                LanguageConstruct: self._project_construct,
                MarkupElement: self._project_markup_node,
                LineBreak: self._project_line_break,
                TextBlock: self._skip_detached_text,
            }
            handler = dispatch.get(type(node))
            ```
        Node types without a handler project to nothing.

    """

    __slots__ = (
        "_check_source_width",
        "_construct_dispatch",
        "_indent_cache",
        "_indent_unit",
        "_node_dispatch",
        "options",
    )

    def __init__(self, options: ProjectionOptions | None = None):
        self.options = options or DEFAULT_OPTIONS
        self._indent_unit = self.options.indent_unit
        self._check_source_width = self.options.check_source_width
        self._indent_cache: dict[int, str] = {}
        self._node_dispatch: dict[type, Callable[[Any, int, bool], str | None]] = {
            Multi: self._project_multi,
            LanguageConstruct: self._project_construct,
            MarkupElement: self._project_markup_node,
            LineBreak: self._project_line_break,
            TextBlock: self._skip_detached_text,
        }
        self._construct_dispatch: dict[
            ConstructKind, Callable[[LanguageConstruct, int, bool], str]
        ] = {
            ConstructKind.EMBEDDED_BLOCK: self._project_embedded,
            ConstructKind.INTERPOLATION: self._project_statement,
            ConstructKind.CONTROL: self._project_statement,
            ConstructKind.OUTPUT: self._project_statement,
        }

    def project(
        self,
        nodes: Iterable[Any] | Node,
        indent: int = 0,
        is_root: bool = True,
    ) -> str:
        """Project a sequence of sibling nodes.

        Args:
            nodes: Nodes in source order (a single Node is accepted too).
                Entries that are not Nodes are ignored.
            indent: Nesting level of the sequence
            is_root: True only for the document's top-level sequence

        Returns:
            Concatenated output of every node that produced any
        """
        if isinstance(nodes, Node):
            nodes = (nodes,)

        parts: list[str] = []
        for node in nodes:
            if not isinstance(node, Node):
                continue
            text = self.dispatch(node, indent, is_root)
            if text:
                parts.append(text)
        return "".join(parts)

    def dispatch(self, node: Node, indent: int, is_root: bool) -> str | None:
        """Project a single node, or return None when it produces no output."""
        handler = self._node_dispatch.get(type(node))
        if handler is None:
            logger.debug("Skipping unrecognized node: %s", type(node).__name__)
            return None
        return handler(node, indent, is_root)

    def _project_multi(self, node: Multi, indent: int, is_root: bool) -> str:
        return self.project(node.children, indent, is_root)

    def _project_construct(
        self, node: LanguageConstruct, indent: int, is_root: bool
    ) -> str | None:
        handler = self._construct_dispatch.get(node.kind)
        if handler is None:
            logger.debug("Skipping construct of unknown kind: %r", node.kind)
            return None
        return handler(node, indent, is_root)

    def _project_embedded(self, node: LanguageConstruct, indent: int, is_root: bool) -> str:
        """Embedded target-language code.

        The code carries its own indentation, so at the document root it is
        emitted flush-left; nested inside markup it moves one level in.
        """
        if node.body is None:
            return ""
        return self.project(node.body, 0 if is_root else indent + 1, False)

    def _project_statement(self, node: LanguageConstruct, indent: int, is_root: bool) -> str:
        """Control, output or interpolation: the code line, then its body one level in."""
        text = self.indent_space(indent) + fragment_code(node)
        if node.body is not None:
            text += self.project(node.body, indent + 1, False)
        return text

    def _project_markup_node(self, node: MarkupElement, indent: int, is_root: bool) -> str:
        return self.project_markup(node, indent)

    def _project_line_break(self, node: LineBreak, indent: int, is_root: bool) -> str:
        return "\n"

    def _skip_detached_text(self, node: TextBlock, indent: int, is_root: bool) -> None:
        """Text outside a markup element's content carries no code."""
        logger.debug("Skipping text block outside markup content")
        return None
