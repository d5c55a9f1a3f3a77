"""Structural nodes: containers, line breaks and unrecognized shapes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from sxalign.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Multi(Node):
    """Transparent container: projects exactly like its bare children."""

    children: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Source line break, projected as a single newline."""


@dataclass(frozen=True, slots=True)
class Unrecognized(Node):
    """A raw shape the adapter did not recognize.

    Kept in the tree for diagnostics only; the projector emits nothing for it.
    """

    raw: Any = None


@dataclass(frozen=True, slots=True)
class TextBlock(Node):
    """Literal text block (``| text`` or text after a tag name).

    Only a markup element's direct content projects it, as its children in
    place. Anywhere else it produces no output.
    """

    children: Sequence[Node] = ()
