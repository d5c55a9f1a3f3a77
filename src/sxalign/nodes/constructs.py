"""Language construct nodes: embedded code, control, output, interpolation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from sxalign.nodes.base import Node


class ConstructKind(Enum):
    """Subtype of a template language construct."""

    EMBEDDED_BLOCK = "embedded"
    INTERPOLATION = "interpolate"
    CONTROL = "control"
    OUTPUT = "output"

    @property
    def is_inline(self) -> bool:
        """True for kinds that may collapse into a markup element's inline body."""
        return self in (ConstructKind.OUTPUT, ConstructKind.INTERPOLATION)


@dataclass(frozen=True, slots=True)
class LanguageConstruct(Node):
    """Template statement carrying a literal code fragment.

    ``fragment`` is None only for EMBEDDED_BLOCK, whose code lives entirely
    in ``body``. ``body`` is None when the construct has no nested content,
    which is distinct from an empty body.
    """

    kind: ConstructKind
    fragment: str | None = None
    body: Sequence[Node] | None = None
