"""Base node class for the sxalign tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    Nodes are produced by the sexp adapter (or built directly by a caller
    that already owns a parser) and are never mutated afterwards. Indent
    level is not stored on nodes; the projector derives it while walking.

    """
