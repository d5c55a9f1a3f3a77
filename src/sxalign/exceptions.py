"""Exceptions for sxalign.

Exception Hierarchy:
ProjectionError (base)
└── StructuralError          # Recognized node kind with missing/malformed fields
    └── PaddingMismatchError # Computed padding disagrees with the source width

Unrecognized node kinds are never raised; the projector skips them.

Error Messages:
Every exception carries an ErrorCode and, where known, the path of the
offending node from the tree root plus a short repr of it:

    ```
    SX-STR-001: 'attr' value has no field at index 3
      at: root[0][3][2]
      node: ['html', 'attr', 'class', ['slim', 'attrvalue']]
    ```

"""

from __future__ import annotations

import reprlib
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes for sxalign errors.

    Format: SX-{CATEGORY}-{NUMBER}
    Categories: STR (tree structure), CFG (configuration)
    """

    # Structure errors (SX-STR-xxx)
    MALFORMED_NODE = "SX-STR-001"
    PADDING_MISMATCH = "SX-STR-002"

    # Configuration errors (SX-CFG-xxx)
    INVALID_INDENT = "SX-CFG-001"

    @property
    def category(self) -> str:
        """Error category ('structure' or 'config')."""
        prefix = self.value.split("-")[1]
        return {
            "STR": "structure",
            "CFG": "config",
        }.get(prefix, "unknown")


_node_repr = reprlib.Repr()
_node_repr.maxlist = 6
_node_repr.maxlevel = 3
_node_repr.maxstring = 40


def describe_node(node: Any) -> str:
    """Short, bounded repr of a node for error messages."""
    return _node_repr.repr(node)


class ProjectionError(Exception):
    """Base exception for all sxalign errors.

    Attributes:
        message: Human-readable description without location details.
        code: ErrorCode for searchable error identification.
        path: Location of the offending node, e.g. ``root[0].body[2]``.
        node: The offending node (raw sexp or Node), if any.
    """

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        node: Any = None,
        code: ErrorCode | None = None,
    ):
        self.message = message
        self.path = path
        self.node = node
        if code is not None:
            self.code = code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"  at: {self.path}")
        if self.node is not None:
            parts.append(f"  node: {describe_node(self.node)}")
        return "\n".join(parts)

    def format_compact(self) -> str:
        """Format error as ``CODE: message`` followed by location lines."""
        text = str(self)
        if self.code and not text.startswith(self.code.value):
            text = f"{self.code.value}: {text}"
        return text


class StructuralError(ProjectionError):
    """A node of a recognized kind is missing required fields.

    Raised instead of computing padding from incomplete data, since a wrong
    column count silently breaks every diagnostic mapped onto the output.
    """

    code: ErrorCode | None = ErrorCode.MALFORMED_NODE


class PaddingMismatchError(StructuralError):
    """Computed attribute padding differs from the width reported by the parser."""

    code: ErrorCode | None = ErrorCode.PADDING_MISMATCH

    def __init__(
        self,
        computed: int,
        expected: int,
        *,
        path: str | None = None,
        node: Any = None,
    ):
        self.computed = computed
        self.expected = expected
        super().__init__(
            f"Attribute padding is {computed} columns but the source spans {expected}",
            path=path,
            node=node,
        )
