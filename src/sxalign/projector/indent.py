"""Indentation strings for the projector.

Provides mixin computing the leading whitespace for a nesting level.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sxalign.exceptions import ErrorCode, ProjectionError


class IndentMixin:
    """Mixin for memoized indentation strings.

    The memo maps level → whitespace and belongs to the host instance, so
    separate Projector instances never share it. Re-deriving an entry always
    yields the same string, which makes concurrent inserts harmless.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _indent_cache: dict[int, str]
        _indent_unit: str

    def indent_space(self, level: int) -> str:
        """Whitespace prefix for ``level`` nesting levels."""
        cached = self._indent_cache.get(level)
        if cached is None:
            if level < 0:
                raise ProjectionError(
                    f"indent level must be >= 0, got {level}",
                    code=ErrorCode.INVALID_INDENT,
                )
            cached = self._indent_unit * level
            self._indent_cache[level] = cached
        return cached

    def clear_indent_cache(self) -> None:
        """Drop memoized indent strings (e.g. between projection sessions)."""
        self._indent_cache.clear()
