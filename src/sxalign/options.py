"""Projection options."""

from __future__ import annotations

from dataclasses import dataclass

from sxalign.exceptions import ErrorCode, ProjectionError


@dataclass(frozen=True, slots=True)
class ProjectionOptions:
    """Configuration for a Projector.

    Attributes:
        indent_width: Spaces per nesting level in the generated text.
        lenient_attributes: When converting raw sexp, count a dynamic
            attribute value with no code field as zero width instead of
            raising StructuralError.
        check_source_width: Verify attribute padding against
            ``AttributeListDescriptor.source_width`` when the parser supplies it.
    """

    indent_width: int = 2
    lenient_attributes: bool = False
    check_source_width: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            raise ProjectionError(
                f"indent_width must be an int, got {type(self.indent_width).__name__}",
                code=ErrorCode.INVALID_INDENT,
            )
        if self.indent_width < 0:
            raise ProjectionError(
                f"indent_width must be >= 0, got {self.indent_width}",
                code=ErrorCode.INVALID_INDENT,
            )

    @property
    def indent_unit(self) -> str:
        """Whitespace emitted per nesting level."""
        return " " * self.indent_width


DEFAULT_OPTIONS = ProjectionOptions()
