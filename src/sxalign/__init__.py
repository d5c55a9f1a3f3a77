"""sxalign — column-aligned code projection for parsed Slim-style templates.

Takes the tree a template parser already produced and emits the
target-language code embedded in it. Markup that does not survive the
projection (tag names, attribute lists) is replaced by exactly as many
spaces as it took in the template, so every code fragment keeps its
original line and column. Tools that report diagnostics against the
generated code can map them straight back to the template.

Quickstart:
    >>> from sxalign import project_sexp
    >>> project_sexp(["multi", ["slim", "control", "if ok", ["multi", ["newline"]]]])
    'if ok\\n'

Typed trees:
    >>> from sxalign import Projector
    >>> from sxalign.nodes import MarkupElement, TagDescriptor
    >>> Projector().project([MarkupElement(TagDescriptor("table"))])
    '     '

Architecture:
Template Source → (external parser) → raw sexp → SexpAdapter → node tree → Projector → text

Pipeline stages:
1. **SexpAdapter**: validates the raw nested lists once and builds immutable nodes
2. **Projector**: walks the nodes, emitting code fragments and placeholder padding

Thread-Safety:
Projection is pure. The only mutable state is each Projector's indent
memo, whose entries are idempotent; give each thread its own Projector
if in doubt.

"""

from collections.abc import Iterable
from typing import Any

from sxalign.exceptions import (
    ErrorCode,
    PaddingMismatchError,
    ProjectionError,
    StructuralError,
)
from sxalign.nodes import (
    Attribute,
    AttributeListDescriptor,
    ConstructKind,
    LanguageConstruct,
    LineBreak,
    MarkupElement,
    Multi,
    Node,
    TagDescriptor,
    TextBlock,
    Unrecognized,
    ValueKind,
)
from sxalign.options import ProjectionOptions
from sxalign.projector import Projector, descriptor_width
from sxalign.sexp import SexpAdapter, from_sexp, from_sexp_sequence

__version__ = "0.1.0"


def project(
    tree: Iterable[Any] | Node,
    options: ProjectionOptions | None = None,
) -> str:
    """Project a node tree from the document root with a fresh Projector."""
    return Projector(options).project(tree, 0, True)


def project_sexp(raw: Any, options: ProjectionOptions | None = None) -> str:
    """Adapt a raw sexp tree and project it from the document root."""
    options = options or ProjectionOptions()
    tree = SexpAdapter(options.lenient_attributes).adapt(raw)
    return Projector(options).project(tree, 0, True)


__all__ = [
    "Attribute",
    "AttributeListDescriptor",
    "ConstructKind",
    "ErrorCode",
    "LanguageConstruct",
    "LineBreak",
    "MarkupElement",
    "Multi",
    "Node",
    "PaddingMismatchError",
    "ProjectionError",
    "ProjectionOptions",
    "Projector",
    "SexpAdapter",
    "StructuralError",
    "TagDescriptor",
    "TextBlock",
    "Unrecognized",
    "ValueKind",
    "__version__",
    "descriptor_width",
    "from_sexp",
    "from_sexp_sequence",
    "project",
    "project_sexp",
]
