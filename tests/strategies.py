"""Shared hypothesis strategies for sxalign property-based testing.

Provides strategies that build structurally valid node trees:

- **Leaves**: line breaks, bodiless constructs, bare markup heads
- **Trees**: recursive Multi / construct / markup nesting
- **Sequences**: sibling lists, optionally salted with non-node entries

Individual test modules compose them into property-specific strategies.
"""

from __future__ import annotations

from hypothesis import strategies as st

from sxalign.nodes import (
    Attribute,
    AttributeListDescriptor,
    ConstructKind,
    LanguageConstruct,
    LineBreak,
    MarkupElement,
    Multi,
    TagDescriptor,
    Unrecognized,
    ValueKind,
)

# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

tag_names = st.from_regex(r"[a-z][a-z0-9]{0,9}", fullmatch=True)

attribute_names = st.from_regex(r"[a-z][a-z_-]{0,11}", fullmatch=True)

# Code fragments without newlines; surrounding blanks exercise trimming
code_fragments = st.from_regex(r" {0,2}[a-z_][a-z0-9_. ()]{0,20}[a-z0-9)] {0,2}", fullmatch=True)

value_texts = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc")),
    max_size=20,
)

# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

attributes = st.builds(
    Attribute,
    name=attribute_names,
    value_kind=st.sampled_from(ValueKind),
    value_text=value_texts,
)

tag_descriptors = st.builds(TagDescriptor, name=tag_names)

attribute_list_descriptors = st.builds(
    AttributeListDescriptor,
    attributes=st.lists(attributes, max_size=4).map(tuple),
)

descriptors = st.one_of(tag_descriptors, attribute_list_descriptors)

# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

statement_kinds = st.sampled_from(
    [ConstructKind.CONTROL, ConstructKind.OUTPUT, ConstructKind.INTERPOLATION]
)

line_breaks = st.just(LineBreak())

leaf_nodes = st.one_of(
    line_breaks,
    st.builds(LanguageConstruct, kind=statement_kinds, fragment=code_fragments),
    st.builds(MarkupElement, descriptor=descriptors),
)


def _extend(children: st.SearchStrategy) -> st.SearchStrategy:
    bodies = st.lists(children, max_size=4).map(tuple)
    return st.one_of(
        bodies.map(Multi),
        st.builds(LanguageConstruct, kind=statement_kinds, fragment=code_fragments, body=bodies),
        st.builds(LanguageConstruct, kind=st.just(ConstructKind.EMBEDDED_BLOCK), body=bodies),
        st.builds(MarkupElement, descriptor=descriptors, content=children),
    )


nodes = st.recursive(leaf_nodes, _extend, max_leaves=25)

node_sequences = st.lists(nodes, max_size=6)

# Sequences salted with entries the projector must ignore or skip
noisy_sequences = st.lists(
    st.one_of(
        nodes,
        st.none(),
        st.integers(),
        st.text(max_size=5),
        st.builds(Unrecognized, raw=st.just(["comment", "x"])),
    ),
    max_size=8,
)

indent_levels = st.integers(min_value=0, max_value=12)
