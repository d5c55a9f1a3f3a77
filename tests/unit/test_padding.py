import pytest

from sxalign import PaddingMismatchError, Projector, StructuralError, descriptor_width
from sxalign.nodes import Attribute, AttributeListDescriptor, TagDescriptor, ValueKind


def attrs(*pairs, source_width=None):
    return AttributeListDescriptor(
        tuple(Attribute(name, kind, text) for name, kind, text in pairs),
        source_width=source_width,
    )


@pytest.mark.parametrize(
    ("descriptor", "width"),
    [
        (TagDescriptor("table"), 5),
        (TagDescriptor(""), 0),
        (attrs(), 1),
        (attrs(("id", ValueKind.STATIC, "items")), 8),
        (
            attrs(
                ("id", ValueKind.STATIC, "items"),
                ("class", ValueKind.STATIC, "table yellow"),
            ),
            25,
        ),
        (attrs(("href", ValueKind.DYNAMIC, "url_for(item)")), 1 + 4 + 13),
        (None, 0),
        ("table", 0),
    ],
)
def test_descriptor_width(descriptor, width):
    assert descriptor_width(descriptor) == width


def test_pad_is_spaces():
    assert Projector().pad(TagDescriptor("tr")) == "  "


def test_pad_matching_source_width():
    descriptor = attrs(("id", ValueKind.STATIC, "items"), source_width=8)
    assert Projector().pad(descriptor) == " " * 8


def test_pad_mismatched_source_width():
    descriptor = attrs(("id", ValueKind.STATIC, "items"), source_width=10)
    with pytest.raises(PaddingMismatchError) as exc_info:
        Projector().pad(descriptor)
    assert exc_info.value.computed == 8
    assert exc_info.value.expected == 10
    assert isinstance(exc_info.value, StructuralError)


def test_malformed_attribute_raises():
    descriptor = AttributeListDescriptor((Attribute("id", ValueKind.STATIC, None),))
    with pytest.raises(StructuralError, match="Malformed attribute"):
        descriptor_width(descriptor)
