"""Pytest configuration and fixtures for sxalign tests."""

import pytest

from sxalign import ProjectionOptions, Projector


@pytest.fixture
def projector():
    """Create a Projector with default options."""
    return Projector()


@pytest.fixture
def wide_projector():
    """Create a Projector indenting four spaces per level."""
    return Projector(ProjectionOptions(indent_width=4))


@pytest.fixture
def items_table_sexp():
    """Raw tree for a conditional table listing items with an else branch.

    Template::

        - if items.any?
          table id=items class='table yellow'
          - for item in items
            tr
              td.name = item.name
              td.price = item.price
        - else
          p 'No items found.'
    """
    return [
        "multi",
        [
            "slim", "control", "if items.any?",
            [
                "multi",
                ["newline"],
                [
                    "html", "tag", "table",
                    [
                        "html", "attrs",
                        ["html", "attr", "id", ["static", "items"]],
                        ["html", "attr", "class", ["static", "table yellow"]],
                    ],
                    ["multi", ["newline"]],
                ],
                [
                    "slim", "control", "for item in items",
                    [
                        "multi",
                        ["newline"],
                        [
                            "html", "tag", "tr", ["html", "attrs"],
                            [
                                "multi",
                                ["newline"],
                                [
                                    "html", "tag", "td",
                                    ["html", "attrs", ["html", "attr", "class", ["static", "name"]]],
                                    ["slim", "output", True, "item.name", ["multi", ["newline"]]],
                                ],
                                [
                                    "html", "tag", "td",
                                    ["html", "attrs", ["html", "attr", "class", ["static", "price"]]],
                                    ["slim", "output", True, "item.price", ["multi", ["newline"]]],
                                ],
                            ],
                        ],
                    ],
                ],
            ],
        ],
        [
            "slim", "control", "else",
            [
                "multi",
                ["newline"],
                [
                    "html", "tag", "p", ["html", "attrs"],
                    ["slim", "text", "inline", ["multi", ["slim", "interpolate", "'No items found.'"]]],
                ],
                ["newline"],
            ],
        ],
    ]


@pytest.fixture
def embedded_sexp():
    """Raw tree for an embedded code block followed by a conditional.

    Template::

        ruby:
          print_value = true

        - if print_value
          p = 'Hello World'.capitalize
    """
    return [
        "multi",
        [
            "slim", "embedded", "ruby",
            ["multi", ["newline"], ["slim", "interpolate", "print_value = true"], ["newline"], ["newline"]],
            ["html", "attrs"],
        ],
        [
            "slim", "control", "if print_value",
            [
                "multi",
                ["newline"],
                [
                    "html", "tag", "p", ["html", "attrs"],
                    ["slim", "output", False, "'Hello World'.capitalize", ["multi", ["newline"]]],
                ],
            ],
        ],
    ]
