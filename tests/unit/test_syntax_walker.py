"""Unit tests for the syntax tree walker."""

from typing import List, Optional

import pytest

from errors import ExtractError
from grammars import parse_source
from syntax_walker import SPAN_KINDS, iter_candidate_spans, iter_nodes, node_text


class FakeNode:
    """Minimal stand-in for a tree-sitter node."""

    def __init__(self, type: str, start_byte: int = 0, end_byte: int = 0, children=None):
        self.type = type
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.start_point = (0, start_byte)
        self.children: List["FakeNode"] = children or []
        self.parent: Optional["FakeNode"] = None
        for child in self.children:
            child.parent = self


class FakeCursor:
    """Cursor with the same navigation methods as tree_sitter.TreeCursor."""

    def __init__(self, root: FakeNode):
        self.root = root
        self.node = root

    def goto_first_child(self) -> bool:
        if not self.node.children:
            return False
        self.node = self.node.children[0]
        return True

    def goto_next_sibling(self) -> bool:
        if self.node is self.root or self.node.parent is None:
            return False
        siblings = self.node.parent.children
        index = siblings.index(self.node)
        if index + 1 >= len(siblings):
            return False
        self.node = siblings[index + 1]
        return True

    def goto_parent(self) -> bool:
        if self.node is self.root:
            return False
        self.node = self.node.parent
        return True


class FakeTree:
    """Tree wrapper returning a FakeCursor."""

    def __init__(self, root: FakeNode):
        self.root_node = root

    def walk(self) -> FakeCursor:
        return FakeCursor(self.root_node)


class TestIterNodes:
    """Test cursor-based traversal."""

    def test_pre_order(self):
        """Test that nodes are visited parent first, left to right."""
        tree = FakeTree(
            FakeNode(
                "program",
                children=[
                    FakeNode("a", children=[FakeNode("b"), FakeNode("c")]),
                    FakeNode("d", children=[FakeNode("e", children=[FakeNode("f")])]),
                    FakeNode("g"),
                ],
            )
        )

        assert [node.type for node in iter_nodes(tree)] == [
            "program",
            "a",
            "b",
            "c",
            "d",
            "e",
            "f",
            "g",
        ]

    def test_single_node(self):
        """Test a tree that is only a root."""
        assert [node.type for node in iter_nodes(FakeTree(FakeNode("program")))] == [
            "program"
        ]

    def test_deep_tree_does_not_recurse(self):
        """Test a tree much deeper than the interpreter recursion limit."""
        depth = 20000
        node = FakeNode("leaf")
        for _ in range(depth):
            node = FakeNode("wrapper", children=[node])

        assert sum(1 for _ in iter_nodes(FakeTree(node))) == depth + 1


class TestCandidateSpans:
    """Test span selection and text extraction."""

    def test_span_kinds(self):
        """Test the fixed allow-list."""
        assert SPAN_KINDS == {
            "comment",
            "string_fragment",
            "identifier",
            "property_identifier",
        }

    def test_only_allowed_kinds_are_emitted(self):
        """Test filtering by node kind."""
        source = b"foo bar baz"
        tree = FakeTree(
            FakeNode(
                "program",
                0,
                11,
                children=[
                    FakeNode("identifier", 0, 3),
                    FakeNode("number", 4, 7),
                    FakeNode("comment", 8, 11),
                ],
            )
        )

        spans = list(iter_candidate_spans(tree, source))

        assert [(span.text, span.kind) for span in spans] == [
            ("foo", "identifier"),
            ("baz", "comment"),
        ]

    def test_invalid_utf8_range_raises(self):
        """Test that a range splitting a multi-byte character fails."""
        source = "é".encode("utf-8")

        with pytest.raises(ExtractError):
            node_text(FakeNode("identifier", 0, 1), source)

    def test_typescript_tree(self):
        """Test spans from a real TypeScript parse."""
        source = b"const fooBar = 'hi'; // note\nobj.someProp = 1;\n"
        tree = parse_source(source, "typescript")

        spans = list(iter_candidate_spans(tree, source))

        assert [(span.text, span.kind) for span in spans] == [
            ("fooBar", "identifier"),
            ("hi", "string_fragment"),
            ("// note", "comment"),
            ("obj", "identifier"),
            ("someProp", "property_identifier"),
        ]
        assert (spans[0].line, spans[0].column) == (1, 7)
        assert (spans[3].line, spans[3].column) == (2, 1)
