"""Select spell-checkable spans from a tree-sitter syntax tree."""

from typing import Iterator

from tree_sitter import Node, Tree

from errors import ExtractError
from models import CandidateSpan

# Node kinds whose text is spell checked
SPAN_KINDS = frozenset(
    {
        "comment",
        "string_fragment",
        "identifier",
        "property_identifier",
    }
)


def iter_nodes(tree: Tree) -> Iterator[Node]:
    """Yield every node in depth-first pre-order.

    Uses a single tree cursor instead of recursion, so arbitrarily deep
    trees do not grow the call stack.
    """
    cursor = tree.walk()

    while True:
        yield cursor.node

        if cursor.goto_first_child():
            continue

        if cursor.goto_next_sibling():
            continue

        while not cursor.goto_next_sibling():
            if not cursor.goto_parent():
                return


def node_text(node: Node, source: bytes) -> str:
    """Decode the source bytes covered by a node.

    Raises:
        ExtractError: If the byte range is not valid UTF-8
    """
    try:
        return source[node.start_byte : node.end_byte].decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExtractError(
            f"Invalid text in bytes {node.start_byte}..{node.end_byte}: {e.reason}"
        ) from e


def iter_candidate_spans(tree: Tree, source: bytes) -> Iterator[CandidateSpan]:
    """Yield a CandidateSpan for every node whose kind is in SPAN_KINDS.

    Args:
        tree: Parsed syntax tree
        source: The exact bytes the tree was parsed from
    """
    for node in iter_nodes(tree):
        if node.type not in SPAN_KINDS:
            continue
        row, column = node.start_point
        yield CandidateSpan(
            text=node_text(node, source),
            kind=node.type,
            line=row + 1,
            column=column + 1,
        )
