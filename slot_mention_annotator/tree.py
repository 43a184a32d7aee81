"""
Constituency parse trees with token-index spans
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from nltk.tree import Tree

from .spans import Span


class ParseTree:
    """
    A node of a constituency parse.

    Leaves hold the token text as their label. Once ``index_spans`` has run,
    every node carries the half-open token range ``[begin, end)`` it covers.
    """

    __slots__ = ("label", "children", "begin", "end")

    def __init__(
        self,
        label: str,
        children: Optional[List["ParseTree"]] = None,
        begin: Optional[int] = None,
        end: Optional[int] = None,
    ):
        self.label = label
        self.children = children if children is not None else []
        self.begin = begin
        self.end = end

    def __repr__(self) -> str:
        return f"ParseTree({self.label!r}, begin={self.begin}, end={self.end}, children={len(self.children)})"

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_indexed(self) -> bool:
        return self.begin is not None and self.end is not None

    def leaves(self) -> List["ParseTree"]:
        return [node for node in self.iter_postorder() if node.is_leaf]

    def iter_postorder(self) -> Iterator["ParseTree"]:
        """Yield nodes children-first, left to right, without recursion."""
        stack: List[tuple] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded or node.is_leaf:
                yield node
                continue
            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((child, False))

    def index_spans(self, start: int = 0) -> None:
        """Assign token ranges to every node, numbering leaves from ``start``."""
        position = start
        for node in self.iter_postorder():
            if node.is_leaf:
                node.begin = position
                node.end = position + 1
                position += 1
            else:
                node.begin = node.children[0].begin
                node.end = node.children[-1].end

    def find_smallest_covering(self, span: Span, label: str = "NP") -> Optional["ParseTree"]:
        """
        Find the deepest node with ``label`` whose range covers ``span``.

        Nodes are tested in post-order, so the first hit is the smallest such
        constituent (leftmost on ties). Indexes the tree if needed.
        """
        if not self.is_indexed:
            self.index_spans(0)
        for node in self.iter_postorder():
            if not node.is_indexed or node.label != label:
                continue
            if node.begin <= span.start and node.end >= span.end:
                return node
        return None

    def to_string(self) -> str:
        if self.is_leaf:
            return self.label
        return "(" + self.label + " " + " ".join(child.to_string() for child in self.children) + ")"

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, text: str) -> "ParseTree":
        """
        Read a tree in Penn Treebank bracketed notation.

        An unlabeled outer bracket, as emitted by some parsers, becomes ROOT.

        Raises:
            ValueError: if the string is empty or its brackets do not form one tree
        """
        if not text or not text.strip():
            raise ValueError("Empty parse tree string")
        return cls.from_nltk(Tree.fromstring(text, remove_empty_top_bracketing=False))

    @classmethod
    def from_nltk(cls, tree: Tree) -> "ParseTree":
        """Copy an ``nltk.Tree`` into ParseTree nodes, without recursion."""
        root = cls(label=tree.label() or "ROOT")
        stack = [(tree, root)]
        while stack:
            source, target = stack.pop()
            for child in source:
                if isinstance(child, Tree):
                    node = cls(label=child.label() or "ROOT")
                    stack.append((child, node))
                else:
                    node = cls(label=str(child))
                target.children.append(node)
        return root
