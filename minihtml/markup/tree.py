"""
Element tree.

Builds a small tagged-variant tree from the token stream in a single pass.
Every node keeps its source offsets so that rule checks can report exact
locations instead of re-searching the text.

Pairing follows a stack discipline: a closing tag closes the nearest open
element of the same name. Elements left open (no matching closing tag) are
not tag pairs; their content is hoisted to the enclosing element so the rest
of the document is still checked.
"""

from bisect import bisect_left
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from minihtml.markup.tokenizer import Token, tokenize

DEFAULT_VOID_ELEMENTS = frozenset({"meta"})


class NodeKind(str, Enum):
    """Node variants the rule checks care about."""

    TEXT = "text"
    HTML = "html"
    HEAD = "head"
    BODY = "body"
    TITLE = "title"
    META = "meta"
    DIV = "div"
    SPAN = "span"
    OTHER = "other"

    @classmethod
    def for_tag(cls, name: str) -> "NodeKind":
        try:
            kind = cls(name)
        except ValueError:
            return cls.OTHER
        return cls.OTHER if kind == cls.TEXT else kind


@dataclass
class TextNode:
    """A run of character data between tags."""

    start: int
    end: int
    kind: NodeKind = NodeKind.TEXT


@dataclass
class ElementNode:
    """A located element (the Element Match of a validation pass)."""

    name: str
    open_token: Token
    close_token: Optional[Token] = None
    void: bool = False
    children: list[Union["ElementNode", TextNode]] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.for_tag(self.name)

    @property
    def closed(self) -> bool:
        """True when this element is an open/close tag pair."""
        return self.close_token is not None

    @property
    def start(self) -> int:
        return self.open_token.start

    @property
    def end(self) -> int:
        return self.close_token.end if self.close_token else self.open_token.end

    @property
    def inner_start(self) -> int:
        return self.open_token.end

    @property
    def inner_end(self) -> int:
        return self.close_token.start if self.close_token else self.open_token.end

    def elements(self) -> list["ElementNode"]:
        """Direct element children."""
        return [c for c in self.children if isinstance(c, ElementNode)]

    def iter_descendants(self) -> Iterator["ElementNode"]:
        """All element descendants in document order."""
        return iter_elements(self.children)


@dataclass
class DocumentTree:
    """Root of a parsed snapshot."""

    text: str
    tokens: list[Token]
    children: list[Union[ElementNode, TextNode]] = field(default_factory=list)
    stray_closes: list[Token] = field(default_factory=list)
    matched_closes: set[int] = field(default_factory=set)
    _starts: Optional[list[int]] = field(default=None, init=False, repr=False)

    def elements(self) -> list[ElementNode]:
        return [c for c in self.children if isinstance(c, ElementNode)]

    def tokens_within(self, start: int, end: int) -> list[Token]:
        """Tokens lying entirely inside [start, end), in source order."""
        if self._starts is None:
            self._starts = [t.start for t in self.tokens]
        i = bisect_left(self._starts, start)
        found = []
        while i < len(self.tokens) and self.tokens[i].start < end:
            if self.tokens[i].within(start, end):
                found.append(self.tokens[i])
            i += 1
        return found

    def is_matched_close(self, token: Token) -> bool:
        """True if a closing token ends some element pair."""
        return token.start in self.matched_closes


def iter_elements(nodes: list) -> Iterator[ElementNode]:
    """Preorder walk over element nodes without recursion."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, ElementNode):
            yield node
            stack.extend(reversed(node.children))


def _close_implicitly(stack: list[ElementNode], root: DocumentTree) -> None:
    # An unclosed element is the last child of its container, so its
    # children can be appended after it without reordering.
    node = stack.pop()
    siblings = stack[-1].children if stack else root.children
    siblings.extend(node.children)
    node.children = []


def build_tree(
    text: str,
    tokens: Optional[list[Token]] = None,
    void_elements: frozenset = DEFAULT_VOID_ELEMENTS,
) -> DocumentTree:
    """
    Parse text into a DocumentTree.

    Args:
        text: Full document text
        tokens: Pre-computed tokens (tokenized here if None)
        void_elements: Tag names that never take a closing tag

    Returns:
        DocumentTree with offsets recorded on every node
    """
    if tokens is None:
        tokens = tokenize(text)

    root = DocumentTree(text=text, tokens=tokens)
    stack: list[ElementNode] = []
    cursor = 0

    for tok in tokens:
        container = stack[-1].children if stack else root.children
        if tok.start > cursor:
            container.append(TextNode(start=cursor, end=tok.start))
        cursor = tok.end

        if tok.is_close:
            match_index = None
            for i in range(len(stack) - 1, -1, -1):
                if stack[i].name == tok.name:
                    match_index = i
                    break
            if match_index is None:
                root.stray_closes.append(tok)
                continue
            while len(stack) - 1 > match_index:
                _close_implicitly(stack, root)
            node = stack.pop()
            node.close_token = tok
            root.matched_closes.add(tok.start)
        elif tok.is_open and tok.name not in void_elements:
            node = ElementNode(name=tok.name, open_token=tok)
            container.append(node)
            stack.append(node)
        else:
            container.append(ElementNode(name=tok.name, open_token=tok, void=True))

    if cursor < len(text):
        container = stack[-1].children if stack else root.children
        container.append(TextNode(start=cursor, end=len(text)))

    while stack:
        _close_implicitly(stack, root)

    return root
