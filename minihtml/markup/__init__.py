"""Markup — Position-aware tokenizer and element tree for .mhtml text."""

from minihtml.markup.positions import LineIndex
from minihtml.markup.tokenizer import Token, TokenKind, tokenize
from minihtml.markup.tree import DocumentTree, ElementNode, NodeKind, TextNode, build_tree

__all__ = [
    "LineIndex",
    "Token",
    "TokenKind",
    "tokenize",
    "DocumentTree",
    "ElementNode",
    "NodeKind",
    "TextNode",
    "build_tree",
]
