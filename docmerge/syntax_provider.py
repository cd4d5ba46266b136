"""Syntax providers that turn C# source text into the pipeline's node model.

The pipeline only depends on the `SyntaxProvider` protocol. The default
implementation parses with tree-sitter's C# grammar and keeps just the nodes
documentation cares about: namespaces, type declarations, methods and
properties, each with its leading comments.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol

import tree_sitter_c_sharp
from tree_sitter import Language, Parser

from docmerge.syntax_node import NodeKind, SyntaxNode, Trivia, TriviaKind, XmlElement

if TYPE_CHECKING:
    from tree_sitter import Node

NODE_KINDS: dict[str, NodeKind] = {
    "compilation_unit": NodeKind.COMPILATION_UNIT,
    "file_scoped_namespace_declaration": NodeKind.FILE_SCOPED_NAMESPACE,
    "namespace_declaration": NodeKind.NAMESPACE,
    "class_declaration": NodeKind.TYPE,
    "struct_declaration": NodeKind.TYPE,
    "interface_declaration": NodeKind.TYPE,
    "record_declaration": NodeKind.TYPE,
    "record_struct_declaration": NodeKind.TYPE,
    "method_declaration": NodeKind.METHOD,
    "property_declaration": NodeKind.PROPERTY,
}

# Nodes that never map to a kind but may hold declarations.
TRANSPARENT_NODES = frozenset(
    {"declaration_list", "preproc_if", "preproc_elif", "preproc_else", "ERROR"}
)

XML_ELEMENT_RE = re.compile(
    r"<(?P<name>[A-Za-z_][\w:.-]*)(?:\s[^<>]*?)?(?:/>|>.*?</(?P=name)\s*>)",
    re.DOTALL,
)


class SyntaxProvider(Protocol):
    """Anything that can parse source text into a `SyntaxNode` tree."""

    def parse(self, source: str) -> SyntaxNode:
        """Parse source text and return the root node."""
        ...


def parse_doc_elements(text: str) -> tuple[XmlElement, ...]:
    """Split documentation comment text into its top-level XML elements."""
    return tuple(
        XmlElement(m.group("name"), m.group(0)) for m in XML_ELEMENT_RE.finditer(text)
    )


def is_doc_comment(text: str) -> bool:
    """Check if a comment is a `///` documentation line (not `////`)."""
    return text.startswith("///") and not text.startswith("////")


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _comment_trivia(text: str) -> Trivia:
    kind = (
        TriviaKind.MULTI_LINE_COMMENT
        if text.startswith("/*")
        else TriviaKind.SINGLE_LINE_COMMENT
    )
    return Trivia(kind, text)


def _doc_trivia(lines: list[str]) -> Trivia:
    text = "\n".join(lines)
    return Trivia(TriviaKind.DOCUMENTATION_COMMENT, text, parse_doc_elements(text))


def leading_trivia(node: Node) -> tuple[Trivia, ...]:
    """Group the comments directly in front of a node into trivia.

    Consecutive `///` lines form one documentation comment; a blank line or
    any other comment ends it.
    """
    comments: list[Node] = []
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "comment":
        comments.append(sibling)
        sibling = sibling.prev_sibling
    comments.reverse()

    trivia: list[Trivia] = []
    doc_lines: list[str] = []
    last_doc_row = -2
    for comment in comments:
        text = _node_text(comment)
        row = comment.start_point[0]
        if is_doc_comment(text):
            if doc_lines and row != last_doc_row + 1:
                trivia.append(_doc_trivia(doc_lines))
                doc_lines = []
            doc_lines.append(text)
            last_doc_row = row
            continue
        if doc_lines:
            trivia.append(_doc_trivia(doc_lines))
            doc_lines = []
        trivia.append(_comment_trivia(text))
    if doc_lines:
        trivia.append(_doc_trivia(doc_lines))
    return tuple(trivia)


class TreeSitterSyntaxProvider:
    """Parses C# with the tree-sitter-c-sharp grammar."""

    def __init__(self) -> None:
        """Create a parser bound to the C# grammar."""
        self.parser = Parser(Language(tree_sitter_c_sharp.language()))

    def parse(self, source: str) -> SyntaxNode:
        """Parse C# source text into a declaration tree."""
        tree = self.parser.parse(source.encode("utf-8"))
        root = SyntaxNode(NodeKind.COMPILATION_UNIT)
        root.children = self._declarations(tree.root_node)
        return root

    def _declarations(self, node: Node) -> list[SyntaxNode]:
        """Convert the declarations below a tree-sitter node, in source order."""
        found: list[SyntaxNode] = []
        for child in node.children:
            kind = NODE_KINDS.get(child.type)
            if kind is not None and kind is not NodeKind.COMPILATION_UNIT:
                name_node = child.child_by_field_name("name")
                found.append(
                    SyntaxNode(
                        kind=kind,
                        name=_node_text(name_node) if name_node is not None else "",
                        leading_trivia=leading_trivia(child),
                        children=self._declarations(child),
                    )
                )
            elif child.type in TRANSPARENT_NODES:
                found.extend(self._declarations(child))
        return found
