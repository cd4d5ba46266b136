"""Parser-neutral syntax tree model consumed by the documentation pipeline."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """Closed set of node kinds a syntax provider may emit."""

    COMPILATION_UNIT = "compilation_unit"
    FILE_SCOPED_NAMESPACE = "file_scoped_namespace"
    NAMESPACE = "namespace"
    TYPE = "type"
    METHOD = "method"
    PROPERTY = "property"


class TriviaKind(Enum):
    """Kinds of comment trivia attached in front of a node."""

    SINGLE_LINE_COMMENT = "single_line_comment"
    MULTI_LINE_COMMENT = "multi_line_comment"
    DOCUMENTATION_COMMENT = "documentation_comment"


@dataclass(frozen=True)
class XmlElement:
    """A top-level element of a documentation comment."""

    name: str
    source: str  # opening tag to closing tag, inner `///` markers included


@dataclass(frozen=True)
class Trivia:
    """A leading comment block."""

    kind: TriviaKind
    text: str
    elements: tuple[XmlElement, ...] = ()


@dataclass
class SyntaxNode:
    """A declaration node with its leading trivia and child declarations."""

    kind: NodeKind
    name: str = ""
    leading_trivia: tuple[Trivia, ...] = ()
    children: list["SyntaxNode"] = field(default_factory=list)

    def descendants(self) -> Iterator["SyntaxNode"]:
        """Yield every descendant in depth-first pre-order, excluding self."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
