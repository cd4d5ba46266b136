"""Utility for determining the namespace a source file declares."""

from docmerge.syntax_node import NodeKind, SyntaxNode

GLOBAL_NAMESPACE = "Global Namespace"


def resolve_namespace(root: SyntaxNode) -> str:
    """Return the first file-scoped namespace, else the first block namespace."""
    for kind in (NodeKind.FILE_SCOPED_NAMESPACE, NodeKind.NAMESPACE):
        for node in root.descendants():
            if node.kind is kind:
                return node.name
    return GLOBAL_NAMESPACE
