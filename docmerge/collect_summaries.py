"""Extraction of `summary` text from documentation comments."""

import logging
import re

from docmerge.syntax_node import NodeKind, SyntaxNode, TriviaKind, XmlElement

logger = logging.getLogger(__name__)

DOCUMENTED_KINDS = frozenset({NodeKind.TYPE, NodeKind.METHOD, NodeKind.PROPERTY})
SUMMARY_TAG_RE = re.compile(r"</?summary\b[^>]*>")


def strip_comment_markers(source: str) -> str:
    """Remove `///` line markers and the summary tags, then trim."""
    text = source.replace("/// ", "").replace("///", "")
    return SUMMARY_TAG_RE.sub("", text).strip()


def first_summary(node: SyntaxNode) -> XmlElement | None:
    """Return the `summary` element of the node's first doc comment, if any."""
    doc = next(
        (
            t
            for t in node.leading_trivia
            if t.kind is TriviaKind.DOCUMENTATION_COMMENT
        ),
        None,
    )
    if doc is None:
        return None
    return next((el for el in doc.elements if el.name == "summary"), None)


def collect_summaries(root: SyntaxNode) -> list[str]:
    """Collect raw summary texts for documented declarations in tree order."""
    summaries: list[str] = []
    for node in root.descendants():
        if node.kind not in DOCUMENTED_KINDS:
            continue
        summary = first_summary(node)
        if summary is None:
            logger.debug("No summary on %s %s", node.kind.value, node.name)
            continue
        text = strip_comment_markers(summary.source)
        if not text:
            logger.debug("Empty summary on %s %s", node.kind.value, node.name)
            continue
        summaries.append(text)
    return summaries
