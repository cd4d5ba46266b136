"""Per-file extraction: namespace plus rendered summaries."""

import logging

from docmerge.collect_summaries import collect_summaries
from docmerge.documentation_item import FileDocumentation
from docmerge.render_options import RenderOptions
from docmerge.resolve_namespace import resolve_namespace
from docmerge.syntax_provider import SyntaxProvider
from docmerge.transform_summary import transform_summary

logger = logging.getLogger(__name__)


def document_source(
    title: str, source: str, provider: SyntaxProvider, options: RenderOptions
) -> FileDocumentation:
    """Parse one source file and render the summaries it documents."""
    root = provider.parse(source)
    summaries = [
        transform_summary(raw, options.mode, language=options.code_language)
        for raw in collect_summaries(root)
    ]
    logger.debug("%s: %d summaries", title, len(summaries))
    return FileDocumentation(
        title=title, namespace=resolve_namespace(root), summaries=summaries
    )
