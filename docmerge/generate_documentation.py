"""Orchestration logic for turning a source tree into documentation.html."""

from pathlib import Path
from typing import Any

from docmerge.assemble_items import assemble_items
from docmerge.document_source import document_source
from docmerge.documentation_item import FileDocumentation
from docmerge.find_source_files import find_source_files
from docmerge.render_document import render_document
from docmerge.render_options import RenderOptions
from docmerge.syntax_provider import SyntaxProvider, TreeSitterSyntaxProvider


def generate_documentation(
    root: Path,
    config: dict[str, Any],
    provider: SyntaxProvider | None = None,
) -> Path | None:
    """Document every source file under root.

    Returns the written output path, or None when there was nothing to write.
    """
    options = RenderOptions.from_config(config)
    print(f"Searching for C# files in: {root}")

    files = find_source_files(root, config["source_pattern"], config["exclude_dirs"])
    if not files:
        print(f"No C# files found in: {root}")
        return None

    provider = provider or TreeSitterSyntaxProvider()
    results: list[FileDocumentation] = []
    for f in files:
        print(f"Processing: {f.relative_to(root)}")
        source = f.read_text(encoding="utf-8-sig")
        results.append(document_source(f.stem, source, provider, options))

    entries = assemble_items(results, unique_anchors=options.unique_anchors)
    if not entries:
        print("No documentation found in any of the C# files.")
        return None

    html = render_document(entries, root.name, options)
    out_path = root / config["output_file"]
    out_path.write_text(html, encoding="utf-8")
    print(f"Documentation generated: {out_path}")
    return out_path
