"""Logic for rendering the final HTML documentation document."""

import html
import re

from docmerge.documentation_item import AnchoredItem
from docmerge.kebab_case import kebab_case
from docmerge.render_mode import RenderMode
from docmerge.render_options import RenderOptions

STANDALONE_STYLE = """
        body {
            font-family: -apple-system, "Segoe UI", Roboto, sans-serif;
            line-height: 1.6;
            margin: 0 auto;
            max-width: 960px;
            padding: 2rem;
            color: #1f2933;
        }
        .card {
            border: 1px solid #d9e2ec;
            border-radius: 8px;
            padding: 1rem 1.5rem;
            margin-bottom: 1.5rem;
        }
        .namespace { color: #627d98; font-size: 0.9rem; }
        .code-block {
            font-family: Consolas, monospace;
            background: #f0f4f8;
            padding: 0 0.25rem;
        }
        .code-snippet { position: relative; }
        .code-snippet pre {
            background: #f0f4f8;
            border-radius: 6px;
            overflow-x: auto;
            padding: 1rem;
        }
        .copy-button { position: absolute; top: 0.5rem; right: 0.5rem; }
        .copy-button.copied { color: #2f8132; }"""

STANDALONE_SCRIPT = """
        function copyCodeSnippet(button) {
            const wrapper = button.closest('.code-snippet');
            const pre = wrapper ? wrapper.querySelector('pre') : null;
            if (!pre) {
                return;
            }
            navigator.clipboard.writeText(pre.textContent).then(() => {
                const label = button.textContent;
                button.textContent = 'Copied!';
                button.classList.add('copied');
                setTimeout(() => {
                    button.textContent = label;
                    button.classList.remove('copied');
                }, COPY_FEEDBACK_MS);
            });
        }"""


def format_display_title(folder_name: str, product_label: str) -> str:
    """Split a PascalCase folder name into words and prefix the product label."""
    spaced = re.sub(r"([A-Z])", r" \1", folder_name).strip()
    return f"{product_label} {spaced}".strip()


def _toc_entry(entry: AnchoredItem, folder_name: str, options: RenderOptions) -> str:
    title = html.escape(entry.item.title)
    if options.mode is RenderMode.STANDALONE:
        return f"""            <li>
                <a href="#{entry.anchor}" title="Go to {title}">{title}</a>
            </li>"""
    route = f"['{options.route_prefix}', '{kebab_case(folder_name)}']"
    return f"""            <li>
                <a [routerLink]="{route}"
                    [fragment]="'{entry.anchor}'"
                    title="Go to {title}">
                    {title}
                </a>
            </li>"""


def _section(entry: AnchoredItem) -> list[str]:
    item = entry.item
    parts = [
        f"""    <section id="{entry.anchor}" class="doc-section">
        <div class="card">
            <h2>{html.escape(item.title)}</h2>
            <div class="namespace">Namespace: {html.escape(item.namespace)}</div>"""
    ]
    parts.extend(
        f"""            <div class="summary">
{summary}
            </div>"""
        for summary in item.summaries
    )
    parts.append("""        </div>
    </section>""")
    return parts


def _standalone_head(title: str, options: RenderOptions) -> str:
    script = STANDALONE_SCRIPT.replace(
        "COPY_FEEDBACK_MS", str(options.copy_feedback_ms)
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{title}</title>
    <style>{STANDALONE_STYLE}
    </style>
    <script>{script}
    </script>
</head>
<body>"""


def render_document(
    entries: list[AnchoredItem], folder_name: str, options: RenderOptions
) -> str:
    """Render the table of contents and one section per item."""
    title = html.escape(format_display_title(folder_name, options.product_label))
    standalone = options.mode is RenderMode.STANDALONE

    parts: list[str] = []
    if standalone:
        parts.append(_standalone_head(title, options))

    parts.append(f"""<div>
    <h1 class="gradient-title">{title}</h1>

    <div class="toc card">
        <h2>Table of Contents</h2>
        <ul>""")
    parts.extend(_toc_entry(entry, folder_name, options) for entry in entries)
    parts.append("""        </ul>
    </div>
""")

    for entry in entries:
        parts.extend(_section(entry))

    parts.append("</div>")
    if standalone:
        parts.append("</body>\n</html>")

    return "\n".join(parts) + "\n"
