"""Conversion of raw summary text into HTML for a documentation section.

The transform runs in a fixed order:

1. inline tags (`<b>`, `<i>`) and, for fragments, braces are substituted in a
   single regex pass;
2. every `<code>` span is escaped, stored, and replaced by a placeholder;
3. placeholders are expanded with the active code-block template;
4. `<pre>` contents are dedented and all lines are right-trimmed.

Code is protected by placeholders before the line-based pass so escaping is
applied exactly once and template markup is never re-matched.
"""

import re

from docmerge.code_block_templates import CodeBlockTemplate, code_block_template
from docmerge.escape_code import escape_code
from docmerge.normalize_code_indentation import normalize_code_indentation
from docmerge.render_mode import RenderMode

INLINE_TAGS = {
    "<b>": "<h3>",
    "</b>": "</h3>",
    "<i>": '<span class="code-block">',
    "</i>": "</span>",
}
BRACE_ENTITIES = {
    "{": "&lbrace;",
    "}": "&rbrace;",
}

CODE_SPAN_RE = re.compile(r"<code>(.*?)</code>", re.DOTALL)
PLACEHOLDER_RE = re.compile(r"\x00CODEBLOCK(\d+)\x00")


def _substitution_re(table: dict[str, str]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(token) for token in table))


_INLINE_RE = _substitution_re(INLINE_TAGS)
_INLINE_AND_BRACES = {**INLINE_TAGS, **BRACE_ENTITIES}
_INLINE_AND_BRACES_RE = _substitution_re(_INLINE_AND_BRACES)


def substitute_inline_markup(text: str, *, escape_braces: bool) -> str:
    """Map inline tags to HTML and optionally escape braces, in one pass."""
    if escape_braces:
        return _INLINE_AND_BRACES_RE.sub(
            lambda m: _INLINE_AND_BRACES[m.group()], text
        )
    return _INLINE_RE.sub(lambda m: INLINE_TAGS[m.group()], text)


def extract_code_blocks(text: str) -> tuple[str, list[str]]:
    """Replace each `<code>` span with an indexed placeholder.

    Returns the rewritten text and the escaped code of each span.
    """
    blocks: list[str] = []

    def _protect(match: re.Match[str]) -> str:
        blocks.append(escape_code(match.group(1)))
        return f"\x00CODEBLOCK{len(blocks) - 1}\x00"

    return CODE_SPAN_RE.sub(_protect, text), blocks


def expand_code_blocks(
    text: str, blocks: list[str], template: CodeBlockTemplate, language: str
) -> str:
    """Replace placeholders with the templated code blocks."""
    return PLACEHOLDER_RE.sub(
        lambda m: template(blocks[int(m.group(1))], language), text
    )


def transform_summary(
    raw: str,
    mode: RenderMode,
    *,
    language: str = "csharp",
    template: CodeBlockTemplate | None = None,
) -> str:
    """Turn a marker-stripped summary into embeddable HTML."""
    wrap = template or code_block_template(mode)
    text = substitute_inline_markup(
        raw, escape_braces=mode is RenderMode.FRAGMENT
    )
    text, blocks = extract_code_blocks(text)
    text = expand_code_blocks(text, blocks, wrap, language)
    return normalize_code_indentation(text)
