"""HTML wrappers placed around extracted code samples, one per render mode.

Both templates end the code on its own line and close `</pre>` on the next,
so every code line after the opening tag sits inside the dedent run.
Trailing whitespace of the sample is dropped for that reason.
"""

from collections.abc import Callable

from docmerge.render_mode import RenderMode

CodeBlockTemplate = Callable[[str, str], str]


def fragment_code_block(code: str, language: str) -> str:
    """Wrap code for an Angular shell: copy-button component and highlight binding."""
    return f"""<div class="code-snippet-wrapper card">
    <div class="copy-button-wrapper">
        <app-copy-button (onClick)="copyCodeSnippet($event)"></app-copy-button>
    </div>
    <pre><code language="{language}" [highlight]="`{code.rstrip()}`">
    </code></pre>
</div>"""


def standalone_code_block(code: str, language: str) -> str:
    """Wrap code for a standalone page with an inline copy button."""
    return f"""<div class="code-snippet">
    <button type="button" class="copy-button"
        onclick="copyCodeSnippet(this)">Copy</button>
    <pre><code class="language-{language}">{code.rstrip()}
</code></pre>
</div>"""


def code_block_template(mode: RenderMode) -> CodeBlockTemplate:
    """Return the wrapper template for a render mode."""
    if mode is RenderMode.STANDALONE:
        return standalone_code_block
    return fragment_code_block
