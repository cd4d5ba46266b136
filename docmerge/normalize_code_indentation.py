"""Line-based cleanup that dedents the contents of `<pre>` blocks."""

import re

PRE_OPEN_RE = re.compile(r"<pre\b")
PRE_CLOSE = "</pre>"


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def dedent_run(lines: list[str]) -> list[str]:
    """Strip the smallest indent found on non-blank lines from every line."""
    widths = [_indent_width(line) for line in lines if line.strip()]
    min_indent = min(widths, default=0)
    out: list[str] = []
    for line in lines:
        if not line.strip():
            out.append("")
        else:
            out.append(line[min(_indent_width(line), min_indent) :])
    return out


def normalize_code_indentation(text: str) -> str:
    """Right-trim every line and dedent lines strictly inside `<pre>` blocks."""
    processed: list[str] = []
    run: list[str] = []
    inside_pre = False

    for raw_line in text.split("\n"):
        line = raw_line.rstrip()

        if not inside_pre:
            opening = PRE_OPEN_RE.search(line)
            # A block opened and closed on one line has no inner run.
            if opening and PRE_CLOSE not in line[opening.end() :]:
                inside_pre = True
                run = []
            processed.append(line)
            continue

        if PRE_CLOSE in line:
            processed.extend(dedent_run(run))
            processed.append(line)
            inside_pre = False
            continue

        run.append(line)

    if inside_pre:
        # Unclosed block: keep its lines undented.
        processed.extend(run)
    return "\n".join(processed)
