"""Conversion of identifiers to lowercase, hyphen-separated slugs."""

import re

# Same word boundaries the identifier tokenizer uses:
# acronym before a word (XML in XMLParser), a word with optional trailing
# digits not followed by an uppercase letter (Vector3 vs Item2D), then
# remaining acronym/number runs (UI, 2D).
WORD_RE = re.compile(
    r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z]+(?:[0-9]+(?![A-Z]))?|[A-Z0-9]+"
)
SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")


def kebab_case(text: str) -> str:
    """Convert `WidgetService` or `widget_service` into `widget-service`."""
    words: list[str] = []
    for part in SEPARATOR_RE.split(text):
        words.extend(WORD_RE.findall(part))
    return "-".join(w.lower() for w in words) or "section"
