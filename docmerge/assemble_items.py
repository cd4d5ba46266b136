"""Turning per-file results into the ordered, anchored item list."""

from collections import Counter
from collections.abc import Iterable

from docmerge.documentation_item import (
    AnchoredItem,
    DocumentationItem,
    FileDocumentation,
)
from docmerge.kebab_case import kebab_case


def anchor_for(title: str) -> str:
    """Return the anchor slug for a section title."""
    return kebab_case(title)


def assemble_items(
    results: Iterable[FileDocumentation], *, unique_anchors: bool = False
) -> list[AnchoredItem]:
    """Drop files without summaries, sort by title, and attach anchors.

    Titles that collapse to the same slug share an anchor unless
    `unique_anchors` is set, in which case repeats get `-2`, `-3`, ...
    """
    items = [
        DocumentationItem(r.title, r.namespace, tuple(r.summaries))
        for r in results
        if r.summaries
    ]
    items.sort(key=lambda it: it.title)

    seen: Counter[str] = Counter()
    assembled: list[AnchoredItem] = []
    for item in items:
        anchor = anchor_for(item.title)
        seen[anchor] += 1
        if unique_anchors and seen[anchor] > 1:
            anchor = f"{anchor}-{seen[anchor]}"
        assembled.append(AnchoredItem(item, anchor))
    return assembled
