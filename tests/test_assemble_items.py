"""Tests for item assembly, ordering and anchors."""

import pytest

from docmerge.assemble_items import anchor_for, assemble_items
from docmerge.documentation_item import DocumentationItem, FileDocumentation


def test_sorted_by_title() -> None:
    """Verify ordinal ordering regardless of processing order."""
    results = [
        FileDocumentation("Zeta", "N", ["z"]),
        FileDocumentation("Alpha", "N", ["a"]),
        FileDocumentation("Mu", "N", ["m"]),
    ]
    assert [e.item.title for e in assemble_items(results)] == ["Alpha", "Mu", "Zeta"]


def test_ordinal_comparison() -> None:
    """Verify that uppercase sorts before lowercase."""
    results = [
        FileDocumentation("alpha", "N", ["a"]),
        FileDocumentation("Beta", "N", ["b"]),
    ]
    assert [e.item.title for e in assemble_items(results)] == ["Beta", "alpha"]


def test_files_without_summaries_are_excluded() -> None:
    """Verify that empty results never become items."""
    results = [
        FileDocumentation("Empty", "N", []),
        FileDocumentation("Full", "N", ["x"]),
    ]
    entries = assemble_items(results)
    assert [e.item.title for e in entries] == ["Full"]
    assert entries[0].item.summaries == ("x",)


def test_item_requires_summaries() -> None:
    """Verify the non-empty summaries invariant."""
    with pytest.raises(ValueError, match="no summaries"):
        DocumentationItem("Empty", "N", ())


def test_anchor_is_deterministic() -> None:
    """Verify that the same title always yields the same slug."""
    assert anchor_for("WidgetService") == "widget-service"
    assert anchor_for("WidgetService") == anchor_for("WidgetService")


def test_duplicate_anchors_by_default() -> None:
    """Verify that colliding slugs are kept as duplicates."""
    results = [
        FileDocumentation("Widget_Service", "N", ["a"]),
        FileDocumentation("WidgetService", "N", ["b"]),
    ]
    anchors = [e.anchor for e in assemble_items(results)]
    assert anchors == ["widget-service", "widget-service"]


def test_unique_anchors_when_enabled() -> None:
    """Verify suffixing of colliding slugs when requested."""
    results = [
        FileDocumentation("Widget_Service", "N", ["a"]),
        FileDocumentation("WidgetService", "N", ["b"]),
        FileDocumentation("widget-service", "N", ["c"]),
    ]
    anchors = [e.anchor for e in assemble_items(results, unique_anchors=True)]
    assert anchors == ["widget-service", "widget-service-2", "widget-service-3"]
