"""Data models for per-file documentation results."""

from dataclasses import dataclass, field


@dataclass
class FileDocumentation:
    """Everything extracted from one source file, possibly without summaries."""

    title: str
    namespace: str
    summaries: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentationItem:
    """A documented source file: one section of the output."""

    title: str
    namespace: str
    summaries: tuple[str, ...]

    def __post_init__(self) -> None:
        """Reject items without summaries."""
        if not self.summaries:
            msg = f"DocumentationItem {self.title!r} has no summaries"
            raise ValueError(msg)


@dataclass(frozen=True)
class AnchoredItem:
    """A documentation item paired with its in-page anchor."""

    item: DocumentationItem
    anchor: str
