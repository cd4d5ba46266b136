"""Discovery of source files below a root directory."""

from collections.abc import Iterable
from pathlib import Path


def find_source_files(
    root: Path, pattern: str = "*.cs", exclude_dirs: Iterable[str] = ()
) -> list[Path]:
    """Return matching files in sorted order, skipping excluded directory names."""
    excluded = set(exclude_dirs)
    return sorted(
        p
        for p in root.rglob(pattern)
        if p.is_file() and not excluded.intersection(p.relative_to(root).parts[:-1])
    )
