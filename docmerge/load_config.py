"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from docmerge.deep_merge import deep_merge

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "docmerge.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "render_mode": "fragment",
    "product_label": "Spiderly",
    "output_file": "documentation.html",
    "source_pattern": "*.cs",
    "exclude_dirs": ["bin", "obj"],
    "code_language": "csharp",
    "fragment": {
        "route_prefix": "/docs",
    },
    "standalone": {
        "copy_feedback_ms": 2000,
    },
    "anchors": {
        "unique": False,
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration in {p} must be a mapping"
                raise ValueError(msg)
            logger.debug("Loaded configuration from %s", p)
            config = deep_merge(config, user_config)
    return config


def find_config(root: Path, explicit: str | None = None) -> Path | None:
    """Return the explicit config path, or `docmerge.yml` in root if present.

    A path named explicitly must exist.
    """
    if explicit:
        p = Path(explicit)
        if not p.is_file():
            msg = f"Configuration file not found: {p}"
            raise ValueError(msg)
        return p
    candidate = root / CONFIG_FILE_NAME
    return candidate if candidate.exists() else None
