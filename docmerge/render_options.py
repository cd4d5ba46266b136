"""Typed rendering settings derived from the merged configuration."""

from dataclasses import dataclass
from typing import Any

from docmerge.render_mode import RenderMode


@dataclass(frozen=True)
class RenderOptions:
    """Settings shared by the summary transform and the HTML renderer."""

    mode: RenderMode = RenderMode.FRAGMENT
    product_label: str = "Spiderly"
    code_language: str = "csharp"
    route_prefix: str = "/docs"
    copy_feedback_ms: int = 2000
    unique_anchors: bool = False

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "RenderOptions":
        """Build options from a configuration mapping."""
        return cls(
            mode=RenderMode.parse(config["render_mode"]),
            product_label=str(config["product_label"]),
            code_language=str(config["code_language"]),
            route_prefix=str(config["fragment"]["route_prefix"]),
            copy_feedback_ms=int(config["standalone"]["copy_feedback_ms"]),
            unique_anchors=bool(config["anchors"]["unique"]),
        )
