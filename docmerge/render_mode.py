"""Output modes for the generated documentation."""

from enum import Enum


class RenderMode(Enum):
    """Standalone HTML page or fragment for a single-page application shell."""

    STANDALONE = "standalone"
    FRAGMENT = "fragment"

    @classmethod
    def parse(cls, value: object) -> "RenderMode":
        """Parse a configuration value, raising ValueError on unknown modes."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            msg = f"Unknown render mode {value!r} (expected one of: {choices})"
            raise ValueError(msg) from None
