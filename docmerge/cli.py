"""Command line entry point for generating documentation.html."""

import argparse
import logging
from pathlib import Path
from typing import Any

from docmerge.generate_documentation import generate_documentation
from docmerge.load_config import find_config, load_config
from docmerge.render_mode import RenderMode
from docmerge.render_options import RenderOptions


def build_config(args: argparse.Namespace, root: Path) -> dict[str, Any]:
    """Load the configuration and apply command line overrides."""
    config = load_config(find_config(root, args.config))
    if args.mode:
        config["render_mode"] = args.mode
    if args.output:
        config["output_file"] = args.output
    # Fail on bad settings before any file is read.
    RenderOptions.from_config(config)
    return config


def main(argv: list[str] | None = None) -> int:
    """Run documentation generation."""
    ap = argparse.ArgumentParser(
        description=(
            "Merge C# XML documentation comments into a single documentation.html."
        ),
    )
    ap.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to search for source files (default: current directory)",
    )
    ap.add_argument(
        "--mode",
        choices=[m.value for m in RenderMode],
        help="Render a standalone page or an embeddable fragment",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file (default: docmerge.yml in root)",
    )
    ap.add_argument(
        "--output",
        help="Output file name inside root (default: documentation.html)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped declarations and per-file details",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = (args.root or Path.cwd()).resolve()
    try:
        config = build_config(args, root)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    generate_documentation(root, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
