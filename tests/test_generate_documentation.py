"""End-to-end tests for documentation generation."""

import copy
from pathlib import Path
from typing import Any

import pytest

from docmerge.generate_documentation import generate_documentation
from docmerge.load_config import DEFAULT_CONFIG
from docmerge.syntax_node import NodeKind, SyntaxNode

WIDGET_CS = """namespace App.Models
{
    public class Widget
    {
        /// <summary>
        /// Creates a widget.
        /// </summary>
        public static Widget Create() => new Widget();
    }
}
"""

GADGET_CS = """/// <summary>
/// A gadget.
/// <code>
///     var gadget = new Gadget();
///         gadget.Run();</code>
/// </summary>
public class Gadget
{
}
"""

UNDOCUMENTED_CS = """namespace App;

// Not a doc comment.
public class Plain
{
    public void Run() { }
}
"""


def _config(**overrides: Any) -> dict[str, Any]:
    config = copy.deepcopy(DEFAULT_CONFIG)
    config.update(overrides)
    return config


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "MyProject"
    (root / "Models").mkdir(parents=True)
    (root / "Models" / "Widget.cs").write_text(WIDGET_CS, encoding="utf-8")
    (root / "Gadget.cs").write_text(GADGET_CS, encoding="utf-8")
    (root / "Plain.cs").write_text(UNDOCUMENTED_CS, encoding="utf-8")
    return root


def test_end_to_end_standalone(project: Path) -> None:
    """Verify ordering, namespaces and dedented code in the written page."""
    out = generate_documentation(project, _config(render_mode="standalone"))
    assert out == project / "documentation.html"
    html = out.read_text(encoding="utf-8")

    assert html.index('<section id="gadget"') < html.index('<section id="widget"')
    assert "<h2>Plain</h2>" not in html

    start = html.index('<section id="gadget"')
    gadget = html[start : html.index('<section id="widget"')]
    assert "Namespace: Global Namespace" in gadget
    assert "\nvar gadget = new Gadget();\n    gadget.Run();\n</code></pre>" in gadget

    widget = html[html.index('<section id="widget"') :]
    assert "Namespace: App.Models" in widget
    assert "Creates a widget." in widget
    assert "<title>Spiderly My Project</title>" in html


def test_end_to_end_fragment(project: Path) -> None:
    """Verify the default fragment output."""
    out = generate_documentation(project, _config())
    assert out is not None
    html = out.read_text(encoding="utf-8")
    assert html.startswith("<div>")
    assert "['/docs', 'my-project']" in html
    expected = "\nvar gadget = new Gadget();\n    gadget.Run();`\">\n    </code></pre>"
    assert expected in html


def test_output_file_name(project: Path) -> None:
    """Verify that the output file name is configurable."""
    out = generate_documentation(project, _config(output_file="api.html"))
    assert out == project / "api.html"
    assert not (project / "documentation.html").exists()


def test_excluded_directories(project: Path) -> None:
    """Verify that build output directories are skipped."""
    (project / "obj").mkdir()
    (project / "obj" / "Generated.cs").write_text(
        "/// <summary>Generated.</summary>\nclass Generated { }\n", encoding="utf-8"
    )
    out = generate_documentation(project, _config())
    assert out is not None
    assert "Generated" not in out.read_text(encoding="utf-8")


def test_no_source_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that an empty directory is a no-op."""
    assert generate_documentation(tmp_path, _config()) is None
    assert "No C# files found" in capsys.readouterr().out
    assert not (tmp_path / "documentation.html").exists()


def test_no_documentation(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that sources without summaries produce no output."""
    (tmp_path / "Plain.cs").write_text(UNDOCUMENTED_CS, encoding="utf-8")
    assert generate_documentation(tmp_path, _config()) is None
    assert "No documentation found" in capsys.readouterr().out
    assert not (tmp_path / "documentation.html").exists()


class StubProvider:
    """Returns a fixed tree regardless of the source text."""

    def __init__(self, root: SyntaxNode) -> None:
        self.root = root
        self.sources: list[str] = []

    def parse(self, source: str) -> SyntaxNode:
        self.sources.append(source)
        return self.root


def test_custom_provider(tmp_path: Path) -> None:
    """Verify that any syntax provider can drive the pipeline."""
    (tmp_path / "Empty.cs").write_text("\ufeffclass X { }", encoding="utf-8")
    provider = StubProvider(SyntaxNode(NodeKind.COMPILATION_UNIT))
    assert generate_documentation(tmp_path, _config(), provider) is None
    assert provider.sources == ["class X { }"]
