"""Tests for the indentation normalization pass."""

from docmerge.normalize_code_indentation import dedent_run, normalize_code_indentation


def test_dedent_run_minimum_indent() -> None:
    """Verify that the minimum indentation is stripped uniformly."""
    assert dedent_run(["    x", "      y", "    z"]) == ["x", "  y", "z"]


def test_dedent_run_blank_lines() -> None:
    """Verify that blank lines stay blank and do not count toward the minimum."""
    assert dedent_run(["    x", "", "  ", "      y"]) == ["x", "", "", "  y"]


def test_dedent_run_only_blank_lines() -> None:
    """Verify that a run without content does not fail."""
    assert dedent_run(["", "   "]) == ["", ""]
    assert dedent_run([]) == []


def test_normalize_pre_block() -> None:
    """Verify that only lines strictly inside a pre block are dedented."""
    text = "\n".join(
        [
            "  intro   ",
            "<pre><code>",
            "    x",
            "      y",
            "",
            "    z",
            "</code></pre>",
            "  outro",
        ]
    )
    assert normalize_code_indentation(text).split("\n") == [
        "  intro",
        "<pre><code>",
        "x",
        "  y",
        "",
        "z",
        "</code></pre>",
        "  outro",
    ]


def test_single_line_pre_block() -> None:
    """Verify that a block closed on its opening line leaves later lines alone."""
    text = "<pre><code>x</code></pre>\n    after"
    assert normalize_code_indentation(text) == "<pre><code>x</code></pre>\n    after"


def test_empty_pre_block() -> None:
    """Verify that a block with no inner lines is kept."""
    text = "<pre>\n</pre>"
    assert normalize_code_indentation(text) == "<pre>\n</pre>"


def test_unclosed_pre_block_keeps_lines() -> None:
    """Verify that no line is dropped when a block never closes."""
    text = "<pre>\n    x   \n      y"
    assert normalize_code_indentation(text) == "<pre>\n    x\n      y"


def test_preformat_lookalike_tags_are_ignored() -> None:
    """Verify that tags merely starting with 'pre' do not open a block."""
    text = "<prefix>\n    kept"
    assert normalize_code_indentation(text) == "<prefix>\n    kept"
