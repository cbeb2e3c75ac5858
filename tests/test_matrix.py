"""Tests for matrix-like environments."""

import pytest

from tiza import BracketStyle, FontStyle, Horizontal, Matrix, StyleContext, Text, parse


def _cell(content: str) -> Text:
    return Text(content, StyleContext(FontStyle.ITALIC))


class TestBrackets:
    """The environment name selects the bracket style."""

    @pytest.mark.parametrize(
        ("environment", "bracket"),
        [
            ("matrix", BracketStyle.NONE),
            ("pmatrix", BracketStyle.PAREN),
            ("bmatrix", BracketStyle.BRACKET),
            ("vmatrix", BracketStyle.ABSOLUTE),
            ("cases", BracketStyle.CASES),
            ("unknown", BracketStyle.NONE),
        ],
    )
    def test_bracket_style(self, environment: str, bracket: BracketStyle) -> None:
        """The environment name picks the bracket style."""
        root = parse(rf"\begin{{{environment}}}a\end{{{environment}}}")
        assert root == Matrix(((_cell("a"),),), bracket)

    def test_end_name_is_not_checked(self) -> None:
        """A mismatched \\end name still closes the environment."""
        root = parse(r"\begin{bmatrix}a\end{pmatrix}")
        assert root == Matrix(((_cell("a"),),), BracketStyle.BRACKET)


class TestRowsAndCells:
    """Cells split on & and rows on \\\\."""

    def test_ragged_rows(self) -> None:
        """Rows may have different lengths."""
        root = parse(r"\begin{matrix}a&b\\c\end{matrix}")
        assert root == Matrix(((_cell("a"), _cell("b")), (_cell("c"),)))

    def test_trailing_row_break(self) -> None:
        """A row break before \\end adds no empty row."""
        root = parse(r"\begin{matrix}a\\\end{matrix}")
        assert root == Matrix(((_cell("a"),),))

    def test_empty_environment(self) -> None:
        """An empty environment has no rows."""
        assert parse(r"\begin{matrix}\end{matrix}") == Matrix(())

    def test_cell_holds_a_run(self) -> None:
        """A cell can hold several siblings."""
        root = parse(r"\begin{matrix}x+1&0\end{matrix}")
        assert isinstance(root, Matrix)
        first, second = root.rows[0]
        assert isinstance(first, Horizontal)
        assert second == Text("0", StyleContext())

    def test_array_skips_column_spec(self) -> None:
        """The array column spec is not a cell."""
        root = parse(r"\begin{array}{cc}a&b\end{array}")
        assert root == Matrix(((_cell("a"), _cell("b")),))

    def test_unterminated(self) -> None:
        """A missing \\end closes at end of input."""
        root = parse(r"\begin{pmatrix}a&b")
        assert root == Matrix(((_cell("a"), _cell("b")),), BracketStyle.PAREN)

    def test_stray_brace_is_skipped(self) -> None:
        """An unmatched } inside a cell becomes an empty cell."""
        root = parse(r"\begin{matrix}a}b\end{matrix}")
        assert root == Matrix(((_cell("a"), Text("", StyleContext()), _cell("b")),))

    def test_nested_matrix(self) -> None:
        """An environment can sit inside a cell."""
        root = parse(r"\begin{pmatrix}\begin{matrix}a\end{matrix}&b\end{pmatrix}")
        assert isinstance(root, Matrix)
        inner, cell = root.rows[0]
        assert inner == Matrix(((_cell("a"),),))
        assert cell == _cell("b")

    def test_matrix_followed_by_text(self) -> None:
        """Parsing resumes after \\end."""
        root = parse(r"\begin{matrix}a\end{matrix}x")
        assert root == Horizontal((Matrix(((_cell("a"),),)), _cell("x")))
