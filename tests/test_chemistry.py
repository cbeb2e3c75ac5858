"""Tests for the \\ce chemistry scanner."""

import pytest

from tiza import (
    Arrow,
    ArrowKind,
    FontStyle,
    Horizontal,
    Script,
    ScriptKind,
    Space,
    StyleContext,
    Text,
    parse,
)
from tiza.parsing.chemistry import EQUILIBRIUM, MINUS_SIGN


def _atom(content: str) -> Text:
    return Text(content, StyleContext())


def _small(content: str) -> Text:
    return Text(content, StyleContext(FontStyle.ROMAN, 0.7))


def _sub(base: Text, digits: str) -> Script:
    return Script(base, _small(digits), ScriptKind.SUB)


class TestSubscripts:
    """Digits after an element become subscripts."""

    def test_water(self) -> None:
        """H2O subscripts the hydrogen."""
        assert parse(r"\ce{H2O}") == Horizontal((_sub(_atom("H"), "2"), _atom("O")))

    def test_multi_digit_subscript(self) -> None:
        """Adjacent digits form one subscript."""
        assert parse(r"\ce{C12H22}") == Horizontal(
            (_sub(_atom("C"), "12"), _sub(_atom("H"), "22"))
        )

    def test_leading_coefficient_stays_full_size(self) -> None:
        """A coefficient before the first element is not a subscript."""
        assert parse(r"\ce{2H2O}") == Horizontal(
            (_atom("2"), _sub(_atom("H"), "2"), _atom("O"))
        )

    def test_separated_digit_is_not_subscript(self) -> None:
        """Whitespace between element and digit keeps the digit full size."""
        assert parse(r"\ce{H 2}") == Horizontal((_atom("H"), _atom("2")))

    def test_subscript_after_closer(self) -> None:
        """A digit after a closing parenthesis subscripts the parenthesis."""
        root = parse(r"\ce{(OH)2}")
        assert isinstance(root, Horizontal)
        assert root.children[-1] == _sub(_atom(")"), "2")

    def test_unterminated_formula(self) -> None:
        """A missing closing brace still yields the formula."""
        assert parse(r"\ce{H2") == _sub(_atom("H"), "2")


class TestCharges:
    """Signs after an atom become superscript charges."""

    def test_hydroxide(self) -> None:
        """A trailing minus becomes a superscript charge."""
        assert parse(r"\ce{OH-}") == Horizontal(
            (_atom("O"), Script(_atom("H"), _small(MINUS_SIGN), ScriptKind.SUPER))
        )

    def test_cation(self) -> None:
        """A trailing plus becomes a superscript charge."""
        assert parse(r"\ce{Na+}") == Horizontal(
            (_atom("N"), Script(_atom("a"), _small("+"), ScriptKind.SUPER))
        )

    def test_explicit_charge_group(self) -> None:
        """An explicit ^{...} charge is parsed as a math group."""
        root = parse(r"\ce{SO4^{2-}}")
        assert root == Horizontal(
            (
                _atom("S"),
                Script(
                    _sub(_atom("O"), "4"),
                    Horizontal((_small("2"), _small("-"))),
                    ScriptKind.SUPER,
                ),
            )
        )

    def test_bond_between_letters(self) -> None:
        """A minus between letters is a bond."""
        assert parse(r"\ce{C-C}") == Horizontal((_atom("C"), _atom(MINUS_SIGN), _atom("C")))

    def test_lone_minus_is_bond(self) -> None:
        """A minus with nothing before it is a bond."""
        assert parse(r"\ce{-}") == _atom(MINUS_SIGN)


class TestReactions:
    """Arrows, equilibria and reaction separators."""

    def test_reaction(self) -> None:
        """A right arrow separates reactants from products."""
        root = parse(r"\ce{Na+ -> NaCl}")
        assert root == Horizontal(
            (
                _atom("N"),
                Script(_atom("a"), _small("+"), ScriptKind.SUPER),
                Arrow(kind=ArrowKind.RIGHT),
                _atom("N"),
                _atom("a"),
                _atom("C"),
                _atom("l"),
            )
        )

    def test_separator_plus(self) -> None:
        """A spaced plus separates species."""
        assert parse(r"\ce{A + B}") == Horizontal(
            (_atom("A"), Space(0.5), _atom("+"), Space(0.5), _atom("B"))
        )

    def test_left_arrow(self) -> None:
        """<- is a left arrow."""
        assert parse(r"\ce{A <- B}") == Horizontal(
            (_atom("A"), Arrow(kind=ArrowKind.LEFT), _atom("B"))
        )

    def test_equilibrium(self) -> None:
        """<=> is the equilibrium glyph."""
        assert parse(r"\ce{A <=> B}") == Horizontal((_atom("A"), _atom(EQUILIBRIUM), _atom("B")))

    def test_lone_less_than(self) -> None:
        """A lone < is plain text."""
        assert parse(r"\ce{A<B}") == Horizontal((_atom("A"), _atom("<"), _atom("B")))


class TestFormulaShape:
    """Empty formulas, commands inside formulas, and the surrounding run."""

    def test_empty(self) -> None:
        """An empty formula is empty text."""
        assert parse(r"\ce{}") == Text("", StyleContext())

    def test_command_inside_formula(self) -> None:
        """Commands inside a formula use the general parser."""
        assert parse(r"\ce{\alpha}") == _atom("α")

    def test_formula_inside_script_is_scaled(self) -> None:
        """Chemistry scales relative to the enclosing script size."""
        root = parse(r"x^{\ce{O2}}")
        assert isinstance(root, Script)
        assert root.script == Script(
            Text("O", StyleContext(FontStyle.ROMAN, 0.6)),
            Text("2", StyleContext(FontStyle.ROMAN, pytest.approx(0.42))),
            ScriptKind.SUB,
        )

    def test_formula_then_math(self) -> None:
        """Parsing resumes in math mode after the formula."""
        root = parse(r"\ce{H2} x")
        assert root == Horizontal((_sub(_atom("H"), "2"), Text("x", StyleContext(FontStyle.ITALIC))))


class TestStallGuards:
    """Tokens the scanner cannot use are skipped, never looped on."""

    def test_ampersand_is_skipped(self) -> None:
        """An alignment marker inside a formula is dropped."""
        assert parse(r"\ce{a&b}") == Horizontal((_atom("a"), _atom("b")))

    def test_row_break_is_skipped(self) -> None:
        """A row break inside a formula is dropped."""
        assert parse(r"\ce{a\\b}") == Horizontal((_atom("a"), _atom("b")))

    def test_script_without_base(self) -> None:
        """A leading ^ has nothing to attach to and is dropped."""
        assert parse(r"\ce{^2}") == _atom("2")

    def test_lone_subscript_marker(self) -> None:
        """A formula holding only _ is empty."""
        assert parse(r"\ce{_}") == Text("", StyleContext())

    def test_formula_of_markers_terminates(self) -> None:
        """A long run of unusable tokens is consumed in one pass."""
        assert parse(r"\ce{" + "&^_" * 1000 + "}") == Text("", StyleContext())
