"""Tests for command dispatch: structural commands, styles, spacing, colors."""

import pytest

from tiza import (
    Accent,
    Arrow,
    ArrowKind,
    Binomial,
    BracketStyle,
    Color,
    Delimiter,
    Enclosure,
    EnclosureKind,
    FontStyle,
    Fraction,
    Horizontal,
    Space,
    Sqrt,
    StructureLiteral,
    StyleContext,
    Text,
    parse,
)


def _roman(size: float = 1.0) -> StyleContext:
    return StyleContext(FontStyle.ROMAN, size)


def _italic(size: float = 1.0) -> StyleContext:
    return StyleContext(FontStyle.ITALIC, size)


class TestGlyphs:
    """Glyph commands become upright text."""

    def test_greek_letter(self) -> None:
        """Greek letter commands map to their glyph."""
        assert parse(r"\alpha") == Text("α", _roman())

    def test_glyph_inside_script(self) -> None:
        """Glyphs in a script take the script size."""
        root = parse(r"x^\infty")
        assert root.script == Text("∞", _roman(0.6))  # type: ignore[union-attr]

    def test_unknown_command_keeps_arguments_as_siblings(self) -> None:
        """An unknown command's braces parse as a following group."""
        assert parse(r"\foo{x}") == Horizontal((Text("foo", _roman()), Text("x", _italic())))


class TestStructural:
    """Fractions, binomials, roots, accents and enclosures."""

    def test_fraction_with_single_atom_arguments(self) -> None:
        """\\frac12 takes one digit per argument."""
        assert parse(r"\frac12") == Fraction(Text("1", _roman(0.9)), Text("2", _roman(0.9)))

    def test_fraction_missing_arguments(self) -> None:
        """Missing fraction arguments are empty text."""
        assert parse(r"\frac") == Fraction(Text("", _roman(0.9)), Text("", _roman(0.9)))

    def test_nested_fraction_shrinks(self) -> None:
        """A fraction inside a fraction shrinks twice."""
        root = parse(r"\frac{\frac{a}{b}}{c}")
        assert isinstance(root, Fraction)
        assert isinstance(root.numerator, Fraction)
        assert root.numerator.numerator.style.size == pytest.approx(0.81)  # type: ignore[union-attr]

    def test_binomial_keeps_size(self) -> None:
        """\\binom does not shrink its parts."""
        assert parse(r"\binom{n}{k}") == Binomial(Text("n", _italic()), Text("k", _italic()))

    def test_sqrt(self) -> None:
        """\\sqrt wraps its argument."""
        assert parse(r"\sqrt{2}") == Sqrt(Text("2", _roman()))

    def test_sqrt_of_run(self) -> None:
        """A root can hold several siblings."""
        root = parse(r"\sqrt{x+1}")
        assert isinstance(root, Sqrt)
        assert isinstance(root.inner, Horizontal)

    def test_accent(self) -> None:
        """\\vec adds an arrow accent."""
        assert parse(r"\vec{v}") == Accent(Text("v", _italic()), "→", _roman())

    def test_accent_without_braces(self) -> None:
        """An accent takes a single unbraced atom."""
        assert parse(r"\hat x") == Accent(Text("x", _italic()), "^", _roman())

    @pytest.mark.parametrize(
        ("command", "kind"),
        [
            ("overline", EnclosureKind.OVERLINE),
            ("underline", EnclosureKind.UNDERLINE),
            ("boxed", EnclosureKind.BOXED),
        ],
    )
    def test_enclosures(self, command: str, kind: EnclosureKind) -> None:
        """Each enclosure command picks its kind."""
        assert parse(rf"\{command}{{x}}") == Enclosure(Text("x", _italic()), kind)


class TestLeftRight:
    """Stretchy delimiters around a run."""

    def test_parentheses(self) -> None:
        """\\left( ... \\right) gives a parenthesis delimiter."""
        assert parse(r"\left( x \right)") == Delimiter(Text("x", _italic()), BracketStyle.PAREN)

    def test_square_brackets(self) -> None:
        """Square brackets give a bracket delimiter."""
        root = parse(r"\left[ x \right]")
        assert root == Delimiter(Text("x", _italic()), BracketStyle.BRACKET)

    def test_other_delimiters_default_to_parentheses(self) -> None:
        """Unlisted delimiter characters fall back to parentheses."""
        assert parse(r"\left| x \right|") == Delimiter(Text("x", _italic()), BracketStyle.PAREN)

    def test_escaped_brace_delimiters(self) -> None:
        """\\left\\{ is accepted as a delimiter."""
        root = parse(r"\left\{ x \right\}")
        assert root == Delimiter(Text("x", _italic()), BracketStyle.PAREN)

    def test_unterminated(self) -> None:
        """A missing \\right closes at end of input."""
        assert parse(r"\left( x") == Delimiter(Text("x", _italic()), BracketStyle.PAREN)

    def test_nested(self) -> None:
        """Delimiters nest."""
        root = parse(r"\left( \left[ x \right] \right)")
        assert root == Delimiter(
            Delimiter(Text("x", _italic()), BracketStyle.BRACKET), BracketStyle.PAREN
        )

    def test_left_at_end_of_input(self) -> None:
        """A bare \\left at the end is dropped."""
        assert parse(r"a\left") == Text("a", _italic())


class TestStyleSwitches:
    """Style switch commands re-tag their argument."""

    def test_bold_refines_per_atom(self) -> None:
        """\\mathbf slants letters and keeps digits upright."""
        assert parse(r"\mathbf{x1}") == Horizontal(
            (
                Text("x", StyleContext(FontStyle.BOLD_ITALIC)),
                Text("1", StyleContext(FontStyle.BOLD)),
            )
        )

    @pytest.mark.parametrize(
        ("command", "style"),
        [
            ("mathbb", FontStyle.BLACKBOARD_BOLD),
            ("mathcal", FontStyle.CALLIGRAPHIC),
        ],
    )
    def test_decorative_styles_are_kept(self, command: str, style: FontStyle) -> None:
        """Decorative style switches apply as-is."""
        assert parse(rf"\{command}{{R}}") == Text("R", StyleContext(style))

    def test_switch_keeps_size(self) -> None:
        """A style switch keeps the script size."""
        root = parse(r"x^{\mathbb{N}}")
        assert root.script == Text("N", StyleContext(FontStyle.BLACKBOARD_BOLD, 0.6))  # type: ignore[union-attr]

    def test_function_name_is_upright(self) -> None:
        """\\sin is an upright word."""
        assert parse(r"\sin x") == Horizontal((Text("sin", _roman()), Text("x", _italic())))


class TestSpacing:
    """Spacing commands and control symbols."""

    def test_named_spacing(self) -> None:
        """\\quad is a one-em space."""
        assert parse(r"a\quad b") == Horizontal(
            (Text("a", _italic()), Space(1.0), Text("b", _italic()))
        )

    @pytest.mark.parametrize(
        ("source", "width"),
        [(r"\,", 0.3), (r"\:", 0.4), (r"\;", 0.5), (r"\!", -0.15)],
    )
    def test_control_spacing(self, source: str, width: float) -> None:
        """Control-symbol spaces have fixed widths."""
        assert parse(source) == Space(width)

    def test_control_space(self) -> None:
        """A backslash-space is a thin space."""
        assert parse(r"a\ b") == Horizontal((Text("a", _italic()), Space(0.3), Text("b", _italic())))

    def test_spacing_scales_with_size(self) -> None:
        """Spaces scale with the current size."""
        root = parse(r"x^{\qquad}")
        assert isinstance(root.script, Space)  # type: ignore[union-attr]
        assert root.script.width == pytest.approx(1.2)  # type: ignore[union-attr]

    @pytest.mark.parametrize("char", ["{", "}", "%", "_", "&", "#", "$"])
    def test_escaped_characters(self, char: str) -> None:
        """Escaped specials become literal text."""
        assert parse("\\" + char) == Text(char, _roman())

    def test_lone_backslash(self) -> None:
        """A lone backslash is empty text."""
        assert parse("\\") == Text("", _roman())


class TestColor:
    """Named and hex colors."""

    def test_named_color(self) -> None:
        """Named colors resolve to hex."""
        assert parse(r"\color{red}{x}") == Color(Text("x", _italic()), "#FF0000")

    def test_textcolor(self) -> None:
        """\\textcolor behaves like \\color."""
        assert parse(r"\textcolor{blue}{x}") == Color(Text("x", _italic()), "#0000FF")

    def test_hex_color_is_normalized(self) -> None:
        """Hex colors are upper-cased."""
        assert parse(r"\color{#ff8000}{x}") == Color(Text("x", _italic()), "#FF8000")

    def test_unknown_color_leaves_content(self) -> None:
        """An unknown color keeps the body uncolored."""
        assert parse(r"\color{chartreuse}{x}") == Text("x", _italic())

    def test_missing_body(self) -> None:
        """A color with no braced body colors nothing."""
        assert parse(r"\color{red} x") == Horizontal((Text("", _roman()), Text("x", _italic())))

    def test_unterminated_body(self) -> None:
        """An unclosed body is kept without the color."""
        assert parse(r"\color{red}{x") == Text("x", _italic())


class TestArrows:
    """Stretchable arrows with annotations."""

    def test_upper_and_lower(self) -> None:
        """The optional argument is the lower annotation."""
        assert parse(r"\xrightarrow[a]{b}") == Arrow(
            upper=Text("b", _italic(0.7)),
            lower=Text("a", _italic(0.7)),
            kind=ArrowKind.RIGHT,
        )

    def test_upper_only(self) -> None:
        """Without brackets only the upper annotation is set."""
        root = parse(r"\xleftarrow{heat}")
        assert isinstance(root, Arrow)
        assert root.kind is ArrowKind.LEFT
        assert root.lower is None
        assert isinstance(root.upper, Horizontal)

    def test_empty_annotation(self) -> None:
        """An empty annotation is empty text."""
        assert parse(r"\xlongequal{}") == Arrow(
            upper=Text("", _roman(0.7)), lower=None, kind=ArrowKind.EQUAL
        )


class TestStructureLiterals:
    """\\chemfig and structure shorthands capture raw text."""

    def test_chemfig(self) -> None:
        """\\chemfig keeps its argument verbatim."""
        root = parse(r"\chemfig{**6(------)}")
        assert root == StructureLiteral("**6(------)", _roman())
        assert root.is_aromatic  # type: ignore[union-attr]

    def test_chemfig_keeps_nested_braces(self) -> None:
        """Nested braces stay in the literal."""
        assert parse(r"\chemfig{A{B}C}") == StructureLiteral("A{B}C", _roman())

    def test_chemfig_keeps_commands(self) -> None:
        """Commands stay in the literal unparsed."""
        assert parse(r"\chemfig{A\\B}") == StructureLiteral(r"A\\B", _roman())

    def test_unterminated_chemfig(self) -> None:
        """An unclosed \\chemfig falls back to its name."""
        assert parse(r"\chemfig{abc") == Text("chemfig", _roman())

    def test_chemfig_without_group(self) -> None:
        """\\chemfig without braces is just its name."""
        assert parse(r"\chemfig x") == Horizontal((Text("chemfig", _roman()), Text("x", _italic())))

    def test_shorthands(self) -> None:
        """Ring shorthands are structure literals."""
        benzene = parse(r"\benzene")
        cyclohexane = parse(r"\cyclohexane")
        assert isinstance(benzene, StructureLiteral)
        assert isinstance(cyclohexane, StructureLiteral)
        assert benzene.is_aromatic
        assert not cyclohexane.is_aromatic
