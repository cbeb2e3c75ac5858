"""Typed expression-tree nodes for Tiza.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads, trees are never mutated
  after a node is returned to its parent
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Set (closed):
Node (base)
├── Text              leaf glyph run
├── Horizontal        sibling composition (two or more children)
├── Script            corner super/subscript
├── Operator          big operator with centered limits
├── Fraction
├── Binomial
├── Sqrt
├── Matrix            ragged rows of cells
├── Delimiter         \\left ... \\right
├── Accent
├── Enclosure         overline, underline, boxed
├── Arrow             stretchable annotated arrow
├── Color
├── Space             signed horizontal spacer
└── StructureLiteral  opaque chemistry-diagram payload

Styles are resolved by the parser when a node is built. The layout engine
receives abstract StyleContext values and never needs parse context.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from tiza.styles import StyleContext

# =============================================================================
# Kinds
# =============================================================================


class ScriptKind(Enum):
    """Corner attachment position."""

    SUPER = "super"
    SUB = "sub"


class BracketStyle(Enum):
    """Bracket drawn around a matrix or delimited region."""

    NONE = "none"
    BRACKET = "bracket"  # [ ]
    PAREN = "paren"  # ( )
    ABSOLUTE = "absolute"  # | |
    CASES = "cases"  # { on the left only


class EnclosureKind(Enum):
    OVERLINE = "overline"
    UNDERLINE = "underline"
    BOXED = "boxed"


class ArrowKind(Enum):
    LEFT = "left"
    RIGHT = "right"
    EQUAL = "equal"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


# =============================================================================
# Leaves
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Run of glyphs in one resolved style.

    An empty Text is the placeholder for an empty group or a missing
    argument.

    """

    content: str
    style: StyleContext


@dataclass(frozen=True, slots=True)
class Space(Node):
    """Horizontal spacer. Width is in em of the root size; may be negative."""

    width: float


@dataclass(frozen=True, slots=True)
class StructureLiteral(Node):
    """Opaque structure string captured from a diagram macro.

    Markup: \\chemfig{**6(------)} or the \\benzene shorthand

    """

    structure: str
    style: StyleContext

    @property
    def is_aromatic(self) -> bool:
        """Ring drawn with an inner circle (``**`` marker)."""
        return "**" in self.structure


# =============================================================================
# Composites
# =============================================================================


@dataclass(frozen=True, slots=True)
class Horizontal(Node):
    """Siblings laid out left to right.

    The parser only builds this for two or more siblings; a single sibling
    is returned unwrapped.

    """

    children: tuple[MathNode, ...]


@dataclass(frozen=True, slots=True)
class Script(Node):
    """Corner script attached to a base.

    Markup: x^2, a_i. Consecutive scripts nest: x^2_3 is
    Script(Script(x, 2, SUPER), 3, SUB).

    """

    base: MathNode
    script: MathNode
    kind: ScriptKind


@dataclass(frozen=True, slots=True)
class Operator(Node):
    """Big operator with limits stacked above and below.

    Markup: \\sum_{i=1}^{n}, \\lim_{x \\to 0}

    """

    symbol: str
    style: StyleContext
    upper: MathNode | None = None
    lower: MathNode | None = None


@dataclass(frozen=True, slots=True)
class Fraction(Node):
    numerator: MathNode
    denominator: MathNode


@dataclass(frozen=True, slots=True)
class Binomial(Node):
    """Binomial coefficient: stacked, no bar, parenthesized by convention."""

    numerator: MathNode
    denominator: MathNode


@dataclass(frozen=True, slots=True)
class Sqrt(Node):
    inner: MathNode


@dataclass(frozen=True, slots=True)
class Matrix(Node):
    """Environment body split into rows and cells.

    Rows may have different lengths; nothing pads them.

    """

    rows: tuple[tuple[MathNode, ...], ...]
    bracket: BracketStyle = BracketStyle.NONE


@dataclass(frozen=True, slots=True)
class Delimiter(Node):
    """Region between \\left and \\right."""

    inner: MathNode
    bracket: BracketStyle = BracketStyle.PAREN


@dataclass(frozen=True, slots=True)
class Accent(Node):
    """Accent glyph placed over a base. Markup: \\vec{v}, \\hat{x}"""

    base: MathNode
    accent: str
    style: StyleContext


@dataclass(frozen=True, slots=True)
class Enclosure(Node):
    child: MathNode
    kind: EnclosureKind


@dataclass(frozen=True, slots=True)
class Arrow(Node):
    """Stretchable arrow with optional annotations.

    Markup: \\xrightarrow[below]{above}; also the chemistry reaction
    arrow ``->``, which has no annotations.

    """

    upper: MathNode | None = None
    lower: MathNode | None = None
    kind: ArrowKind = ArrowKind.RIGHT


@dataclass(frozen=True, slots=True)
class Color(Node):
    """Child drawn in a color. ``color`` is an abstract identifier (#RRGGBB)."""

    child: MathNode
    color: str


# Closed set of tree nodes
type MathNode = (
    Text
    | Horizontal
    | Script
    | Operator
    | Fraction
    | Binomial
    | Sqrt
    | Matrix
    | Delimiter
    | Accent
    | Enclosure
    | Arrow
    | Color
    | Space
    | StructureLiteral
)


# =============================================================================
# Traversal helpers
# =============================================================================


def children_of(node: Node) -> tuple[Node, ...]:
    """Direct children of ``node`` in layout order (limits: upper first)."""
    match node:
        case Horizontal(children=children):
            return children
        case Script(base=base, script=script):
            return (base, script)
        case Operator(upper=upper, lower=lower) | Arrow(upper=upper, lower=lower):
            return tuple(child for child in (upper, lower) if child is not None)
        case Fraction(numerator=num, denominator=den) | Binomial(
            numerator=num, denominator=den
        ):
            return (num, den)
        case Sqrt(inner=inner) | Delimiter(inner=inner):
            return (inner,)
        case Matrix(rows=rows):
            return tuple(cell for row in rows for cell in row)
        case Accent(base=base):
            return (base,)
        case Enclosure(child=child) | Color(child=child):
            return (child,)
        case _:
            return ()


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants, depth-first pre-order.

    Uses an explicit stack, so arbitrarily deep trees are safe to walk.
    """
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children_of(node)))


def count_nodes(root: Node) -> int:
    """Number of nodes in the tree rooted at ``root``."""
    return sum(1 for _ in iter_nodes(root))


def tree_height(root: Node) -> int:
    """Number of nodes on the longest path from ``root`` down to a leaf."""
    height = 0
    stack: list[tuple[Node, int]] = [(root, 1)]
    while stack:
        node, level = stack.pop()
        height = max(height, level)
        stack.extend((child, level + 1) for child in children_of(node))
    return height
