"""Tree visitor and transformer for Tiza.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example: collect all glyphs

    class GlyphCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.glyphs: list[str] = []

        def visit_text(self, node: Text) -> None:
            self.glyphs.append(node.content)

    collector = GlyphCollector()
    collector.visit(parse("a+b"))

Example: recolor every colored region

    def to_black(node: Node) -> Node:
        if isinstance(node, Color):
            return dataclasses.replace(node, color="#000000")
        return node

    new_root = transform(root, to_black)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure; safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from tiza.nodes import (
    Accent,
    Arrow,
    Binomial,
    Color,
    Delimiter,
    Enclosure,
    Fraction,
    Horizontal,
    Matrix,
    Node,
    Operator,
    Script,
    Space,
    Sqrt,
    StructureLiteral,
    Text,
    children_of,
)


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Leaf visitors ---------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_space(self, node: Space) -> T:
        return self.visit_default(node)

    def visit_structure_literal(self, node: StructureLiteral) -> T:
        return self.visit_default(node)

    # -- Composite visitors ----------------------------------------------------

    def visit_horizontal(self, node: Horizontal) -> T:
        return self.visit_default(node)

    def visit_script(self, node: Script) -> T:
        return self.visit_default(node)

    def visit_operator(self, node: Operator) -> T:
        return self.visit_default(node)

    def visit_fraction(self, node: Fraction) -> T:
        return self.visit_default(node)

    def visit_binomial(self, node: Binomial) -> T:
        return self.visit_default(node)

    def visit_sqrt(self, node: Sqrt) -> T:
        return self.visit_default(node)

    def visit_matrix(self, node: Matrix) -> T:
        return self.visit_default(node)

    def visit_delimiter(self, node: Delimiter) -> T:
        return self.visit_default(node)

    def visit_accent(self, node: Accent) -> T:
        return self.visit_default(node)

    def visit_enclosure(self, node: Enclosure) -> T:
        return self.visit_default(node)

    def visit_arrow(self, node: Arrow) -> T:
        return self.visit_default(node)

    def visit_color(self, node: Color) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Text():
                return self.visit_text(node)
            case Space():
                return self.visit_space(node)
            case StructureLiteral():
                return self.visit_structure_literal(node)
            case Horizontal():
                return self.visit_horizontal(node)
            case Script():
                return self.visit_script(node)
            case Operator():
                return self.visit_operator(node)
            case Fraction():
                return self.visit_fraction(node)
            case Binomial():
                return self.visit_binomial(node)
            case Sqrt():
                return self.visit_sqrt(node)
            case Matrix():
                return self.visit_matrix(node)
            case Delimiter():
                return self.visit_delimiter(node)
            case Accent():
                return self.visit_accent(node)
            case Enclosure():
                return self.visit_enclosure(node)
            case Arrow():
                return self.visit_arrow(node)
            case Color():
                return self.visit_color(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes in layout order."""
        for child in children_of(node):
            self.visit(child)


def transform(root: Node, fn: Callable[[Node], Node]) -> Node:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. Unchanged
    subtrees are shared with the original, which is left untouched.

    Args:
        root: The tree to transform.
        fn: Function that receives a node and returns a (possibly new) node.

    Returns:
        The root of the transformed tree.

    """
    return fn(_transform_children(root, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node]) -> Node:
    """Produce a new node with children transformed."""

    def _map(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(transform(child, fn) for child in children)

    def _map_optional(child: Node | None) -> Node | None:
        return None if child is None else transform(child, fn)

    match node:
        case Horizontal(children=children):
            new_children = _map(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case Script(base=base, script=script):
            new_base, new_script = transform(base, fn), transform(script, fn)
            if (new_base, new_script) != (base, script):
                return dataclasses.replace(node, base=new_base, script=new_script)
        case Operator(upper=upper, lower=lower) | Arrow(upper=upper, lower=lower):
            new_upper, new_lower = _map_optional(upper), _map_optional(lower)
            if (new_upper, new_lower) != (upper, lower):
                return dataclasses.replace(node, upper=new_upper, lower=new_lower)
        case Fraction(numerator=num, denominator=den) | Binomial(
            numerator=num, denominator=den
        ):
            new_num, new_den = transform(num, fn), transform(den, fn)
            if (new_num, new_den) != (num, den):
                return dataclasses.replace(node, numerator=new_num, denominator=new_den)
        case Sqrt(inner=inner) | Delimiter(inner=inner):
            new_inner = transform(inner, fn)
            if new_inner != inner:
                return dataclasses.replace(node, inner=new_inner)
        case Matrix(rows=rows):
            new_rows = tuple(_map(row) for row in rows)
            if new_rows != rows:
                return dataclasses.replace(node, rows=new_rows)
        case Accent(base=base):
            new_base = transform(base, fn)
            if new_base != base:
                return dataclasses.replace(node, base=new_base)
        case Enclosure(child=child) | Color(child=child):
            new_child = transform(child, fn)
            if new_child != child:
                return dataclasses.replace(node, child=new_child)
        case _:
            pass  # Leaf nodes: no children
    return node
