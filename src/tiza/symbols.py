"""Static lookup tables consulted by the parser.

Every table is built once at import time and never mutated, so concurrent
parsers read them without synchronization. Mappings are exposed as
``MappingProxyType`` views and sets as ``frozenset``.

"""

from types import MappingProxyType

from tiza.nodes import ArrowKind, BracketStyle, EnclosureKind
from tiza.styles import FontStyle

# Command name -> display glyph
SYMBOLS: MappingProxyType[str, str] = MappingProxyType(
    {
        # Greek
        "alpha": "α",
        "beta": "β",
        "gamma": "γ",
        "Gamma": "Γ",
        "delta": "δ",
        "Delta": "Δ",
        "epsilon": "ε",
        "varepsilon": "ε",
        "zeta": "ζ",
        "eta": "η",
        "theta": "θ",
        "Theta": "Θ",
        "vartheta": "ϑ",
        "iota": "ι",
        "kappa": "κ",
        "lambda": "λ",
        "Lambda": "Λ",
        "mu": "μ",
        "nu": "ν",
        "xi": "ξ",
        "Xi": "Ξ",
        "pi": "π",
        "Pi": "Π",
        "varpi": "ϖ",
        "rho": "ρ",
        "sigma": "σ",
        "Sigma": "Σ",
        "tau": "τ",
        "upsilon": "υ",
        "Upsilon": "Υ",
        "phi": "φ",
        "Phi": "Φ",
        "varphi": "ϕ",
        "chi": "χ",
        "psi": "ψ",
        "Psi": "Ψ",
        "omega": "ω",
        "Omega": "Ω",
        # Big operators and integrals
        "sum": "∑",
        "prod": "∏",
        "coprod": "∐",
        "bigcup": "⋃",
        "bigcap": "⋂",
        "bigoplus": "⨁",
        "bigotimes": "⨂",
        "int": "∫",
        "iint": "∬",
        "iiint": "∭",
        "oint": "∮",
        # Relations
        "approx": "≈",
        "neq": "≠",
        "leq": "≤",
        "geq": "≥",
        "equiv": "≡",
        "sim": "∼",
        "cong": "≅",
        "propto": "∝",
        "in": "∈",
        "notin": "∉",
        "ni": "∋",
        "subset": "⊂",
        "subseteq": "⊆",
        "supset": "⊃",
        "supseteq": "⊇",
        "perp": "⊥",
        "parallel": "∥",
        "mid": "|",
        # Arrows
        "rightarrow": "→",
        "to": "→",
        "leftarrow": "←",
        "longrightarrow": "⟶",
        "longleftarrow": "⟵",
        "rightleftharpoons": "⇌",
        "Rightarrow": "⇒",
        "Leftarrow": "⇐",
        "iff": "⇔",
        "uparrow": "↑",
        "downarrow": "↓",
        # Logic and calculus
        "infty": "∞",
        "forall": "∀",
        "exists": "∃",
        "empty": "∅",
        "emptyset": "∅",
        "therefore": "∴",
        "because": "∵",
        "partial": "∂",
        "nabla": "∇",
        # Physics letterlike symbols
        "hbar": "ℏ",
        "ell": "ℓ",
        "Re": "ℜ",
        "Im": "ℑ",
        "aleph": "ℵ",
        "wp": "℘",
        # Geometry and dots
        "angle": "∠",
        "degree": "°",
        "triangle": "△",
        "cdot": "·",
        "cdots": "⋯",
        "vdots": "⋮",
        "ddots": "⋱",
        # Binary operators
        "times": "×",
        "div": "÷",
        "pm": "±",
        "mp": "∓",
        "ast": "*",
        "star": "⋆",
        "circ": "∘",
        "bullet": "•",
        "cup": "∪",
        "cap": "∩",
        "vee": "∨",
        "wedge": "∧",
        "oplus": "⊕",
        "otimes": "⊗",
    }
)

# Operators whose scripts stack centered above/below instead of at the corner
VERTICAL_LIMITS: frozenset[str] = frozenset(
    {
        "sum",
        "prod",
        "coprod",
        "lim",
        "max",
        "min",
        "sup",
        "inf",
        "bigcup",
        "bigcap",
        "bigoplus",
        "bigotimes",
    }
)

# Command name -> accent glyph
ACCENTS: MappingProxyType[str, str] = MappingProxyType(
    {
        "vec": "→",
        "bar": "ˉ",
        "hat": "^",
        "dot": "˙",
        "ddot": "¨",
        "tilde": "˜",
        "check": "ˇ",
        "breve": "˘",
        "widehat": "^",
        "widetilde": "˜",
        "acute": "´",
        "grave": "`",
        "mathring": "˚",
        "overrightarrow": "→",
    }
)

# Color name -> abstract color identifier
COLORS: MappingProxyType[str, str] = MappingProxyType(
    {
        "red": "#FF0000",
        "blue": "#0000FF",
        "green": "#00FF00",
        "black": "#000000",
        "white": "#FFFFFF",
        "gray": "#808080",
        "cyan": "#00FFFF",
        "magenta": "#FF00FF",
        "yellow": "#FFFF00",
        "orange": "#FF8000",
        "purple": "#800080",
        "brown": "#996633",
    }
)

# Always set upright, whatever the ambient style
FUNCTION_NAMES: frozenset[str] = frozenset(
    {
        "sin",
        "cos",
        "tan",
        "cot",
        "sec",
        "csc",
        "sinh",
        "cosh",
        "tanh",
        "arcsin",
        "arccos",
        "arctan",
        "log",
        "ln",
        "lg",
        "exp",
        "det",
        "dim",
        "ker",
        "deg",
        "gcd",
        "lim",
        "max",
        "min",
        "sup",
        "inf",
        "arg",
        "Pr",
    }
)

# Style-switch command -> overriding font style
STYLE_SWITCHES: MappingProxyType[str, FontStyle] = MappingProxyType(
    {
        "mathrm": FontStyle.ROMAN,
        "text": FontStyle.ROMAN,
        "textrm": FontStyle.ROMAN,
        "operatorname": FontStyle.ROMAN,
        "mathit": FontStyle.ITALIC,
        "textit": FontStyle.ITALIC,
        "mathbf": FontStyle.BOLD,
        "textbf": FontStyle.BOLD,
        "boldsymbol": FontStyle.BOLD_ITALIC,
        "bm": FontStyle.BOLD_ITALIC,
        "mathcal": FontStyle.CALLIGRAPHIC,
        "mathbb": FontStyle.BLACKBOARD_BOLD,
        "mathfrak": FontStyle.FRAKTUR,
        "mathtt": FontStyle.TYPEWRITER,
        "texttt": FontStyle.TYPEWRITER,
        "mathsf": FontStyle.SANS_SERIF,
        "textsf": FontStyle.SANS_SERIF,
        "mathscr": FontStyle.SCRIPT,
    }
)

# Named spacing command -> width in em of the current size
SPACING_WIDTHS: MappingProxyType[str, float] = MappingProxyType(
    {
        "quad": 1.0,
        "qquad": 2.0,
        "enspace": 0.5,
        "thinspace": 0.3,
        "negthinspace": -0.15,
    }
)

# Control-symbol spacing (\, \: \; \!) -> width in em
CONTROL_SPACING: MappingProxyType[str, float] = MappingProxyType(
    {
        ",": 0.3,
        ":": 0.4,
        ";": 0.5,
        "!": -0.15,
    }
)

# Environment name -> matrix bracket; anything else is BracketStyle.NONE
ENVIRONMENT_BRACKETS: MappingProxyType[str, BracketStyle] = MappingProxyType(
    {
        "bmatrix": BracketStyle.BRACKET,
        "pmatrix": BracketStyle.PAREN,
        "vmatrix": BracketStyle.ABSOLUTE,
        "cases": BracketStyle.CASES,
    }
)

# Environments whose first group is a column spec, not content
COLUMN_SPEC_ENVIRONMENTS: frozenset[str] = frozenset({"array"})

# \left opening delimiter -> bracket style; anything else is PAREN
DELIMITER_BRACKETS: MappingProxyType[str, BracketStyle] = MappingProxyType(
    {
        "(": BracketStyle.PAREN,
        "[": BracketStyle.BRACKET,
    }
)

ENCLOSURES: MappingProxyType[str, EnclosureKind] = MappingProxyType(
    {
        "overline": EnclosureKind.OVERLINE,
        "underline": EnclosureKind.UNDERLINE,
        "boxed": EnclosureKind.BOXED,
    }
)

ARROW_KINDS: MappingProxyType[str, ArrowKind] = MappingProxyType(
    {
        "xrightarrow": ArrowKind.RIGHT,
        "xleftarrow": ArrowKind.LEFT,
        "xlongequal": ArrowKind.EQUAL,
    }
)

# Structure macros that expand to a fixed literal without an argument
STRUCTURE_SHORTHANDS: MappingProxyType[str, str] = MappingProxyType(
    {
        "benzene": "**6(------)",
        "cyclohexane": "6(------)",
    }
)
