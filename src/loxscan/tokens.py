"""Token kinds, keywords, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Kind(Enum):
    # Structural (single-character)
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    OPEN_BRACE = auto()  # {
    CLOSE_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    ASTERISK = auto()  # *

    # Comparison / assignment (one or two characters)
    EXCLAMATION = auto()  # !
    EXCLAMATION_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Payload-carrying
    IDENTIFIER = auto()  # value is the name
    STRING = auto()  # value is the contents between the quotes
    NUMBER = auto()  # value is a float
    KEYWORD = auto()  # value is a Keyword

    EOF = auto()


class Keyword(Enum):
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"


# Spelling -> keyword
KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}

# Characters that map directly onto a fixed kind
SINGLE_CHAR_KINDS: dict[str, Kind] = {
    "(": Kind.OPEN_PAREN,
    ")": Kind.CLOSE_PAREN,
    "{": Kind.OPEN_BRACE,
    "}": Kind.CLOSE_BRACE,
    ",": Kind.COMMA,
    ".": Kind.DOT,
    "-": Kind.MINUS,
    "+": Kind.PLUS,
    ";": Kind.SEMICOLON,
    "*": Kind.ASTERISK,
}

# Operator -> (kind alone, kind when followed by "=")
OPERATOR_KINDS: dict[str, tuple[Kind, Kind]] = {
    "!": (Kind.EXCLAMATION, Kind.EXCLAMATION_EQUAL),
    "=": (Kind.EQUAL, Kind.EQUAL_EQUAL),
    ">": (Kind.GREATER, Kind.GREATER_EQUAL),
    "<": (Kind.LESS, Kind.LESS_EQUAL),
}

PAYLOAD_KINDS = frozenset({Kind.IDENTIFIER, Kind.STRING, Kind.NUMBER, Kind.KEYWORD})


@dataclass(frozen=True, slots=True)
class Position:
    """Source span: 0-based half-open character offsets and 1-based start line."""

    start: int
    end: int
    line: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token with its payload (if any) and source position."""

    kind: Kind
    position: Position
    value: str | float | Keyword | None = None

    def lexeme(self, source: str) -> str:
        """Return the slice of *source* this token was scanned from."""
        return source[self.position.start : self.position.end]


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_alpha(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return ch != "" and (("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_")


def is_alnum(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_digit(ch) or is_alpha(ch)
