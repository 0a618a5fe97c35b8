"""Scanner that converts source text into a flat list of classified tokens."""

from __future__ import annotations

import logging

from loxscan.errors import ScanError
from loxscan.tokens import (
    KEYWORDS,
    OPERATOR_KINDS,
    SINGLE_CHAR_KINDS,
    Keyword,
    Kind,
    Position,
    Token,
    is_alnum,
    is_alpha,
    is_digit,
)

logger = logging.getLogger(__name__)


class Scanner:
    """Scan one source text into a list of Token objects.

    A Scanner owns its cursor state and is meant to be used for a single
    call to :meth:`scan_tokens`.
    """

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self._source = source
        self._filename = filename
        self._current_position = 0
        self._current_start = 0
        self._current_line = 1
        self._start_line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list.

        Raises ScanError on the first invalid construct; tokens recognized
        before the error are discarded.
        """
        tokens: list[Token] = []
        try:
            while not self._finished():
                self._mark_start()
                token = self._scan_token()
                if token is not None:
                    tokens.append(token)
        except ScanError as exc:
            logger.debug("scan of %s failed at line %d: %s", self._filename, exc.line, exc.message)
            raise
        logger.debug("scanned %d tokens from %s", len(tokens), self._filename)
        return tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _finished(self) -> bool:
        return self._current_position >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        idx = self._current_position + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._peek()
        self._current_position += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the character at the cursor if it equals *expected*."""
        if self._peek() != expected:
            return False
        self._current_position += 1
        return True

    def _mark_start(self) -> None:
        self._current_start = self._current_position
        self._start_line = self._current_line

    def _lexeme(self) -> str:
        return self._source[self._current_start : self._current_position]

    def _build_token(self, kind: Kind, value: str | float | Keyword | None = None) -> Token:
        position = Position(self._current_start, self._current_position, self._start_line)
        return Token(kind, position, value)

    def _error(self, message: str, offset: int | None = None) -> ScanError:
        if offset is None:
            offset = self._current_position
        return ScanError(message, self._current_line, offset, self._source)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> Token | None:
        if self._finished():
            raise self._error("Invalid syntax.")

        ch = self._advance()

        if ch in SINGLE_CHAR_KINDS:
            return self._build_token(SINGLE_CHAR_KINDS[ch])

        if ch in OPERATOR_KINDS:
            single, double = OPERATOR_KINDS[ch]
            return self._build_token(double if self._match("=") else single)

        if ch == "/":
            if self._match("/"):
                self._skip_comment()
                return None
            return self._build_token(Kind.SLASH)

        if ch == '"':
            return self._scan_string()

        if is_digit(ch):
            return self._scan_number()

        if is_alpha(ch):
            return self._scan_identifier()

        if ch in " \r\t":
            return None

        if ch == "\n":
            self._current_line += 1
            return None

        raise self._error("Invalid syntax.", self._current_start)

    def _skip_comment(self) -> None:
        # Stops before the newline so the dispatch loop counts the line
        while not self._finished() and self._peek() != "\n":
            self._advance()

    # ------------------------------------------------------------------
    # Literal sub-scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> Token:
        """Scan up to the closing quote; contents are taken verbatim."""
        while not self._finished() and self._peek() != '"':
            if self._advance() == "\n":
                self._current_line += 1

        if self._finished():
            raise self._error("EOF while scanning string literal")

        self._advance()  # closing quote
        contents = self._source[self._current_start + 1 : self._current_position - 1]
        return self._build_token(Kind.STRING, contents)

    def _scan_number(self) -> Token:
        """Scan digits with an optional fraction; a trailing dot is left alone."""
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()  # dot
            while is_digit(self._peek()):
                self._advance()

        # The lexeme is numeric by construction, so float() cannot fail here
        return self._build_token(Kind.NUMBER, float(self._lexeme()))

    def _scan_identifier(self) -> Token:
        while is_alnum(self._peek()):
            self._advance()

        text = self._lexeme()
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return self._build_token(Kind.KEYWORD, keyword)
        return self._build_token(Kind.IDENTIFIER, text)


def tokenize(source: str, filename: str = "<input>", *, emit_eof: bool = False) -> list[Token]:
    """Convenience function: scan source text and return the token list.

    With *emit_eof*, a terminal EOF token with an empty span at the end of
    the source is appended.
    """
    scanner = Scanner(source, filename)
    tokens = scanner.scan_tokens()
    if emit_eof:
        end = len(source)
        tokens.append(Token(Kind.EOF, Position(end, end, source.count("\n") + 1)))
    return tokens
