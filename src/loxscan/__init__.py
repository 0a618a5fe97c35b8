"""Lexical scanner for a small Lox-style scripting language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.config import Config
    from loxscan.tokens import Token

__version__ = "0.1.0"


def scan(source: str, filename: str = "<input>", config: Config | None = None) -> list[Token]:
    """Scan source text into tokens, honouring *config* when given."""
    from loxscan.scanner import tokenize

    emit_eof = config.emit_eof if config is not None else False
    return tokenize(source, filename, emit_eof=emit_eof)
