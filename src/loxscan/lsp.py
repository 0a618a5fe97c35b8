"""Minimal LSP server for loxscan, publishing scan diagnostics only."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from loxscan import __version__
from loxscan.config import Config, load_config, resolve_config
from loxscan.errors import ScanError
from loxscan.scanner import Scanner

logger = logging.getLogger(__name__)

server = LanguageServer(
    "loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)

_SEVERITY = {
    "error": DiagnosticSeverity.Error,
    "warning": DiagnosticSeverity.Warning,
    "information": DiagnosticSeverity.Information,
    "hint": DiagnosticSeverity.Hint,
}

# Line breaks as LSP clients count them
_CLIENT_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Workspace root -> resolved config
_config_cache: dict[str, Config] = {}


def _workspace_config(ls: LanguageServer) -> Config:
    """Resolve loxscan.toml from the workspace root once, or defaults without one."""
    root = ls.workspace.root_path
    if not root:
        return Config()
    if root not in _config_cache:
        try:
            config = resolve_config(load_config(None, Path(root)))
        except ValueError as exc:
            logger.warning("ignoring invalid loxscan.toml in %s: %s", root, exc)
            config = Config()
        _config_cache[root] = config
    return _config_cache[root]


def _client_range(doc: TextDocument, offset: int) -> Range:
    """One-character range at *offset*, in the client's lines and position encoding."""
    before = _CLIENT_LINE_BREAK.split(doc.source[:offset])
    lines = _CLIENT_LINE_BREAK.split(doc.source)
    line = len(before) - 1
    character = len(before[-1])
    codec = doc.position_codec
    return Range(
        start=codec.position_to_client_units(lines, Position(line=line, character=character)),
        end=codec.position_to_client_units(lines, Position(line=line, character=character + 1)),
    )


def _validate(ls: LanguageServer, uri: str, config: Config | None = None) -> None:
    """Scan the document and publish diagnostics."""
    if config is None:
        config = _workspace_config(ls)
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    try:
        Scanner(doc.source, filename).scan_tokens()
    except ScanError as exc:
        diagnostics.append(
            Diagnostic(
                range=_client_range(doc, exc.offset),
                message=exc.message,
                severity=_SEVERITY[config.diagnostic_severity],
                source=config.diagnostic_source,
            )
        )

    logger.debug("publishing %d diagnostics for %s", len(diagnostics), uri)
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
