"""
Sprig Language Server entry point.

This server provides basic language features for Sprig source files using
`pygls`. It reuses the Sprig lexer and parser to publish diagnostics for the
first lexical or syntax error in a document, and to build a simple symbol
index supporting definition lookup, hover information, and document symbols.
Programs are never executed by the server.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from spriglang import ast
from spriglang.exceptions import SprigError
from spriglang.parser import parse_source


@dataclass
class SprigSymbol:
    """Represents a top-level symbol in a Sprig file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str

    @property
    def range(self) -> Range:
        return Range(
            Position(self.line, self.column),
            Position(self.line, self.column + len(self.detail)),
        )


def collect_symbols(uri: str, program: ast.Program) -> List[SprigSymbol]:
    """Extract top-level function and variable declarations from ``program``."""
    symbols: List[SprigSymbol] = []
    for node in program:
        if isinstance(node, ast.FunctionDeclaration):
            detail = f"fn {node.name}({', '.join(node.params)})"
            symbols.append(
                SprigSymbol(node.name, SymbolKind.Function, uri, node.line - 1, node.column - 1, detail)
            )
        elif isinstance(node, ast.VariableDeclaration):
            detail = f"let {node.name}"
            symbols.append(
                SprigSymbol(node.name, SymbolKind.Variable, uri, node.line - 1, node.column - 1, detail)
            )
    return symbols


def error_to_diagnostic(error: SprigError) -> Diagnostic:
    """Convert a lexer or parser error into an LSP diagnostic."""
    line = max((error.line or 1) - 1, 0)
    column = max((error.column or 1) - 1, 0)
    return Diagnostic(
        range=Range(Position(line, column), Position(line, column + 1)),
        message=f"{error.kind}: {error.message}",
        severity=DiagnosticSeverity.Error,
        source="sprig",
    )


class SprigLanguageServer(LanguageServer):
    """Language server for Sprig source files."""

    def __init__(self) -> None:
        super().__init__("sprig-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[SprigSymbol]] = {}
        self.global_symbols: Dict[str, List[SprigSymbol]] = {}
        self.indexed_workspace = False
        self._logger = logging.getLogger("SprigLanguageServer")

    def _index_workspace(self) -> None:
        """Parse all `.sprig` files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob("*.sprig"):
            uri = path.as_uri()
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as e:
                self._logger.debug("skipping %s: %s", path, e)
                continue
            self.update_index(uri, text)
        self.indexed_workspace = True

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return diagnostics.

        A document that fails to parse keeps the symbols from its last
        successful parse.
        """
        try:
            program = parse_source(text, uri)
        except SprigError as e:
            self._logger.debug("%s does not parse: %s", uri, e)
            return [error_to_diagnostic(e)]
        self.symbols_by_uri[uri] = collect_symbols(uri, program)
        self._rebuild_global_index()
        return []

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, word: str) -> Optional[SprigSymbol]:
        """Return the first indexed symbol named ``word``."""
        if not self.indexed_workspace:
            self._index_workspace()
        matches = self.global_symbols.get(word)
        return matches[0] if matches else None


lang_server = SprigLanguageServer()


def _refresh(ls: SprigLanguageServer, uri: str, text: str) -> None:
    ls.publish_diagnostics(uri, ls.update_index(uri, text))


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: SprigLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    _refresh(ls, params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: SprigLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    _refresh(ls, doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: SprigLanguageServer, params: DefinitionParams):
    """Return the definition location for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(word)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.range)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: SprigLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(word)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: SprigLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    return [
        DocumentSymbol(
            name=sym.name,
            kind=sym.kind,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in symbols
    ]


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
