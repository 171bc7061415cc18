from __future__ import annotations

"""
A minimal pygls-based Language Server for Lispy.

Features:
- Text synchronization and document store
- Diagnostics: parser errors, unbalanced () and {}
- Hover: builtin signatures and symbols bound with def
- Completion: builtins and document definitions
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
import sys
from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    TextDocumentSyncKind,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    HoverParams,
    DocumentSymbolParams,
    DocumentSymbol,
    SymbolKind,
)

from lispy import config
from lispy_lsp.indexer import build_index, BUILTIN_SIGNATURES, DocumentIndex

logger = logging.getLogger(__name__)

SOURCE = "lispy-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class LispyLanguageServer(LanguageServer):
    CMD_NAME = "lispy-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME, config.VERSION, text_document_sync_kind=TextDocumentSyncKind.Full
        )
        self.documents: Dict[str, DocumentState] = {}


ls = LispyLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(ls, uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(ls, uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(server: LispyLanguageServer, uri: str, text: str) -> None:
    state = DocumentState(text=text, index=build_index(text))
    server.documents[uri] = state
    diags = diagnostics_for(state)
    logger.debug("%s: %d diagnostics", uri, len(diags))
    server.publish_diagnostics(uri, diags)


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col+1))


def diagnostics_for(state: DocumentState) -> List[Diagnostic]:
    idx = state.index
    diags: List[Diagnostic] = []

    err = idx.syntax_error
    if err is not None:
        diags.append(
            Diagnostic(
                range=_mk_range(err.line - 1, err.column - 1),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )

    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    if idx.brace_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched braces detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return hover_for(state, params.position)


def hover_for(state: DocumentState, position: Position) -> Optional[Hover]:
    word = _extract_word_at(state.text, position)
    if not word:
        return None

    if word in BUILTIN_SIGNATURES:
        contents = BUILTIN_SIGNATURES[word]
    elif word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{word} (defined at {sdef.line+1}:{sdef.col+1})"
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", "{"]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return CompletionList(is_incomplete=False, items=[])
    return completions_for(state)


def completions_for(state: DocumentState) -> CompletionList:
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    for name in state.index.symbols:
        if name not in BUILTIN_SIGNATURES:
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Variable))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return symbols_for(state)


def symbols_for(state: DocumentState) -> List[DocumentSymbol]:
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
        symbols.append(
            DocumentSymbol(name=name, kind=SymbolKind.Variable, range=rng, selection_range=rng)
        )
    return symbols


# --- Helpers ---
def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries
    start = pos.character
    while start > 0 and line[start - 1] not in " \t(){}\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t(){}\n\r":
        end += 1
    word = line[start:end]
    return word or None


def main() -> None:
    logging.basicConfig(level=config.get_log_level(), stream=sys.stderr)
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
