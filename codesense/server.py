import os
from typing import Dict
from urllib.parse import unquote, urlparse

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    Hover,
    InsertTextFormat,
    MarkupContent,
    MarkupKind,
)
from pygls.server import LanguageServer

from .completion import item as completion_item
from .completion.service import CompletionService
from .config.config import LANGUAGE_EXTENSIONS, SUPPORTED_LANGUAGES

server = LanguageServer("codesense-server", "v1")

# Open documents by URI.
services: Dict[str, CompletionService] = {}

COMPLETION_KINDS = {
    "variable": CompletionItemKind.Variable,
    "constant": CompletionItemKind.Constant,
    "function": CompletionItemKind.Function,
    "method": CompletionItemKind.Method,
    "class": CompletionItemKind.Class,
    "property": CompletionItemKind.Property,
    "keyword": CompletionItemKind.Keyword,
    "module": CompletionItemKind.Module,
    "builtin": CompletionItemKind.Variable,
    "tag": CompletionItemKind.Snippet,
    "attribute": CompletionItemKind.Property,
    "value": CompletionItemKind.Value,
    "at-rule": CompletionItemKind.Keyword,
    "pseudo-class": CompletionItemKind.Keyword,
    "pseudo-element": CompletionItemKind.Keyword,
}


def _uri_to_path(uri: str) -> str:
    parsed = urlparse(uri)
    return os.path.abspath(unquote(parsed.path))


def _language_for(uri: str, language_id=None) -> str:
    if language_id in SUPPORTED_LANGUAGES:
        return language_id
    extension = os.path.splitext(_uri_to_path(uri))[1].lower()
    return LANGUAGE_EXTENSIONS.get(extension, "javascript")


def _service_for(ls, uri: str) -> CompletionService:
    """The service holding the latest text of `uri`, created on first use."""
    document = ls.workspace.get_document(uri)
    service = services.get(uri)
    if service is None:
        service = CompletionService(_language_for(uri, document.language_id))
        services[uri] = service
    if service.document.get_text() != document.source:
        service.update_document(document.source)
        if service.parse_error is not None:
            ls.show_message_log(f"codesense: {uri} does not parse ({service.parse_error}); completing from recovered scopes.")
    return service


def _escape_snippet(text: str) -> str:
    return text.replace("\\", "\\\\").replace("$", "\\$").replace("}", "\\}")


def _insert_text(item: completion_item.CompletionItem) -> str:
    """Snippet text with the final cursor position marked as `$0`."""
    text = item.insert_text
    closing_tag = f"</{item.label}>"
    if item.cursor_offset is not None:
        cut = item.cursor_offset
    elif text.endswith(closing_tag):
        cut = len(text) - len(closing_tag)
    else:
        cut = len(text)
    return _escape_snippet(text[:cut]) + "$0" + _escape_snippet(text[cut:])


def to_lsp_item(item: completion_item.CompletionItem, index: int) -> CompletionItem:
    lsp_item = CompletionItem(
        label=item.label,
        kind=COMPLETION_KINDS.get(item.kind, CompletionItemKind.Text),
        detail=item.type_info,
        # Keep the engine's ranking.
        sort_text=f"{index:04d}",
    )
    if item.is_snippet or item.cursor_offset is not None:
        lsp_item.insert_text = _insert_text(item)
        lsp_item.insert_text_format = InsertTextFormat.Snippet
    else:
        lsp_item.insert_text = item.insert_text
    return lsp_item


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls, params):
    _service_for(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls, params):
    _service_for(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls, params):
    services.pop(params.text_document.uri, None)


@server.feature(TEXT_DOCUMENT_COMPLETION)
def completions(ls, params):
    service = _service_for(ls, params.text_document.uri)
    items = service.get_completions_at(params.position.line, params.position.character)
    return CompletionList(items=[to_lsp_item(item, index) for index, item in enumerate(items)], is_incomplete=False)


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls, params):
    service = _service_for(ls, params.text_document.uri)
    offset = service.document.position_to_offset(params.position.line, params.position.character)
    chain = service.get_hover_chain(offset) if service.language == "javascript" else None
    type_string = service.get_type_at(offset) if chain else None
    if type_string is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.Markdown, value=f"```javascript\n{chain}: {type_string}\n```"))


def start_server():
    server.start_io()


if __name__ == "__main__":
    start_server()
