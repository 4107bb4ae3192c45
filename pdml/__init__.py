"""
PDML - Page Description Markup

Declarative description of what to pull out of a web page:

    page <https://example.com> = "Example" {
        $title = h1;
        $links = a*; { $label = span.text; }
    }

The package turns such sources into an immutable tree of pages and elements
and classifies selector text for whatever engine queries the documents.
"""

from pdml.errors import (
    IncompleteRecordError,
    LexerError,
    MalformedSelectorError,
    ParseError,
    PDMLError,
    ReaderError,
    SelectorError,
    describe_error,
)
from pdml.types import (
    AttributeSelector,
    CombinedSelector,
    Element,
    Page,
    Quantifier,
    QuantifierKind,
    TagSelector,
    Token,
    TokenType,
    same_kind,
)
from pdml.reader import CharReader
from pdml.lexer import Lexer
from pdml.parser import PDMLParser, parse_file, parse_string
from pdml.selector import apply_quantifier, classify_selector
from pdml.examples import EXAMPLE_DOCUMENTS

__all__ = [
    'PDMLError',
    'ReaderError',
    'LexerError',
    'ParseError',
    'SelectorError',
    'MalformedSelectorError',
    'IncompleteRecordError',
    'describe_error',
    'AttributeSelector',
    'CombinedSelector',
    'Element',
    'Page',
    'Quantifier',
    'QuantifierKind',
    'TagSelector',
    'Token',
    'TokenType',
    'same_kind',
    'CharReader',
    'Lexer',
    'PDMLParser',
    'parse_file',
    'parse_string',
    'apply_quantifier',
    'classify_selector',
    'EXAMPLE_DOCUMENTS',
]
