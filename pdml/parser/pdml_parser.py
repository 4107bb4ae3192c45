"""PDML Parser - Page Description Markup parser"""

import logging
from pathlib import Path
from typing import List, Union

from pdml.errors import (
    EmptyValueError,
    LexerError,
    NestingTooDeepError,
    ReaderError,
    SourceReadError,
    TokenizeError,
    UnexpectedTokenError,
    UnexpectedTokenManyError,
)
from pdml.lexer.lexer import Lexer
from pdml.reader.char_reader import CharReader
from pdml.types import token as templates
from pdml.types.element import Element, PartialElement
from pdml.types.page import Page, PartialPage
from pdml.types.token import Token, same_kind
from pdml.types.token_type import TokenType

logger = logging.getLogger(__name__)


def expect(expected: Token, got: Token):
    """Fail unless ``got`` has the shape of ``expected``."""
    if not same_kind(expected, got):
        raise UnexpectedTokenError(expected, got)


class PDMLParser:
    """
    Parser for PDML sources.

    Usage:
        pages = PDMLParser.for_file("shop.pdml").parse()

    Grammar:
        document := page*
        page     := 'page' <url> ( '=' "name" )? '{' element* '}'
        element  := ( $identifier '=' )? selector[*quantifier]; ( '{' element* '}' )?
    """

    def __init__(self, source: Union[str, Path], from_file: bool = True):
        self.source = source
        self.from_file = from_file

    @classmethod
    def for_file(cls, path: Union[str, Path]) -> "PDMLParser":
        return cls(path, from_file=True)

    @classmethod
    def for_string(cls, text: str) -> "PDMLParser":
        return cls(text, from_file=False)

    def _open(self) -> CharReader:
        if self.from_file:
            try:
                return CharReader.from_file(self.source)
            except ReaderError as e:
                raise SourceReadError(e) from e
        return CharReader.from_string(self.source)

    def parse(self) -> List[Page]:
        with self._open() as reader:
            try:
                pages = PageParser(Lexer(reader)).parse_pages()
            except RecursionError as e:
                raise NestingTooDeepError(e) from e
            logger.info(f"Parsed {len(pages)} page(s) from {reader.name}")
            return pages


class PageParser:
    """Recursive descent over one lexer; used for exactly one parse"""

    def __init__(self, lexer: Lexer):
        self.lexer = lexer

    def _next(self) -> Token:
        try:
            return self.lexer.next_non_whitespace()
        except LexerError as e:
            raise TokenizeError(e) from e
        except ReaderError as e:
            raise SourceReadError(e) from e

    def parse_pages(self) -> List[Page]:
        token = self._next()
        pages: List[Page] = []
        while token.type is not TokenType.EOF:
            partial_page = PartialPage()
            expect(templates.PAGE, token)

            token = self._next()
            expect(templates.ANY_URL, token)
            if not token.text:
                raise EmptyValueError("Page URL must not be empty")
            partial_page.url = token.text

            token = self._next()
            if token.type is TokenType.ASSIGNMENT:
                token = self._next()
                expect(templates.ANY_STRING, token)
                partial_page.name = token.text
                token = self._next()
                expect(templates.BLOCK_OPEN, token)
            elif token.type is not TokenType.BLOCK_OPEN:
                raise UnexpectedTokenManyError([templates.ASSIGNMENT, templates.BLOCK_OPEN], token)

            page = self.parse_page(partial_page)
            logger.debug(f"Parsed page {page.url} ({page.name or 'unnamed'}) with {len(page.elements)} element(s)")
            pages.append(page)
            token = self._next()
        return pages

    def parse_page(self, partial_page: PartialPage) -> Page:
        """Page body; the opening '{' has been consumed."""
        token = self._next()
        if token.type is TokenType.BLOCK_CLOSE:
            partial_page.elements = []
        elif token.type in (TokenType.IDENTIFIER, TokenType.SELECTOR):
            partial_page.elements = self.parse_block(token)
        else:
            raise UnexpectedTokenManyError(
                [templates.BLOCK_CLOSE, templates.ANY_IDENTIFIER, templates.ANY_SELECTOR],
                token,
            )
        return partial_page.build()

    def parse_block(self, initial_token: Token) -> List[Element]:
        """Elements up to and including the closing '}'."""
        token = initial_token
        elements: List[Element] = []
        while token.type is not TokenType.BLOCK_CLOSE:
            elem = PartialElement()
            if token.type is TokenType.IDENTIFIER:
                elem.identifier = token.text
                token = self._next()
                expect(templates.ASSIGNMENT, token)
                token = self._next()
                expect(templates.ANY_SELECTOR, token)
            elif token.type is not TokenType.SELECTOR:
                raise UnexpectedTokenManyError([templates.ANY_IDENTIFIER, templates.ANY_SELECTOR], token)

            if not token.text:
                raise EmptyValueError(f"Element selector must not be empty (got {token!r})")
            elem.selector = token.text
            elem.quantifier = token.quantifier

            token = self._next()
            if token.type is TokenType.BLOCK_OPEN:
                token = self._next()
                elem.children = self.parse_block(token)
                token = self._next()
            elements.append(elem.build())
        return elements


def parse_file(path: Union[str, Path]) -> List[Page]:
    return PDMLParser.for_file(path).parse()


def parse_string(text: str) -> List[Page]:
    return PDMLParser.for_string(text).parse()
