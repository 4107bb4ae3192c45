"""PDML Lexer - turns source characters into tokens on demand"""

import logging
import re
from typing import Iterator, List, Tuple

from pdml.errors import (
    EndOfInput,
    InvalidIdentifierError,
    InvalidQuantifierError,
    LexerReaderError,
    ReaderError,
    UnmatchedTokenError,
    UnterminatedTokenError,
)
from pdml.reader.char_reader import CharReader
from pdml.types.quantifier import Quantifier
from pdml.types.token import Token
from pdml.types.token_type import TokenType

logger = logging.getLogger(__name__)

VALID_IDEN_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
WHITESPACE_CHARS = frozenset(" \r\n\t")
PAGE_KEYWORD = "page"
QUANTIFIER_SEPARATOR = "*"
SELECTOR_TERMINATOR = ";"

_COUNT_PATTERN = re.compile(r"[0-9]+")


class Lexer:
    """Tokenizer for PDML, driven by one character of lookahead"""

    def __init__(self, reader: CharReader):
        self.reader = reader

    def _next_char(self, token_name: str) -> str:
        """Next character of a token body; running out here is an error."""
        try:
            return self.reader.next_char()
        except EndOfInput as e:
            raise UnterminatedTokenError(token_name, e) from e
        except ReaderError as e:
            raise LexerReaderError(e) from e

    def _read_until(self, end_delimiter: str, token_name: str) -> str:
        chars = []
        next_char = self._next_char(token_name)
        while next_char != end_delimiter:
            chars.append(next_char)
            next_char = self._next_char(token_name)
        return "".join(chars)

    def _parse_literal(self, token_type: TokenType, delimiters: Tuple[str, str]) -> Token:
        start_delimiter, end_delimiter = delimiters
        token_name = f"{token_type.value} literal"
        start_char = self._next_char(token_name)
        if start_char != start_delimiter:
            raise UnmatchedTokenError(Token.unknown(start_char))
        return Token(token_type, self._read_until(end_delimiter, token_name))

    def _parse_identifier(self) -> Token:
        start_char = self._next_char("identifier")
        if start_char != "$":
            raise UnmatchedTokenError(Token.unknown(start_char))

        chars = []
        while True:
            try:
                next_char = self.reader.peek()
            except EndOfInput:
                break
            except ReaderError as e:
                raise LexerReaderError(e) from e
            if next_char not in VALID_IDEN_CHARS:
                break
            chars.append(next_char)
            self._advance(1)

        if not chars:
            raise InvalidIdentifierError("Identifier '$' must be followed by at least one of [A-Za-z_]")
        return Token.identifier("".join(chars))

    def _parse_page(self) -> Token:
        """
        ``page`` keyword, or :class:`UnmatchedTokenError` when the upcoming
        characters only start like it (a selector such as ``p.intro;``).
        """
        try:
            buf = self.reader.peek_many(len(PAGE_KEYWORD))
        except ReaderError as e:
            raise LexerReaderError(e) from e
        if "".join(buf) != PAGE_KEYWORD:
            raise UnmatchedTokenError(Token.unknown(buf[0]))
        self._advance(len(PAGE_KEYWORD))
        return Token.of_type(TokenType.PAGE)

    @staticmethod
    def parse_quantifier(spec: str) -> Quantifier:
        if spec == "":
            return Quantifier.many()
        if _COUNT_PATTERN.fullmatch(spec):
            return Quantifier.fixed(int(spec))
        raise InvalidQuantifierError(spec)

    def _parse_selector(self) -> Token:
        selector = self._read_until(SELECTOR_TERMINATOR, "selector")
        if QUANTIFIER_SEPARATOR in selector:
            selector_string, quantifier_string = selector.split(QUANTIFIER_SEPARATOR, 1)
            quantifier = self.parse_quantifier(quantifier_string)
        else:
            selector_string = selector
            quantifier = Quantifier.single()
        return Token.selector(selector_string, quantifier)

    def _advance(self, amount: int):
        try:
            self.reader.advance(amount)
        except ReaderError as e:
            raise LexerReaderError(e) from e

    def next_token(self) -> Token:
        try:
            next_char = self.reader.peek()
        except EndOfInput:
            return Token.of_type(TokenType.EOF)
        except ReaderError as e:
            raise LexerReaderError(e) from e

        if next_char == '"':
            return self._parse_literal(TokenType.STRING, ('"', '"'))
        if next_char in WHITESPACE_CHARS:
            self._advance(1)
            return Token.of_type(TokenType.WHITESPACE)
        if next_char == "<":
            return self._parse_literal(TokenType.URL, ("<", ">"))
        if next_char == "=":
            self._advance(1)
            return Token.of_type(TokenType.ASSIGNMENT)
        if next_char == "p":
            try:
                return self._parse_page()
            except UnmatchedTokenError:
                return self._parse_selector()
        if next_char == "$":
            return self._parse_identifier()
        if next_char == "{":
            self._advance(1)
            return Token.of_type(TokenType.BLOCK_OPEN)
        if next_char == "}":
            self._advance(1)
            return Token.of_type(TokenType.BLOCK_CLOSE)
        # A selector missing its ';' is an error, never an UNKNOWN token
        return self._parse_selector()

    def next_non_whitespace(self) -> Token:
        token = self.next_token()
        while token.type is TokenType.WHITESPACE:
            token = self.next_token()
        return token

    def tokenize(self) -> List[Token]:
        """All remaining tokens, whitespace included, EOF excluded."""
        tokens = list(self)
        logger.debug(f"Tokenized {self.reader.name}: {len(tokens)} tokens")
        return tokens

    def __iter__(self) -> Iterator[Token]:
        token = self.next_token()
        while token.type is not TokenType.EOF:
            yield token
            token = self.next_token()
