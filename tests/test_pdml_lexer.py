"""Tests for the PDML lexer"""

import pytest

from pdml.errors import (
    EndOfInput,
    InvalidIdentifierError,
    InvalidQuantifierError,
    UnmatchedTokenError,
    UnterminatedTokenError,
)
from pdml.lexer import Lexer
from pdml.reader import CharReader
from pdml.types import Quantifier, Token, TokenType


def lex(source: str) -> Lexer:
    return Lexer(CharReader.from_string(source))


def tokens(source: str):
    return [t for t in lex(source).tokenize() if t.type is not TokenType.WHITESPACE]


class TestSelectors:
    """Test the selector path and its quantifier suffix."""

    def test_fixed_quantifier(self):
        """A numeric suffix gives a fixed quantifier."""
        assert lex("div.card*3;").next_token() == Token.selector("div.card", Quantifier.fixed(3))

    def test_single_quantifier(self):
        """No suffix means a single match."""
        assert lex("div.card;").next_token() == Token.selector("div.card", Quantifier.single())

    def test_many_quantifier(self):
        """A bare star means all matches."""
        assert lex("div.card*;").next_token() == Token.selector("div.card", Quantifier.many())

    def test_fixed_zero(self):
        """Zero is an accepted count."""
        assert lex("li*0;").next_token().quantifier == Quantifier.fixed(0)

    def test_split_at_first_star(self):
        """Only the first star separates selector and quantifier."""
        with pytest.raises(InvalidQuantifierError) as exc_info:
            lex("a*2*3;").next_token()
        assert exc_info.value.quantifier == "2*3"

    def test_invalid_quantifier(self):
        """A non-numeric suffix is rejected."""
        with pytest.raises(InvalidQuantifierError):
            lex("div*abc;").next_token()

    def test_signed_quantifier_rejected(self):
        """Signed counts are rejected."""
        with pytest.raises(InvalidQuantifierError):
            lex("div*-1;").next_token()

    def test_selector_keeps_inner_spaces(self):
        """Selector text is kept raw up to the semicolon."""
        assert lex("ul li;").next_token().text == "ul li"

    def test_missing_terminator(self):
        """End of input before ';' is an unterminated selector."""
        with pytest.raises(UnterminatedTokenError) as exc_info:
            lex("div.card").next_token()
        assert isinstance(exc_info.value.__cause__, EndOfInput)
        assert exc_info.value.token_name == "selector"


class TestPageKeyword:
    """Test the page keyword against look-alike selectors."""

    def test_page_keyword(self):
        """Exact 'page' is the keyword."""
        assert lex("page").next_token() == Token.of_type(TokenType.PAGE)

    def test_selector_starting_with_p(self):
        """A selector starting with p is not swallowed."""
        assert lex("p.intro;").next_token() == Token.selector("p.intro", Quantifier.single())

    def test_short_p_selector(self):
        """Fewer than four characters still falls back to a selector."""
        assert lex("p;").next_token() == Token.selector("p", Quantifier.single())

    def test_pagination_is_a_selector(self):
        """Words only sharing a prefix with 'page' stay selectors."""
        assert lex("pagination*;").next_token() == Token.selector("pagination", Quantifier.many())


class TestLiterals:
    """Test string and URL literals."""

    def test_string_literal(self):
        """Quoted text becomes a string literal."""
        assert lex('"Home page"').next_token() == Token.string("Home page")

    def test_url_literal(self):
        """Angle-bracketed text becomes a URL literal."""
        assert lex("<http://x/?a=1&b=2>").next_token() == Token.url("http://x/?a=1&b=2")

    def test_no_escaping(self):
        """Backslashes have no special meaning."""
        assert lex('"a\\"').next_token() == Token.string("a\\")

    def test_unterminated_string(self):
        """End of input inside a string is reported with its cause."""
        with pytest.raises(UnterminatedTokenError) as exc_info:
            lex('"Home').next_token()
        assert exc_info.value.token_name == "string literal"
        assert isinstance(exc_info.value.cause, EndOfInput)

    def test_unterminated_url(self):
        """End of input inside a URL is an error."""
        with pytest.raises(UnterminatedTokenError):
            lex("<http://x").next_token()

    def test_unmatched_opener(self):
        """A missing opening delimiter reports the character seen."""
        lexer = lex("x")
        with pytest.raises(UnmatchedTokenError) as exc_info:
            lexer._parse_literal(TokenType.STRING, ('"', '"'))
        assert exc_info.value.observed == Token.unknown("x")


class TestIdentifiers:
    """Test $identifier tokens."""

    def test_identifier(self):
        """Dollar followed by letters is an identifier."""
        assert lex("$title").next_token() == Token.identifier("title")

    def test_identifier_stops_before_other_chars(self):
        """The first non-name character is left for the next token."""
        lexer = lex("$item_name=")
        assert lexer.next_token() == Token.identifier("item_name")
        assert lexer.next_token().type is TokenType.ASSIGNMENT

    def test_identifier_rejects_digits(self):
        """Digits end an identifier."""
        lexer = lex("$a1;")
        assert lexer.next_token() == Token.identifier("a")

    def test_empty_identifier(self):
        """A bare dollar is rejected."""
        with pytest.raises(InvalidIdentifierError):
            lex("$ =").next_token()


class TestStream:
    """Test whole token streams."""

    def test_punctuation(self):
        """Assignment and braces are single-character tokens."""
        assert [t.type for t in tokens("={}")] == [
            TokenType.ASSIGNMENT,
            TokenType.BLOCK_OPEN,
            TokenType.BLOCK_CLOSE,
        ]

    def test_whitespace_one_char_at_a_time(self):
        """Each whitespace character is its own token."""
        lexer = lex(" \t\r\n")
        assert [t.type for t in lexer.tokenize()] == [TokenType.WHITESPACE] * 4

    def test_eof_at_boundary(self):
        """End of input between tokens yields EOF repeatedly."""
        lexer = lex("{")
        lexer.next_token()
        assert lexer.next_token().type is TokenType.EOF
        assert lexer.next_token().type is TokenType.EOF

    def test_next_non_whitespace(self):
        """Whitespace runs are skipped."""
        lexer = lex("   \n  }")
        assert lexer.next_non_whitespace().type is TokenType.BLOCK_CLOSE
        assert lexer.next_non_whitespace().type is TokenType.EOF

    def test_full_document(self):
        """A small document tokenizes in source order."""
        source = 'page <http://x> = "Home" {\n  $title = h1*1;\n}\n'
        assert tokens(source) == [
            Token.of_type(TokenType.PAGE),
            Token.url("http://x"),
            Token.of_type(TokenType.ASSIGNMENT),
            Token.string("Home"),
            Token.of_type(TokenType.BLOCK_OPEN),
            Token.identifier("title"),
            Token.of_type(TokenType.ASSIGNMENT),
            Token.selector("h1", Quantifier.fixed(1)),
            Token.of_type(TokenType.BLOCK_CLOSE),
        ]

    def test_tokenize_excludes_eof(self):
        """An empty source yields no tokens."""
        assert lex("").tokenize() == []
