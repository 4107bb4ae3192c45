"""Tests for PDML tokens, quantifiers and builders"""

import pytest

from pdml.errors import IncompleteRecordError
from pdml.types import (
    Element,
    PartialElement,
    PartialPage,
    Quantifier,
    QuantifierKind,
    Token,
    TokenType,
    same_kind,
)
from pdml.types import token as templates


class TestShapeEquality:
    """Test token comparison by kind only."""

    def test_reflexive(self):
        """Every token has the same kind as itself."""
        for token in (templates.PAGE, Token.url("http://x"), Token.selector("a", Quantifier.many())):
            assert same_kind(token, token)
            assert token.same_kind(token)

    def test_literals_ignore_payload(self):
        """Literals of one kind match whatever their text."""
        assert same_kind(Token.string("Home"), Token.string("Other"))
        assert same_kind(Token.url("http://a"), templates.ANY_URL)
        assert same_kind(Token.identifier("title"), templates.ANY_IDENTIFIER)

    def test_selectors_ignore_text_and_quantifier(self):
        """Selectors match regardless of text and quantifier."""
        assert same_kind(Token.selector("div", Quantifier.fixed(3)), templates.ANY_SELECTOR)
        assert same_kind(Token.selector("div", Quantifier.single()), Token.selector("a", Quantifier.many()))

    def test_different_kinds(self):
        """Tokens of different kinds never match."""
        assert not same_kind(templates.BLOCK_OPEN, templates.BLOCK_CLOSE)
        assert not same_kind(Token.string("x"), Token.url("x"))
        assert not same_kind(Token.identifier("x"), Token.selector("x", Quantifier.single()))

    def test_full_equality_compares_payload(self):
        """== looks at the payload as well as the kind."""
        assert Token.string("a") == Token.string("a")
        assert Token.string("a") != Token.string("b")
        assert Token.selector("a", Quantifier.fixed(1)) != Token.selector("a", Quantifier.fixed(2))


class TestQuantifier:
    """Test quantifier construction."""

    def test_fixed_zero_is_legal(self):
        """Fixed(0) is a valid quantifier."""
        assert Quantifier.fixed(0).count == 0

    def test_fixed_negative_rejected(self):
        """A negative count is refused."""
        with pytest.raises(ValueError):
            Quantifier.fixed(-1)

    def test_count_only_on_fixed(self):
        """Only fixed quantifiers carry a count."""
        with pytest.raises(ValueError):
            Quantifier(QuantifierKind.MANY, 2)

    def test_wildcard(self):
        """Only the any quantifier is a wildcard."""
        assert Quantifier.any().is_wildcard
        assert not Quantifier.many().is_wildcard

    def test_str(self):
        """String form shows the kind and count."""
        assert str(Quantifier.fixed(3)) == "fixed(3)"
        assert str(Quantifier.single()) == "single"


class TestBuilders:
    """Test partial page and element builders."""

    def test_element_build(self):
        """A complete element builder freezes into an Element."""
        partial = PartialElement(identifier="title", selector="h1", quantifier=Quantifier.single())
        element = partial.build()
        assert element == Element(selector="h1", quantifier=Quantifier.single(), identifier="title")
        assert element.children is None

    def test_element_children_frozen_to_tuple(self):
        """Children lists become tuples."""
        child = Element(selector="span", quantifier=Quantifier.single())
        partial = PartialElement(selector="li", quantifier=Quantifier.many(), children=[child])
        assert partial.build().children == (child,)

    def test_element_missing_selector(self):
        """Building without a selector names the missing field."""
        with pytest.raises(IncompleteRecordError) as exc_info:
            PartialElement(quantifier=Quantifier.single()).build()
        assert exc_info.value.field_name == "selector"

    def test_element_missing_quantifier(self):
        """Building without a quantifier fails."""
        with pytest.raises(IncompleteRecordError):
            PartialElement(selector="h1").build()

    def test_element_rejects_wildcard(self):
        """The any wildcard never reaches a finished element."""
        with pytest.raises(IncompleteRecordError):
            PartialElement(selector="h1", quantifier=Quantifier.any()).build()

    def test_incomplete_record_is_assertion(self):
        """Builder faults are assertion errors."""
        assert issubclass(IncompleteRecordError, AssertionError)

    def test_page_build(self):
        """A page with URL and elements builds; name stays optional."""
        page = PartialPage(url="http://x", elements=[]).build()
        assert page.url == "http://x"
        assert page.name is None
        assert page.elements == ()

    def test_page_missing_url(self):
        """Building a page without URL fails."""
        with pytest.raises(IncompleteRecordError) as exc_info:
            PartialPage(elements=[]).build()
        assert exc_info.value.record == "Page"

    def test_page_missing_elements(self):
        """Building a page without elements fails."""
        with pytest.raises(IncompleteRecordError):
            PartialPage(url="http://x").build()

    def test_token_repr(self):
        """Token repr shows kind and payload."""
        assert repr(Token.of_type(TokenType.PAGE)) == "Token(page)"
        assert repr(Token.selector("a", Quantifier.many())) == "Token(selector, 'a', many)"
