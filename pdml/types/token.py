"""PDML token"""

from dataclasses import dataclass
from typing import Optional

from pdml.types.quantifier import Quantifier
from pdml.types.token_type import TokenType


@dataclass(frozen=True)
class Token:
    """
    One lexical token.

    ``==`` compares kind and payload. Grammar checks use :func:`same_kind`,
    which ignores the payload, so a template such as ``Token.url("")``
    stands for every URL literal.
    """
    type: TokenType
    text: Optional[str] = None
    quantifier: Optional[Quantifier] = None

    @classmethod
    def of_type(cls, token_type: TokenType) -> "Token":
        return cls(token_type)

    @classmethod
    def string(cls, text: str) -> "Token":
        return cls(TokenType.STRING, text)

    @classmethod
    def url(cls, text: str) -> "Token":
        return cls(TokenType.URL, text)

    @classmethod
    def identifier(cls, text: str) -> "Token":
        return cls(TokenType.IDENTIFIER, text)

    @classmethod
    def unknown(cls, char: str) -> "Token":
        return cls(TokenType.UNKNOWN, char)

    @classmethod
    def selector(cls, text: str, quantifier: Quantifier) -> "Token":
        return cls(TokenType.SELECTOR, text, quantifier)

    def same_kind(self, other: "Token") -> bool:
        return same_kind(self, other)

    def __repr__(self) -> str:
        if self.type is TokenType.SELECTOR:
            return f"Token({self.type.value}, {self.text!r}, {self.quantifier})"
        if self.text is not None:
            return f"Token({self.type.value}, {self.text!r})"
        return f"Token({self.type.value})"


def same_kind(a: Token, b: Token) -> bool:
    """Shape equality: true iff both tokens have the same kind."""
    return a.type is b.type


# Templates for shape checks
ASSIGNMENT = Token.of_type(TokenType.ASSIGNMENT)
BLOCK_OPEN = Token.of_type(TokenType.BLOCK_OPEN)
BLOCK_CLOSE = Token.of_type(TokenType.BLOCK_CLOSE)
EOF = Token.of_type(TokenType.EOF)
WHITESPACE = Token.of_type(TokenType.WHITESPACE)
PAGE = Token.of_type(TokenType.PAGE)
ANY_STRING = Token.string("")
ANY_URL = Token.url("")
ANY_IDENTIFIER = Token.identifier("")
ANY_SELECTOR = Token.selector("", Quantifier.any())
