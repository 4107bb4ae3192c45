"""PDML token type enumeration"""

from enum import Enum


class TokenType(Enum):
    """PDML token kinds"""
    STRING = "string"
    URL = "url"
    IDENTIFIER = "identifier"
    ASSIGNMENT = "assignment"
    BLOCK_OPEN = "block_open"
    BLOCK_CLOSE = "block_close"
    EOF = "eof"
    WHITESPACE = "whitespace"
    PAGE = "page"
    UNKNOWN = "unknown"
    SELECTOR = "selector"
