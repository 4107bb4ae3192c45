"""
PDML exceptions

Every layer raises its own family and wraps the layer below it, so a failed
parse surfaces as a single error that still carries the original cause.
"""

from typing import Optional, Sequence


class PDMLError(Exception):
    """Base exception for PDML"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


# =============================================================================
# READER
# =============================================================================

class ReaderError(PDMLError):
    """Error reading characters from the source"""
    pass


class EndOfInput(ReaderError):
    """Reader has no characters left"""

    def __init__(self, message: str = "Reader reached end of input"):
        super().__init__(message)


class ReaderIOError(ReaderError):
    """Underlying stream failed"""
    pass


class ReadSizeError(ReaderError):
    """Fewer characters were available than requested"""

    def __init__(self, expected: int, read: int):
        super().__init__(f"Read wrong amount of characters. Expected {expected}, read {read}")
        self.expected = expected
        self.read = read


# =============================================================================
# LEXER
# =============================================================================

class LexerError(PDMLError):
    """Error while turning characters into tokens"""
    pass


class LexerReaderError(LexerError):
    """Reader failed while the lexer was pulling characters"""

    def __init__(self, cause: ReaderError):
        super().__init__(f"An error occurred while calling the underlying reader: {cause}", cause)


class UnterminatedTokenError(LexerError):
    """Input ended inside a literal, identifier or selector"""

    def __init__(self, token_name: str, cause: Optional[Exception] = None):
        super().__init__(f"Unexpected end of input inside {token_name}", cause)
        self.token_name = token_name


class UnmatchedTokenError(LexerError):
    """The opening delimiter of a token was not found"""

    def __init__(self, observed):
        super().__init__(f"Unmatched token type: {observed!r}")
        self.observed = observed


class InvalidIdentifierError(LexerError):
    """`$` was not followed by a name character"""
    pass


class InvalidQuantifierError(LexerError):
    """Quantifier after `*` is neither empty nor an unsigned integer"""

    def __init__(self, quantifier: str):
        super().__init__(f"Invalid quantifier encountered: {quantifier!r}")
        self.quantifier = quantifier


# =============================================================================
# PARSER
# =============================================================================

class ParseError(PDMLError):
    """Error while building the page tree"""
    pass


class SourceReadError(ParseError):
    """Source could not be opened or read"""

    def __init__(self, cause: ReaderError):
        super().__init__(f"Error while reading the source: {cause}", cause)


class TokenizeError(ParseError):
    """Source could not be tokenized"""

    def __init__(self, cause: LexerError):
        super().__init__(f"Error while processing the source: {cause}", cause)


class UnexpectedTokenError(ParseError):
    """A token did not have the expected shape"""

    def __init__(self, expected, got):
        super().__init__(f"Unexpected token: expected {expected.type.value}, got {got!r}")
        self.expected = expected
        self.got = got


class UnexpectedTokenManyError(ParseError):
    """A token matched none of the acceptable shapes"""

    def __init__(self, expected: Sequence, got):
        names = ", ".join(token.type.value for token in expected)
        super().__init__(f"Unexpected token: expected either of the following [{names}], got {got!r}")
        self.expected = list(expected)
        self.got = got


class EmptyValueError(ParseError):
    """A page URL or an element selector is empty"""
    pass


class NestingTooDeepError(ParseError):
    """Blocks are nested deeper than the interpreter stack allows"""

    def __init__(self, cause: Optional[Exception] = None):
        super().__init__("Element blocks are nested too deeply", cause)


# =============================================================================
# SELECTOR
# =============================================================================

class SelectorError(PDMLError):
    """Error classifying selector text"""
    pass


class MalformedSelectorError(SelectorError):
    """Selector text does not split into the expected parts"""

    def __init__(self, selector: str, reason: str):
        super().__init__(f"Malformed selector {selector!r}: {reason}")
        self.selector = selector
        self.reason = reason


# =============================================================================
# BUILDERS
# =============================================================================

class IncompleteRecordError(AssertionError):
    """A builder was finalized with a required field unset"""

    def __init__(self, record: str, field_name: str):
        super().__init__(f"{record} cannot be built: field '{field_name}' is not set")
        self.record = record
        self.field_name = field_name


_LAYERS = (
    (ReaderError, "reader"),
    (LexerError, "lexer"),
    (ParseError, "parser"),
    (SelectorError, "selector"),
)


def error_layer(error: Exception) -> str:
    """Name of the layer an error was raised in ("unknown" for foreign errors)."""
    for error_type, layer in _LAYERS:
        if isinstance(error, error_type):
            return layer
    return "unknown"


def describe_error(error: Exception) -> str:
    """
    Format error for logging.

    Follows the cause chain so the innermost failure is visible, e.g.
    ``[parser] Error while processing the source: ... <- [reader] Reader reached end of input``.
    """
    parts = [f"[{error_layer(error)}] {error}"]
    seen = {id(error)}
    cause = getattr(error, "cause", None) or error.__cause__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        parts.append(f"[{error_layer(cause)}] {cause}")
        cause = getattr(cause, "cause", None) or cause.__cause__
    return " <- ".join(parts)
