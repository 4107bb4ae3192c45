"""
Selector classifier

Turns an element's raw selector text into a semantic selector and defines how
many matches each quantifier keeps:

    div.card      -> CombinedSelector("div", ("class", "card"))
    .card         -> AttributeSelector("class", "card")
    div.          -> TagSelector("div")
    #main         -> AttributeSelector("id", "main")
    a[href=foo]   -> CombinedSelector("a", ("href", "foo"))
    [href=foo]    -> CombinedSelector("", ("href", "foo"))   # any tag
    h1            -> TagSelector("h1")
"""

import logging
from typing import List, Sequence, TypeVar

from pdml.errors import MalformedSelectorError
from pdml.types.quantifier import Quantifier, QuantifierKind
from pdml.types.semantic_selector import (
    AttributeSelector,
    CombinedSelector,
    SemanticSelector,
    TagSelector,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Shorthand prefix -> attribute name, in priority order
SHORTHAND_ATTRIBUTES = (
    (".", "class"),
    ("#", "id"),
)


def _classify_shorthand(selector: str, separator: str, attribute: str) -> SemanticSelector:
    position = selector.index(separator)
    if position == 0:
        return AttributeSelector(attribute, selector[1:])
    if position == len(selector) - 1:
        return TagSelector(selector[:-1])
    parts = selector.split(separator)
    if len(parts) != 2:
        raise MalformedSelectorError(selector, f"expected one '{separator}', found {len(parts) - 1}")
    return CombinedSelector(parts[0], (attribute, parts[1]))


def _classify_bracket(selector: str) -> SemanticSelector:
    parts = selector.split("[")
    if len(parts) != 2:
        raise MalformedSelectorError(selector, f"expected one '[', found {len(parts) - 1}")
    tag, rest = parts
    if not rest.endswith("]"):
        raise MalformedSelectorError(selector, "missing closing ']'")
    assignment = rest[:-1].split("=")
    if len(assignment) != 2:
        raise MalformedSelectorError(selector, "attribute must have the form name=value")
    name, value = assignment
    return CombinedSelector(tag, (name, value))


def classify_selector(selector: str) -> SemanticSelector:
    for separator, attribute in SHORTHAND_ATTRIBUTES:
        if separator in selector:
            return _classify_shorthand(selector, separator, attribute)
    if "[" in selector:
        return _classify_bracket(selector)
    return TagSelector(selector)


def apply_quantifier(quantifier: Quantifier, matches: Sequence[T]) -> List[T]:
    """
    Keep the matches a quantifier asks for, in document order.

    single   -> first match only
    fixed(n) -> first n matches
    many     -> all matches (the parse-time wildcard behaves the same)
    """
    if quantifier.kind is QuantifierKind.SINGLE:
        return list(matches[:1])
    if quantifier.kind is QuantifierKind.FIXED:
        if len(matches) < quantifier.count:
            logger.debug(f"Expected {quantifier.count} matches, found {len(matches)}")
        return list(matches[:quantifier.count])
    return list(matches)
