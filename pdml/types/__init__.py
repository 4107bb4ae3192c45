from pdml.types.token_type import TokenType
from pdml.types.quantifier import Quantifier, QuantifierKind
from pdml.types.token import Token, same_kind
from pdml.types.element import Element, PartialElement
from pdml.types.page import Page, PartialPage
from pdml.types.semantic_selector import (
    AttributeSelector,
    CombinedSelector,
    SemanticSelector,
    TagSelector,
)

__all__ = [
    'TokenType',
    'Quantifier',
    'QuantifierKind',
    'Token',
    'same_kind',
    'Element',
    'PartialElement',
    'Page',
    'PartialPage',
    'AttributeSelector',
    'CombinedSelector',
    'SemanticSelector',
    'TagSelector',
]
