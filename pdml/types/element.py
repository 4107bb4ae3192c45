"""PDML element and its builder"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pdml.errors import IncompleteRecordError
from pdml.types.quantifier import Quantifier


@dataclass(frozen=True)
class Element:
    """One selection rule of a page"""
    selector: str
    quantifier: Quantifier
    identifier: Optional[str] = None
    children: Optional[Tuple["Element", ...]] = None

    def classify(self):
        """Semantic form of the selector text (see ``pdml.selector``)."""
        from pdml.selector.classifier import classify_selector
        return classify_selector(self.selector)


@dataclass
class PartialElement:
    """Element under construction; every field starts unset."""
    identifier: Optional[str] = None
    selector: Optional[str] = None
    quantifier: Optional[Quantifier] = None
    children: Optional[List[Element]] = None

    def build(self) -> Element:
        if self.selector is None:
            raise IncompleteRecordError("Element", "selector")
        if self.quantifier is None:
            raise IncompleteRecordError("Element", "quantifier")
        if self.quantifier.is_wildcard:
            raise IncompleteRecordError("Element", "quantifier (wildcard left in place)")
        return Element(
            selector=self.selector,
            quantifier=self.quantifier,
            identifier=self.identifier,
            children=tuple(self.children) if self.children is not None else None,
        )
