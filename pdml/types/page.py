"""PDML page and its builder"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pdml.errors import IncompleteRecordError
from pdml.types.element import Element


@dataclass(frozen=True)
class Page:
    """One described web page: URL, optional display name, elements in source order"""
    url: str
    name: Optional[str] = None
    elements: Tuple[Element, ...] = ()


@dataclass
class PartialPage:
    """Page under construction; every field starts unset."""
    url: Optional[str] = None
    name: Optional[str] = None
    elements: Optional[List[Element]] = None

    def build(self) -> Page:
        if self.url is None:
            raise IncompleteRecordError("Page", "url")
        if self.elements is None:
            raise IncompleteRecordError("Page", "elements")
        return Page(url=self.url, name=self.name, elements=tuple(self.elements))
