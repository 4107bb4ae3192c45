"""Semantic selector variants produced by the selector classifier"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class TagSelector:
    """Match by tag name, e.g. ``h1``"""
    name: str

    def to_css(self) -> str:
        return self.name


@dataclass(frozen=True)
class AttributeSelector:
    """Match any tag by one attribute, e.g. ``.card`` or ``#main``"""
    name: str
    value: str

    def to_css(self) -> str:
        return _attribute_css(self.name, self.value)


@dataclass(frozen=True)
class CombinedSelector:
    """
    Match tag and attribute together, e.g. ``div.card`` or ``a[href=foo]``.

    An empty ``tag`` means any tag (``[href=foo]``).
    """
    tag: str
    attribute: Tuple[str, str]

    def to_css(self) -> str:
        name, value = self.attribute
        return self.tag + _attribute_css(name, value)


SemanticSelector = Union[TagSelector, AttributeSelector, CombinedSelector]


def _attribute_css(name: str, value: str) -> str:
    if name == "class" and value:
        return f".{value}"
    if name == "id" and value:
        return f"#{value}"
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'[{name}="{escaped}"]'
