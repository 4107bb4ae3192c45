"""Element quantifiers"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class QuantifierKind(Enum):
    SINGLE = "single"
    MANY = "many"
    FIXED = "fixed"
    ANY = "any"


@dataclass(frozen=True)
class Quantifier:
    """
    How many matches an element expects.

    ``ANY`` is a parse-time wildcard used only to describe "a selector with
    whatever quantifier"; it is never stored on a finished element.
    """
    kind: QuantifierKind
    count: Optional[int] = None

    def __post_init__(self):
        if self.kind is QuantifierKind.FIXED:
            if self.count is None or self.count < 0:
                raise ValueError(f"Fixed quantifier needs a count >= 0, got {self.count}")
        elif self.count is not None:
            raise ValueError(f"{self.kind.value} quantifier takes no count")

    @classmethod
    def single(cls) -> "Quantifier":
        return cls(QuantifierKind.SINGLE)

    @classmethod
    def many(cls) -> "Quantifier":
        return cls(QuantifierKind.MANY)

    @classmethod
    def fixed(cls, count: int) -> "Quantifier":
        return cls(QuantifierKind.FIXED, count)

    @classmethod
    def any(cls) -> "Quantifier":
        return cls(QuantifierKind.ANY)

    @property
    def is_wildcard(self) -> bool:
        return self.kind is QuantifierKind.ANY

    def __str__(self) -> str:
        if self.kind is QuantifierKind.FIXED:
            return f"fixed({self.count})"
        return self.kind.value
