"""
Ordered label/value index used to resolve table sizes

Tables in a FAST deck do not end with a terminator. Their row count is a scalar
parameter that appeared earlier in the same file (NTwInpSt for the tower table,
NumFoil for the airfoil list, ...). The scanner records every scalar here and
the table parsers ask for their size by label.
"""

import math
from typing import TYPE_CHECKING, Iterator, List, Tuple

from ..utils.numbers import to_float
from .errors import UnresolvedReference

if TYPE_CHECKING:
    from .models import FastDocument


class LabelIndex:
    """Insertion-ordered (label, value) pairs with case-insensitive lookup"""

    def __init__(self):
        self._labels: List[str] = []
        self._values: List[str] = []

    @classmethod
    def from_document(cls, document: "FastDocument") -> "LabelIndex":
        """Start an index from the records already held by ``document``

        If the document's label and value lists have drifted to different
        lengths, the shorter one is padded with empty strings so new records
        land after the longest of the two.
        """
        index = cls()
        count = max(len(document.labels), len(document.values))
        index._labels = list(document.labels) + [""] * (count - len(document.labels))
        index._values = list(document.values) + [""] * (count - len(document.values))
        return index

    def record(self, label: str, value: str) -> None:
        self._labels.append(label)
        self._values.append(value)

    def find(self, name: str) -> str:
        """Raw value of the first record labelled ``name``

        Raises:
            UnresolvedReference: If no record carries that label
        """
        wanted = name.lower()
        for label, value in zip(self._labels, self._values):
            if label.lower() == wanted:
                return value
        raise UnresolvedReference(name)

    def lookup(self, name: str) -> float:
        """Numeric value of the first record labelled ``name``

        Raises:
            UnresolvedReference: If the label is missing or its value is not a number
        """
        value = self.find(name)
        number = to_float(value)
        if number is None:
            raise UnresolvedReference(name, value)
        return number

    def lookup_count(self, name: str) -> int:
        """Like lookup, but the value must be a non-negative whole number"""
        number = self.lookup(name)
        if not math.isfinite(number) or number < 0 or number != int(number):
            raise UnresolvedReference(name, self.find(name))
        return int(number)

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    @property
    def values(self) -> List[str]:
        return list(self._values)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(zip(self._labels, self._values))

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, name: str) -> bool:
        wanted = name.lower()
        return any(label.lower() == wanted for label in self._labels)
