"""Chained filter builder for table scans.

    Condition().where("tag").not_().eq(Tag.INACTIVE).where("tag").not_().eq(Tag.CUSTOM)

Every completed ``where(...)...eq(...)`` clause is ANDed with the previous
ones. ``build()`` compiles the chain to a boto3 condition usable as a
``FilterExpression``.
"""

from enum import Enum
from typing import Any

from boto3.dynamodb.conditions import Attr, ConditionBase


class Condition:
    def __init__(self) -> None:
        self._clauses: list[ConditionBase] = []
        self._attribute: str | None = None
        self._negate = False

    def where(self, attribute: str) -> "Condition":
        if self._attribute is not None:
            raise ValueError(f"where({attribute!r}) called before completing clause on {self._attribute!r}")
        self._attribute = attribute
        self._negate = False
        return self

    def not_(self) -> "Condition":
        if self._attribute is None:
            raise ValueError("not_() must follow where()")
        self._negate = not self._negate
        return self

    def eq(self, value: Any) -> "Condition":
        if self._attribute is None:
            raise ValueError("eq() must follow where()")
        if isinstance(value, Enum):
            value = value.value
        clause = Attr(self._attribute).ne(value) if self._negate else Attr(self._attribute).eq(value)
        self._clauses.append(clause)
        self._attribute = None
        self._negate = False
        return self

    @property
    def is_empty(self) -> bool:
        return not self._clauses

    def build(self) -> ConditionBase | None:
        if self._attribute is not None:
            raise ValueError(f"incomplete clause on {self._attribute!r}")
        if not self._clauses:
            return None
        expression = self._clauses[0]
        for clause in self._clauses[1:]:
            expression = expression & clause
        return expression
