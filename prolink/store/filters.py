"""
Predicates understood by every ObjectStore implementation.

A store call takes a sequence of filters which are ANDed together.
AnyOf is the only disjunction: it matches when any of its
(column, value) equality terms matches.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple


@dataclass(frozen=True)
class Eq:
    column: str
    value: Any


@dataclass(frozen=True)
class Neq:
    column: str
    value: Any


@dataclass(frozen=True)
class In:
    column: str
    values: Tuple[Any, ...]

    def __init__(self, column: str, values: Iterable[Any]):
        object.__setattr__(self, "column", column)
        # Keep first-seen order, drop duplicates
        object.__setattr__(self, "values", tuple(dict.fromkeys(values)))


@dataclass(frozen=True)
class AnyOf:
    terms: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    def __init__(self, *terms: Tuple[str, Any]):
        object.__setattr__(self, "terms", tuple(terms))


@dataclass(frozen=True)
class Order:
    column: str
    descending: bool = False


def matches(row: dict, flt) -> bool:
    """Evaluate a single filter against a plain row"""
    if isinstance(flt, Eq):
        return row.get(flt.column) == flt.value
    if isinstance(flt, Neq):
        return row.get(flt.column) != flt.value
    if isinstance(flt, In):
        return row.get(flt.column) in flt.values
    if isinstance(flt, AnyOf):
        return any(row.get(column) == value for column, value in flt.terms)
    raise TypeError(f"Unsupported filter: {flt!r}")
