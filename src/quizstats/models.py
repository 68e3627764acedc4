# models and tiny stats helper to keep data shapes explicit and reusable across the app

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from typing import List, NamedTuple, Sequence, Tuple

@dataclass(frozen=True)
class Person:
    # immutable value object, only the age is read by the aggregation
    age: int

@dataclass(frozen=True)
class Family:
    # caller owned record, id uniqueness is not checked here
    id: int
    persons: Tuple[Person, ...] = field(default_factory=tuple)

@dataclass(frozen=True)
class FamilySummary:
    # output value object used by consumers and cli
    family_id: int
    number_of_family_members: int
    average_age: Decimal

class LetterCount(NamedTuple):
    # behaves like a plain (letter, count) pair
    letter: str
    count: int

def mean(values: Sequence[int]) -> Decimal:
    # exact decimal average, 0 on empty input to avoid zero division
    if not values:
        return Decimal(0)
    # fixed precision, the caller's decimal context must not change the result
    with localcontext(Context(prec=28, rounding=ROUND_HALF_EVEN)):
        return Decimal(sum(values)) / Decimal(len(values))

def ages(family: Family) -> List[int]:
    return [p.age for p in family.persons]
