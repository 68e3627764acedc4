# business rules.
# four independent pure functions (no i/o, no shared state) plus a parser that turns
# raw json payloads into the small, typed value objects the aggregation works on


from __future__ import annotations
from collections import Counter
from string import ascii_letters, ascii_uppercase
from typing import Any, Iterable, List, Optional
from .errors import ArithmeticOverflow, InvalidArgument
from .models import Family, FamilySummary, LetterCount, Person, ages, mean

# results are bounded by a signed 32-bit integer, like the consumers expect
INT32_MAX = 2**31 - 1

def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful limit
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name!r} must be an integer (got {value!r})")
    return value

# even integers in [1, limit), ascending; limit below 1 is a caller error
def even_numbers(exclusive_upper_limit: int) -> List[int]:
    limit = _require_int("exclusive_upper_limit", exclusive_upper_limit)
    if limit < 1:
        raise InvalidArgument(f"'exclusive_upper_limit' must be at least 1 (got {limit})")
    return [n for n in range(1, limit) if n % 2 == 0]

# squares of the multiples of 7 in [1, limit), descending by the original value
def squared_multiples(exclusive_upper_limit: int) -> List[int]:
    limit = _require_int("exclusive_upper_limit", exclusive_upper_limit)
    # unlike even_numbers, an empty range is a legitimate "no results" case
    if limit < 1:
        return []

    # walking the range backwards gives the descending order for free,
    # so the largest square is checked first and huge limits fail fast
    multiples = (n for n in range(limit - 1, 0, -1) if n % 7 == 0)
    squares: List[int] = []
    for n in multiples:
        square = n * n
        if square > INT32_MAX:
            raise ArithmeticOverflow(f"{n}**2 = {square} exceeds the 32-bit limit {INT32_MAX}")
        squares.append(square)
    return squares

# one summary per family, in input order
def family_statistics(families: Optional[Iterable[Family]]) -> List[FamilySummary]:
    if families is None:
        raise InvalidArgument("'families' must not be None")

    summaries: List[FamilySummary] = []
    for family in families:
        values = ages(family)
        summaries.append(FamilySummary(
            family_id=family.id,
            number_of_family_members=len(values),
            average_age=mean(values),
        ))
    return summaries

# case-insensitive counts of the latin letters A-Z, alphabetical, zero counts omitted
def letter_frequency(text: Optional[str]) -> List[LetterCount]:
    if text is None:
        raise InvalidArgument("'text' must not be None")
    if not isinstance(text, str):
        raise InvalidArgument(f"'text' must be a string (got {type(text).__name__})")

    # filter before upper-casing: str.upper() expands some non-latin characters (ß -> SS)
    counts = Counter(c.upper() for c in text if c in ascii_letters)
    return [LetterCount(letter, counts[letter]) for letter in ascii_uppercase if counts[letter] > 0]

def _field(item: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in item:
            return item[key]
    return default

# transform a raw json payload into Family value objects and check shape
def parse_families(data) -> List[Family]:
    # accepted shapes: [{"id": .., "persons": [{"age": ..}]}] or {"families": [...]}
    if isinstance(data, dict) and "families" in data:
        data = data["families"]
    if not isinstance(data, list):
        raise InvalidArgument("Unsupported payload shape for parse_families()")

    families: List[Family] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise InvalidArgument(f"family #{i} is not an object")
        try:
            family_id = _require_int("id", _field(item, "id", "ID"))
        except InvalidArgument as exc:
            raise InvalidArgument(f"family #{i}: {exc}") from exc

        raw_persons = _field(item, "persons", "Persons", default=[])
        if not isinstance(raw_persons, list):
            raise InvalidArgument(f"family {family_id}: 'persons' must be a list")

        persons = []
        for person in raw_persons:
            age = _field(person, "age", "Age") if isinstance(person, dict) else None
            if isinstance(age, bool) or not isinstance(age, int) or age < 0:
                raise InvalidArgument(f"family {family_id}: invalid person age {age!r}")
            persons.append(Person(age=age))
        families.append(Family(id=family_id, persons=tuple(persons)))

    return families
