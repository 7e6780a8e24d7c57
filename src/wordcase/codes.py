"""Integer codes for cases, patterns and boundaries.

Host bindings exchange enum members as small integers. The mapping is fixed and
versioned: changing an existing code is a breaking change, while appending a
new one is not. Decoding goes through the explicit tables below and nothing
else, so a value outside a table is rejected with
`wordcase.errors.InvalidEnumCode` instead of being reinterpreted.
"""

__docformat__ = 'google'

__all__ = [
    # Tables
    'CASE_CODES',
    'PATTERN_CODES',
    'BOUNDARY_CODES',
    # Functions
    'decode_case',
    'decode_pattern',
    'decode_boundary',
    'decode_boundaries',
    'encode_boundaries'
]

import logging
from enum import Enum
from numbers import Integral
from typing import Any, Dict, Iterable, List, Type, TypeVar

from wordcase.boundaries import Boundary
from wordcase.cases import Case
from wordcase.errors import InvalidEnumCode
from wordcase.patterns import Pattern

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Enum)

CASE_CODES: Dict[int, Case] = {
    0: Case.UPPER,
    1: Case.LOWER,
    2: Case.TITLE,
    3: Case.TOGGLE,
    4: Case.CAMEL,
    5: Case.PASCAL,
    6: Case.UPPER_CAMEL,
    7: Case.SNAKE,
    8: Case.UPPER_SNAKE,
    9: Case.SCREAMING_SNAKE,
    10: Case.KEBAB,
    11: Case.COBOL,
    12: Case.UPPER_KEBAB,
    13: Case.TRAIN,
    14: Case.FLAT,
    15: Case.UPPER_FLAT,
    16: Case.ALTERNATING,
    17: Case.RANDOM,
    18: Case.PSEUDO_RANDOM,
    19: Case.SENTENCE
}
"""Every valid `Case` code."""

PATTERN_CODES: Dict[int, Pattern] = {
    0: Pattern.LOWERCASE,
    1: Pattern.UPPERCASE,
    2: Pattern.CAPITAL,
    3: Pattern.SENTENCE,
    4: Pattern.CAMEL,
    5: Pattern.ALTERNATING,
    6: Pattern.TOGGLE,
    7: Pattern.RANDOM,
    8: Pattern.PSEUDO_RANDOM
}
"""Every valid `Pattern` code."""

BOUNDARY_CODES: Dict[int, Boundary] = {
    0: Boundary.HYPHEN,
    1: Boundary.UNDERSCORE,
    2: Boundary.SPACE,
    3: Boundary.UPPER_LOWER,
    4: Boundary.LOWER_UPPER,
    5: Boundary.DIGIT_UPPER,
    6: Boundary.UPPER_DIGIT,
    7: Boundary.DIGIT_LOWER,
    8: Boundary.LOWER_DIGIT,
    9: Boundary.ACRONYM
}
"""Every valid `Boundary` code."""


def _decode(value: Any, table: Dict[int, E], enum: Type[E], argument: str) -> E:
    if isinstance(value, enum):
        return value
    # bool is an Integral, but True is not a case
    if isinstance(value, Integral) and not isinstance(value, bool):
        member = table.get(int(value))
        if member is not None:
            return member
    logger.debug("Rejected %s code %r for %s", enum.__name__, value, argument)
    raise InvalidEnumCode(argument, value, enum)


def decode_case(value: Any, argument: str = 'case') -> Case:
    """
    Decode a case code.

    Args:
        value: Integer code, or a `Case` which is returned unchanged
        argument: Argument name reported if the code is invalid

    Raises:
        InvalidEnumCode: `value` is not a known code

    Example:
        >>> decode_case(7)
        <Case.SNAKE: 7>
        >>> decode_case(77, 'target_case')
        Traceback (most recent call last):
        ...
        wordcase.errors.InvalidEnumCode: target_case: 77 is not a valid Case code (0-19)
    """
    return _decode(value, CASE_CODES, Case, argument)


def decode_pattern(value: Any, argument: str = 'pattern') -> Pattern:
    return _decode(value, PATTERN_CODES, Pattern, argument)


def decode_boundary(value: Any, argument: str = 'boundary') -> Boundary:
    return _decode(value, BOUNDARY_CODES, Boundary, argument)


def decode_boundaries(values: Iterable[Any], argument: str = 'boundaries') -> List[Boundary]:
    """
    Decode a list of boundary codes, reporting the position of a bad one.

    Raises:
        InvalidEnumCode: a code is unknown, e.g. 'boundaries[2]: 42 is not a valid Boundary code (0-9)'
        TypeError: `values` is a string or not iterable
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError(f"{argument} must be a list of Boundary codes, got {values!r}")
    return [decode_boundary(value, f"{argument}[{i}]") for i, value in enumerate(values)]


def encode_boundaries(boundaries: Iterable[Boundary]) -> List[int]:
    """Encode boundaries as their codes, in code order."""
    return sorted(boundary.value for boundary in boundaries)
