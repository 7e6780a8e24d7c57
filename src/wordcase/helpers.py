"""Small helpers shared by the enum modules.

@private
"""

__docformat__ = 'google'

import re
from enum import Enum
from functools import cache
from typing import Dict, Type, TypeVar

from wordcase.errors import InvalidEnumName

E = TypeVar('E', bound=Enum)

NAME_SEPARATORS_PATTERN: re.Pattern = re.compile(r'[\s\-_]+')
"""Matches runs of separators allowed between the words of a member name."""


def normalize_name(name: str) -> str:
    """
    Reduce a symbolic name to the form used as enum member names.

    Example:
        >>> normalize_name('lower-upper')
        'LOWER_UPPER'
        >>> normalize_name(' Screaming snake ')
        'SCREAMING_SNAKE'
    """
    return NAME_SEPARATORS_PATTERN.sub('_', name.strip()).upper()


@cache
def _members_by_compact_name(enum: Type[E]) -> Dict[str, E]:
    return {member.name.replace('_', ''): member for member in enum}


def member_from_name(enum: Type[E], name: str) -> E:
    """
    Look up an enum member by a loosely formatted name.

    Separators are optional, so 'pseudoRandom', 'pseudo-random' and
    'PSEUDO_RANDOM' all resolve to the same member.

    Raises:
        InvalidEnumName: if `name` is not a string or matches no member
    """
    if not isinstance(name, str):
        raise InvalidEnumName(name, enum)
    normalized = normalize_name(name)
    if normalized in enum.__members__:
        return enum[normalized]
    member = _members_by_compact_name(enum).get(normalized.replace('_', ''))
    if member is None:
        raise InvalidEnumName(name, enum)
    return member
