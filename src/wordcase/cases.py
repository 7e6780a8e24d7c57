"""Named case styles.

Every `Case` is a fixed triple of boundaries, pattern and delimiter. The
boundaries say how a string *in* that case is split into words; the pattern and
delimiter say how words are put back together *into* that case. The triples are
read from the packaged table `wordcase/data/cases.yaml` on first use.

| Cases | Boundaries | Pattern | Delimiter |
| --- | --- | --- | --- |
| UPPER, LOWER, TITLE, SENTENCE, TOGGLE, ALTERNATING, RANDOM, PSEUDO_RANDOM | SPACE | (per case) | space |
| SNAKE, UPPER_SNAKE, SCREAMING_SNAKE | UNDERSCORE | LOWERCASE / UPPERCASE | `_` |
| KEBAB, COBOL, UPPER_KEBAB, TRAIN | HYPHEN | LOWERCASE / UPPERCASE / CAPITAL | `-` |
| CAMEL, PASCAL, UPPER_CAMEL | LOWER_UPPER, ACRONYM, digit boundaries | CAMEL / CAPITAL | none |
| FLAT, UPPER_FLAT | none | LOWERCASE / UPPERCASE | none |
"""

__docformat__ = 'google'

__all__ = [
    'Case'
]

import logging
from enum import Enum
from functools import cache
from typing import Dict, FrozenSet, List

from wordcase.boundaries import Boundary
from wordcase.errors import CaseTableError
from wordcase.helpers import member_from_name
from wordcase.lookups import CasePreset, case_table
from wordcase.patterns import Pattern

logger = logging.getLogger(__name__)


class Case(Enum):
    """
    Word-case styles.

    Member values are the integer codes exchanged with host bindings (see
    `wordcase.codes`). Aliases such as `UPPER_CAMEL` for `PASCAL` are distinct
    members with their own codes.

    Example:
        >>> Case.SCREAMING_SNAKE.pattern
        <Pattern.UPPERCASE: 1>
        >>> Case.SCREAMING_SNAKE.delim
        '_'
        >>> sorted(b.name for b in Case.KEBAB.boundaries)
        ['HYPHEN']
    """
    UPPER = 0
    LOWER = 1
    TITLE = 2
    TOGGLE = 3
    CAMEL = 4
    PASCAL = 5
    UPPER_CAMEL = 6
    SNAKE = 7
    UPPER_SNAKE = 8
    SCREAMING_SNAKE = 9
    KEBAB = 10
    COBOL = 11
    UPPER_KEBAB = 12
    TRAIN = 13
    FLAT = 14
    UPPER_FLAT = 15
    ALTERNATING = 16
    RANDOM = 17
    PSEUDO_RANDOM = 18
    SENTENCE = 19

    @property
    def preset(self) -> CasePreset:
        return _presets()[self]

    @property
    def pattern(self) -> Pattern:
        """Pattern applied when converting to this case."""
        return self.preset.pattern

    @property
    def delim(self) -> str:
        """Delimiter words are joined with when converting to this case."""
        return self.preset.delim

    @property
    def boundaries(self) -> FrozenSet[Boundary]:
        """Boundaries used to split a string that is already in this case."""
        return self.preset.boundaries

    @property
    def is_random(self) -> bool:
        return self.pattern.is_random

    @classmethod
    def from_name(cls, name: str) -> 'Case':
        """
        Example:
            >>> Case.from_name('screaming-snake')
            <Case.SCREAMING_SNAKE: 9>
            >>> Case.from_name('upper camel')
            <Case.UPPER_CAMEL: 6>
        """
        return member_from_name(cls, name)

    @classmethod
    def all_cases(cls) -> List['Case']:
        return list(cls)

    @classmethod
    def random_cases(cls) -> List['Case']:
        """`RANDOM` and `PSEUDO_RANDOM`."""
        return [case for case in cls if case.is_random]

    @classmethod
    def deterministic_cases(cls) -> List['Case']:
        """Every case whose conversion does not depend on randomness."""
        return [case for case in cls if not case.is_random]


@cache
def _presets() -> Dict[Case, CasePreset]:
    table = case_table()
    known = {case.name for case in Case}
    unknown = set(table.names) - known
    missing = known - set(table.names)
    if unknown or missing:
        raise CaseTableError(
            f"case table does not match Case: missing {sorted(missing)}, unknown {sorted(unknown)}"
        )
    logger.debug("Loaded %d case presets", len(table.names))
    return {case: table.preset(case.name) for case in Case}
