"""Word boundaries: the rules that decide where one word ends and the next begins.

A boundary either splits on a literal delimiter, consuming it, or splits on a
transition between two (or three) neighbouring characters without consuming
anything. The built-in boundaries form the closed `Boundary` enum; a literal
delimiter of the caller's choosing is a `DelimiterBoundary`, created with
`Boundary.from_delim`.

Character classes are plain Unicode case folding: a character is uppercase when
`str.isupper` holds, lowercase when `str.islower` holds and a digit when
`str.isdecimal` holds.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Boundary',
    'DelimiterBoundary',
    # Constants
    'DEFAULT_BOUNDARIES',
    'TRANSITION_PRECEDENCE',
    # Functions
    'is_upper',
    'is_lower',
    'is_digit',
    'list_from'
]

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from wordcase.helpers import member_from_name


def is_upper(char: str) -> bool:
    return char.isupper()

def is_lower(char: str) -> bool:
    return char.islower()

def is_digit(char: str) -> bool:
    return char.isdecimal()


class Boundary(Enum):
    """
    Built-in word boundaries.

    Member values are the integer codes exchanged with host bindings (see
    `wordcase.codes`); changing them is a breaking change.

    Example:
        >>> from wordcase.segmentation import segment
        >>> segment('HTTPServer', [Boundary.ACRONYM])
        ['HTTP', 'Server']
        >>> segment('my-var', [Boundary.HYPHEN])
        ['my', 'var']
    """
    HYPHEN = 0
    """Splits on `-`, consuming it."""
    UNDERSCORE = 1
    """Splits on `_`, consuming it."""
    SPACE = 2
    """Splits on a space, consuming it."""
    UPPER_LOWER = 3
    """Splits where an uppercase letter is followed by a lowercase letter. Not a default."""
    LOWER_UPPER = 4
    """Splits where a lowercase letter is followed by an uppercase letter."""
    DIGIT_UPPER = 5
    """Splits where a digit is followed by an uppercase letter."""
    UPPER_DIGIT = 6
    """Splits where an uppercase letter is followed by a digit."""
    DIGIT_LOWER = 7
    """Splits where a digit is followed by a lowercase letter."""
    LOWER_DIGIT = 8
    """Splits where a lowercase letter is followed by a digit."""
    ACRONYM = 9
    """Splits two uppercase letters that are followed by a lowercase letter.

    The cut falls between the two uppercase letters, so 'HTTPServer' becomes
    'HTTP' and 'Server'."""

    @property
    def delim(self) -> Optional[str]:
        """Literal text consumed by this boundary, or None for transition boundaries."""
        return DELIMITERS.get(self)

    @property
    def is_delimiter(self) -> bool:
        return self in DELIMITERS

    def detect_two(self, first: str, second: str) -> bool:
        """
        Check whether this boundary fires between two neighbouring characters.

        Example:
            >>> Boundary.LOWER_UPPER.detect_two('o', 'B')
            True
            >>> Boundary.LOWER_UPPER.detect_two('O', 'B')
            False
        """
        rule = PAIR_RULES.get(self)
        return rule is not None and rule[0](first) and rule[1](second)

    def detect_three(self, first: str, second: str, third: str) -> bool:
        """
        Check whether this boundary fires inside a run of three characters.

        Only `Boundary.ACRONYM` looks at three characters; the split it
        reports lies between `first` and `second`.
        """
        return (
            self is Boundary.ACRONYM
            and is_upper(first)
            and is_upper(second)
            and is_lower(third)
        )

    @classmethod
    def from_name(cls, name: str) -> 'Boundary':
        return member_from_name(cls, name)

    @staticmethod
    def from_delim(delim: str) -> 'DelimiterBoundary':
        """
        Create a boundary that splits on an arbitrary literal delimiter.

        Example:
            >>> from wordcase.segmentation import segment
            >>> segment('pkg::mod::item', [Boundary.from_delim('::')])
            ['pkg', 'mod', 'item']
        """
        return DelimiterBoundary(delim)

    @classmethod
    def all(cls) -> FrozenSet['Boundary']:
        """Every built-in boundary, including the seldom useful `UPPER_LOWER`."""
        return frozenset(cls)

    @classmethod
    def defaults(cls) -> FrozenSet['Boundary']:
        """Every built-in boundary except `UPPER_LOWER`."""
        return frozenset(cls) - {cls.UPPER_LOWER}

    @classmethod
    def delims(cls) -> FrozenSet['Boundary']:
        """`HYPHEN`, `UNDERSCORE` and `SPACE`."""
        return frozenset(DELIMITERS)

    @classmethod
    def digits(cls) -> FrozenSet['Boundary']:
        """The four boundaries involving a digit."""
        return cls.letter_digit() | cls.digit_letter()

    @classmethod
    def letter_digit(cls) -> FrozenSet['Boundary']:
        return frozenset({cls.UPPER_DIGIT, cls.LOWER_DIGIT})

    @classmethod
    def digit_letter(cls) -> FrozenSet['Boundary']:
        return frozenset({cls.DIGIT_UPPER, cls.DIGIT_LOWER})


@dataclass(frozen=True)
class DelimiterBoundary:
    """
    A boundary that splits on, and consumes, a caller-supplied literal string.

    Args:
        delim: Non-empty delimiter text; may be longer than one character

    Delimiter boundaries have no integer code and cannot be sent through
    `wordcase.api`.
    """
    delim: str

    def __post_init__(self):
        if not isinstance(self.delim, str) or not self.delim:
            raise ValueError(f"delimiter must be a non-empty string, got {self.delim!r}")

    @property
    def is_delimiter(self) -> bool:
        return True

    def detect_two(self, first: str, second: str) -> bool:
        return False

    def detect_three(self, first: str, second: str, third: str) -> bool:
        return False


AnyBoundary = Union[Boundary, DelimiterBoundary]

DELIMITERS: Dict[Boundary, str] = {
    Boundary.HYPHEN: '-',
    Boundary.UNDERSCORE: '_',
    Boundary.SPACE: ' '
}
"""Literal text consumed by each built-in delimiter boundary."""

PAIR_RULES: Dict[Boundary, Tuple[Callable[[str], bool], Callable[[str], bool]]] = {
    Boundary.UPPER_LOWER: (is_upper, is_lower),
    Boundary.LOWER_UPPER: (is_lower, is_upper),
    Boundary.DIGIT_UPPER: (is_digit, is_upper),
    Boundary.UPPER_DIGIT: (is_upper, is_digit),
    Boundary.DIGIT_LOWER: (is_digit, is_lower),
    Boundary.LOWER_DIGIT: (is_lower, is_digit)
}
"""Character class tests for the left and right side of each two-character boundary."""

TRANSITION_PRECEDENCE: Tuple[Boundary, ...] = (
    Boundary.ACRONYM,
    Boundary.LOWER_UPPER,
    Boundary.UPPER_LOWER,
    Boundary.DIGIT_UPPER,
    Boundary.UPPER_DIGIT,
    Boundary.DIGIT_LOWER,
    Boundary.LOWER_DIGIT
)
"""Order in which transition boundaries are tested at a single position.

Literal delimiters are always tested before any of these.

Used in `wordcase.segmentation.segment`."""

DEFAULT_BOUNDARIES: FrozenSet[Boundary] = Boundary.defaults()
"""Boundaries used by a fresh `wordcase.converter.Converter`."""


def list_from(text: str) -> List[Boundary]:
    """
    List the built-in boundaries whose trigger occurs somewhere in a string.

    `UPPER_LOWER` is not reported for an uppercase/lowercase pair that closes an
    acronym (as the 'Se' in 'HTTPServer'), since `ACRONYM` already describes it.
    Use a character that is not a letter, digit or delimiter, such as a colon,
    to keep examples from overlapping.

    Args:
        text: Any string

    Returns:
        Boundaries in code order

    Example:
        >>> list_from('foo-bar_baz')
        [<Boundary.HYPHEN: 0>, <Boundary.UNDERSCORE: 1>]
        >>> list_from('aB:6A:_')
        [<Boundary.UNDERSCORE: 1>, <Boundary.LOWER_UPPER: 4>, <Boundary.DIGIT_UPPER: 5>]
    """
    found = set()
    for i, char in enumerate(text):
        found.update(b for b, delim in DELIMITERS.items() if char == delim)
        if i == 0:
            continue
        before = text[i - 1]
        found.update(
            b for b in PAIR_RULES
            if b is not Boundary.UPPER_LOWER and b.detect_two(before, char)
        )
        closes_acronym = i >= 2 and Boundary.ACRONYM.detect_three(text[i - 2], before, char)
        if closes_acronym:
            found.add(Boundary.ACRONYM)
        elif Boundary.UPPER_LOWER.detect_two(before, char):
            found.add(Boundary.UPPER_LOWER)
    return [boundary for boundary in Boundary if boundary in found]


def boundary_set(boundaries: Iterable[AnyBoundary]) -> FrozenSet[AnyBoundary]:
    """
    Freeze an iterable of boundaries, rejecting anything that is not one.

    @private
    """
    frozen = frozenset(boundaries)
    for boundary in frozen:
        if not isinstance(boundary, (Boundary, DelimiterBoundary)):
            raise TypeError(f"expected a Boundary, got {boundary!r}")
    return frozen
