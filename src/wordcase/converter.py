"""The conversion pipeline and its configuration object.

A conversion runs in one direction: the input is segmented with the effective
boundaries, the effective pattern recases the words, and the words are joined
with the effective delimiter.

    * Boundaries: those of the *from* case when one is set, otherwise the
      converter's own boundary set (`wordcase.boundaries.DEFAULT_BOUNDARIES`
      until changed).
    * Pattern: the explicit pattern when set, otherwise the target case's
      pattern; with neither, words keep their casing.
    * Delimiter: the explicit delimiter when set, otherwise the target case's
      delimiter; with neither, words are joined with no delimiter.

A `Converter` is built fresh for each conversion and configured with chained
setters. Distinct converters share no state.
"""

__docformat__ = 'google'

__all__ = [
    'Converter',
    'convert'
]

import logging
import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Set

from wordcase.boundaries import AnyBoundary, DEFAULT_BOUNDARIES, boundary_set
from wordcase.cases import Case
from wordcase.patterns import Pattern, apply
from wordcase.segmentation import segment

logger = logging.getLogger(__name__)


def _require(value, kind, argument):
    if not isinstance(value, kind):
        raise TypeError(f"{argument} must be a {kind.__name__}, got {value!r}")
    return value


@dataclass
class Converter:
    """
    Configurable string converter.

    Example:
        >>> Converter().to_case(Case.SNAKE).convert('fooBarBaz')
        'foo_bar_baz'
        >>> Converter().from_case(Case.KEBAB).to_case(Case.COBOL).convert('toBe_or not-to-BE')
        'TOBE_OR NOT-TO-BE'
        >>> Converter().set_delim('.').set_pattern(Pattern.UPPERCASE).convert('fooBar')
        'FOO.BAR'
    """
    boundaries: Set[AnyBoundary] = field(default_factory=lambda: set(DEFAULT_BOUNDARIES))
    source: Optional[Case] = None
    target: Optional[Case] = None
    pattern: Optional[Pattern] = None
    delim: Optional[str] = None
    rng: Optional[random.Random] = None

    def to_case(self, case: Case) -> 'Converter':
        """Use the pattern and delimiter of `case` unless explicitly overridden."""
        self.target = _require(case, Case, 'case')
        return self

    def from_case(self, case: Case) -> 'Converter':
        """Split with the boundaries of `case` instead of the boundary set."""
        self.source = _require(case, Case, 'case')
        return self

    def remove_from_case(self) -> 'Converter':
        self.source = None
        return self

    def set_boundaries(self, boundaries: Iterable[AnyBoundary]) -> 'Converter':
        self.boundaries = set(boundary_set(boundaries))
        return self

    def add_boundary(self, boundary: AnyBoundary) -> 'Converter':
        return self.add_boundaries([boundary])

    def add_boundaries(self, boundaries: Iterable[AnyBoundary]) -> 'Converter':
        self.boundaries |= boundary_set(boundaries)
        return self

    def remove_boundary(self, boundary: AnyBoundary) -> 'Converter':
        return self.remove_boundaries([boundary])

    def remove_boundaries(self, boundaries: Iterable[AnyBoundary]) -> 'Converter':
        self.boundaries -= boundary_set(boundaries)
        return self

    def set_pattern(self, pattern: Pattern) -> 'Converter':
        self.pattern = _require(pattern, Pattern, 'pattern')
        return self

    def remove_pattern(self) -> 'Converter':
        self.pattern = None
        return self

    def set_delim(self, delim: str) -> 'Converter':
        self.delim = _require(delim, str, 'delim')
        return self

    def remove_delim(self) -> 'Converter':
        self.delim = None
        return self

    def set_random(self, rng: random.Random) -> 'Converter':
        """Draw random patterns from `rng`, e.g. a seeded `random.Random`."""
        self.rng = _require(rng, random.Random, 'rng')
        return self

    @property
    def effective_boundaries(self) -> FrozenSet[AnyBoundary]:
        if self.source is not None:
            return self.source.boundaries
        return frozenset(self.boundaries)

    @property
    def effective_pattern(self) -> Optional[Pattern]:
        if self.pattern is not None:
            return self.pattern
        if self.target is not None:
            return self.target.pattern
        return None

    @property
    def effective_delim(self) -> str:
        if self.delim is not None:
            return self.delim
        if self.target is not None:
            return self.target.delim
        return ''

    def split(self, text: str) -> List[str]:
        """Segment `text` with the effective boundaries, without recasing."""
        return segment(_require(text, str, 'text'), self.effective_boundaries)

    def convert(self, text: str) -> str:
        """
        Run the conversion.

        Args:
            text: Any string; empty input gives an empty result

        Returns:
            Converted string
        """
        words = self.split(text)
        pattern = self.effective_pattern
        logger.debug("Converting %r: words=%s pattern=%s delim=%r", text, words, pattern, self.effective_delim)
        if pattern is not None:
            words = apply(pattern, words, self.rng)
        return self.effective_delim.join(words)


def convert(text: str, case: Case, from_case: Optional[Case] = None) -> str:
    """
    Convert a string to a case in one call.

    Args:
        text: Any string
        case: Target case
        from_case: Split using only the boundaries of this case; defaults to
            `wordcase.boundaries.DEFAULT_BOUNDARIES`

    Example:
        >>> convert('foo_bar_baz', Case.PASCAL)
        'FooBarBaz'
        >>> convert('toBe_or not-to-BE', Case.CAMEL)
        'toBeOrNotToBe'
    """
    converter = Converter().to_case(case)
    if from_case is not None:
        converter.from_case(from_case)
    return converter.convert(text)
