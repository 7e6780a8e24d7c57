"""A `str` subclass with chainable case conversion methods."""

__docformat__ = 'google'

__all__ = [
    'CaseString',
    'CS'
]

from typing import Iterable, List, Optional

from wordcase import boundaries as _boundaries
from wordcase.boundaries import AnyBoundary, Boundary
from wordcase.cases import Case
from wordcase.classifier import is_case
from wordcase.codes import decode_case, decode_pattern
from wordcase.converter import Converter
from wordcase.patterns import Pattern


class CaseString(str):
    """
    A string that converts itself.

    Every method returns a new `CaseString`, so conversions chain. Cases and
    patterns may be given as enum members or as integer codes.

    Example:
        >>> CS('a   very -__strangeCombination-INDEED').to_case(Case.PASCAL).to_case(Case.SNAKE)
        'a_very_strange_combination_indeed'
        >>> CS('Choo-Choo').is_case(Case.TRAIN)
        True
    """

    def to_case(self, case: Case, from_case: Optional[Case] = None) -> 'CaseString':
        converter = Converter().to_case(decode_case(case, 'case'))
        if from_case is not None:
            converter.from_case(decode_case(from_case, 'from_case'))
        return CaseString(converter.convert(str(self)))

    def is_case(self, case: Case) -> bool:
        return is_case(str(self), decode_case(case, 'case'))

    def mutate(
        self,
        pattern: Optional[Pattern] = None,
        boundaries: Optional[Iterable[AnyBoundary]] = None,
        delim: Optional[str] = None
    ) -> 'CaseString':
        """
        Convert with explicit overrides.

        Args:
            pattern: Pattern to apply; words keep their casing when omitted
            boundaries: Boundaries replacing the defaults entirely
            delim: Delimiter to join words with; none when omitted

        Example:
            >>> CS('thatIsTheQuestion').mutate(pattern=Pattern.CAPITAL, delim='_')
            'That_Is_The_Question'
        """
        converter = Converter()
        if pattern is not None:
            converter.set_pattern(decode_pattern(pattern, 'pattern'))
        if boundaries is not None:
            converter.set_boundaries(boundaries)
        if delim is not None:
            converter.set_delim(delim)
        return CaseString(converter.convert(str(self)))

    def boundaries(self) -> List[Boundary]:
        """Built-in boundaries present in the string; see `wordcase.boundaries.list_from`."""
        return _boundaries.list_from(str(self))

    def words(self, boundaries: Optional[Iterable[AnyBoundary]] = None) -> List[str]:
        converter = Converter()
        if boundaries is not None:
            converter.set_boundaries(boundaries)
        return converter.split(str(self))


def CS(text: str) -> CaseString:
    """Shorthand for `CaseString(text)`."""
    return CaseString(text)
