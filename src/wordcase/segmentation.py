"""Splitting strings into word fragments.

Segmentation is a single left-to-right pass. At each position the literal
delimiters are tried first (longest first) and consume their text; otherwise
the transition boundaries are tested in `wordcase.boundaries.TRANSITION_PRECEDENCE`
order. Detection always looks at the raw input, and empty fragments are
dropped, so runs of delimiters collapse and leading or trailing delimiters
leave nothing behind.
"""

__docformat__ = 'google'

__all__ = [
    'segment',
    'delimiter_pattern',
    'boundary_at'
]

import re
from functools import cache
from typing import FrozenSet, Iterable, List, Optional, Sequence

from wordcase.boundaries import (
    AnyBoundary,
    Boundary,
    DEFAULT_BOUNDARIES,
    TRANSITION_PRECEDENCE,
    boundary_set
)


@cache
def delimiter_pattern(delims: FrozenSet[str]) -> Optional[re.Pattern]:
    """
    Compile an alternation matching any of the given literal delimiters.

    Longer delimiters come first in the alternation, so '--' is consumed as
    one delimiter rather than as two '-'.

    Returns:
        Compiled pattern, or None when there are no delimiters
    """
    if not delims:
        return None
    ordered = sorted(delims, key=lambda d: (-len(d), d))
    return re.compile('|'.join(map(re.escape, ordered)))


def boundary_at(text: str, i: int, transitions: Sequence[Boundary]) -> Optional[Boundary]:
    """
    Find the first transition boundary that fires immediately before `text[i]`.

    Args:
        text: The full input string
        i: Position of the character that would start the next fragment
        transitions: Active transition boundaries, in precedence order

    Returns:
        The boundary that fired, or None
    """
    if i <= 0 or i >= len(text):
        return None
    before, here = text[i - 1], text[i]
    after = text[i + 1] if i + 1 < len(text) else ''
    for boundary in transitions:
        if boundary.detect_three(before, here, after) or boundary.detect_two(before, here):
            return boundary
    return None


def segment(text: str, boundaries: Iterable[AnyBoundary] = DEFAULT_BOUNDARIES) -> List[str]:
    """
    Split a string into word fragments at the active boundaries.

    Args:
        text: Any string
        boundaries: Active boundaries, built-in or created with `Boundary.from_delim`

    Returns:
        Non-empty fragments in source order

    Example:
        >>> segment('HTTPServer2Instances')
        ['HTTP', 'Server', '2', 'Instances']
        >>> segment('foo--bar', [Boundary.HYPHEN])
        ['foo', 'bar']
        >>> segment('__init__', [Boundary.UNDERSCORE])
        ['init']
        >>> segment('fooBar', [Boundary.HYPHEN])
        ['fooBar']
    """
    active = boundary_set(boundaries)
    pattern = delimiter_pattern(frozenset(b.delim for b in active if b.is_delimiter))
    transitions = [b for b in TRANSITION_PRECEDENCE if b in active]

    fragments = []
    start = i = 0
    while i < len(text):
        match = pattern.match(text, i) if pattern else None
        if match:
            fragments.append(text[start:i])
            i = start = match.end()
            continue
        if i > start and boundary_at(text, i, transitions):
            fragments.append(text[start:i])
            start = i
        i += 1
    fragments.append(text[start:])
    return [fragment for fragment in fragments if fragment]
