"""Checking whether a string is already in a given case.

A string containing a delimiter that belongs to another case (an underscore
when checking kebab-case, a space when checking camelCase) is never in the
case. Otherwise, for every deterministic case, `is_case(text, case)` agrees
with converting `text` from `case` to `case` and comparing the result with the
input. The check does not build that result: it first confirms that the
fragments, re-joined with the case delimiter, reproduce the input, and then
compares the fragments with what the case's pattern would make of them,
stopping at the first difference.

Random cases have no single conversion to compare against, so they are judged
by shape alone.
"""

__docformat__ = 'google'

__all__ = [
    'is_case'
]

from typing import List

from wordcase.boundaries import DELIMITERS, is_lower, is_upper
from wordcase.cases import Case
from wordcase.patterns import Pattern, iter_apply
from wordcase.segmentation import segment


def _has_three_alike(word: str) -> bool:
    run, previous = 0, None
    for char in word:
        if not (is_upper(char) or is_lower(char)):
            run, previous = 0, None
            continue
        current = is_upper(char)
        run = run + 1 if current == previous else 1
        previous = current
        if run >= 3:
            return True
    return False


def _has_foreign_delimiter(text: str, case: Case) -> bool:
    return any(
        delim in text
        for boundary, delim in DELIMITERS.items()
        if boundary not in case.boundaries
    )


def _matches_shape(words: List[str], case: Case) -> bool:
    if case.pattern is Pattern.PSEUDO_RANDOM:
        return not any(map(_has_three_alike, words))
    return True


def is_case(text: str, case: Case) -> bool:
    """
    Check whether a string already satisfies a case.

    Args:
        text: Any string
        case: The case to check against

    Returns:
        False if `text` contains a delimiter of another case; otherwise True
        if converting `text` from `case` to `case` would leave it unchanged

    Example:
        >>> is_case('foo_bar', Case.SNAKE)
        True
        >>> is_case('fooBar', Case.SNAKE)
        False
        >>> is_case('gentle_snek', Case.LOWER)
        False
        >>> is_case('Choo-Choo', Case.TRAIN)
        True
        >>> is_case('', Case.CAMEL)
        True
    """
    if not isinstance(case, Case):
        raise TypeError(f"case must be a Case, got {case!r}")
    if _has_foreign_delimiter(text, case):
        return False
    words = segment(text, case.boundaries)
    if case.delim.join(words) != text:
        return False
    if case.is_random:
        return _matches_shape(words, case)
    return all(
        word == expected
        for word, expected in zip(words, iter_apply(case.pattern, words))
    )
