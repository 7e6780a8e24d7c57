"""Host-facing operations over integer codes.

These four functions are the interface offered to host environments. They
take plain values only: strings, integer codes and mappings. Every code is
validated through `wordcase.codes` before any segmentation starts, and the
work itself is delegated to `wordcase.converter.Converter`,
`wordcase.classifier.is_case` and `wordcase.boundaries.list_from`.
"""

__docformat__ = 'google'

__all__ = [
    'to_case',
    'is_case',
    'mutate',
    'list_from'
]

import logging
from typing import Any, List, Mapping, Optional

from wordcase import boundaries, classifier
from wordcase.codes import decode_boundaries, decode_case, decode_pattern, encode_boundaries
from wordcase.converter import Converter

logger = logging.getLogger(__name__)

MUTATE_OPTIONS = ('delim', 'pattern', 'boundaries')
"""Keys read from the `options` mapping of `mutate`."""


def _require_text(text: Any) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    return text


def to_case(text: str, target_case: Any, from_case: Any = None) -> str:
    """
    Convert a string to the case with code `target_case`.

    Args:
        text: Any string
        target_case: `Case` code to convert to
        from_case: Optional `Case` code whose boundaries are used for splitting

    Raises:
        InvalidEnumCode: `target_case` or `from_case` is not a known code

    Example:
        >>> to_case('fooBarBaz', 7)
        'foo_bar_baz'
        >>> to_case('foo_bar_baz', 5)
        'FooBarBaz'
        >>> to_case('toBe_or not-to-BE', 11, 10)
        'TOBE_OR NOT-TO-BE'
    """
    target = decode_case(target_case, 'target_case')
    source = None if from_case is None else decode_case(from_case, 'from_case')

    converter = Converter().to_case(target)
    if source is not None:
        converter.from_case(source)
    return converter.convert(_require_text(text))


def is_case(text: str, target_case: Any) -> bool:
    """
    Check whether a string is already in the case with code `target_case`.

    Example:
        >>> is_case('foo_bar', 7)
        True
        >>> is_case('fooBar', 7)
        False
    """
    target = decode_case(target_case, 'target_case')
    return classifier.is_case(_require_text(text), target)


def mutate(text: str, options: Optional[Mapping[str, Any]] = None) -> str:
    """
    Convert a string with explicit overrides instead of a named case.

    Args:
        text: Any string
        options: Mapping with any of the keys:
            * delim: string to join words with (default: no delimiter)
            * pattern: `Pattern` code (default: words keep their casing)
            * boundaries: list of `Boundary` codes; when given, these replace
              the default boundaries entirely

            Missing keys and None values are treated as absent.

    Raises:
        InvalidEnumCode: a pattern or boundary code is unknown

    Example:
        >>> mutate('fooBar', {'delim': '.', 'pattern': 1})
        'FOO.BAR'
        >>> mutate('567N9854G321K', {'boundaries': [6], 'delim': '-'})
        '567N-9854G-321K'
    """
    options = {} if options is None else options
    if not isinstance(options, Mapping):
        raise TypeError(f"options must be a mapping, got {type(options).__name__}")

    ignored = set(options) - set(MUTATE_OPTIONS)
    if ignored:
        logger.debug("Ignoring unknown mutate options %s", sorted(map(str, ignored)))

    delim = options.get('delim')
    pattern = options.get('pattern')
    boundary_codes = options.get('boundaries')

    if delim is not None and not isinstance(delim, str):
        raise TypeError(f"options.delim must be a str, got {type(delim).__name__}")
    if pattern is not None:
        pattern = decode_pattern(pattern, 'options.pattern')
    if boundary_codes is not None:
        boundary_codes = decode_boundaries(boundary_codes, 'options.boundaries')

    converter = Converter()
    if delim is not None:
        converter.set_delim(delim)
    if pattern is not None:
        converter.set_pattern(pattern)
    if boundary_codes is not None:
        converter.remove_boundaries(boundaries.Boundary.all())
        for boundary in boundary_codes:
            converter.add_boundary(boundary)
    return converter.convert(_require_text(text))


def list_from(text: str) -> List[int]:
    """
    List the codes of the boundaries present in a string, in code order.

    Example:
        >>> list_from('foo-bar_baz')
        [0, 1]
    """
    return encode_boundaries(boundaries.list_from(_require_text(text)))
