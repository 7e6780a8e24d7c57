"""Patterns: how the casing of a sequence of words is assigned.

A pattern is applied once segmentation is complete. Most patterns transform
each word on its own; `ALTERNATING` carries its state from one word to the
next, and `SENTENCE` and `CAMEL` treat the first word differently from the
rest. The two random patterns draw from a `random.Random` that callers may
seed for reproducible output.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Pattern',
    # Functions
    'lowercase',
    'uppercase',
    'capitalize',
    'toggle',
    'iter_apply',
    'apply'
]

import random
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from wordcase.boundaries import is_lower, is_upper
from wordcase.helpers import member_from_name


class Pattern(Enum):
    """
    Casing patterns.

    Member values are the integer codes exchanged with host bindings (see
    `wordcase.codes`).

    Example:
        >>> apply(Pattern.CAMEL, ['Testing', 'string'])
        ['testing', 'String']
        >>> apply(Pattern.TOGGLE, ['ONE', 'two', 'ThRee'])
        ['oNE', 'tWO', 'tHREE']
    """
    LOWERCASE = 0
    """Every word lowercase."""
    UPPERCASE = 1
    """Every word uppercase."""
    CAPITAL = 2
    """First letter of every word uppercase, the rest lowercase."""
    SENTENCE = 3
    """First word capitalized, the remaining words lowercase."""
    CAMEL = 4
    """First word lowercase, the remaining words capitalized."""
    ALTERNATING = 5
    """Letters alternate lowercase/uppercase, continuing across words."""
    TOGGLE = 6
    """First letter of every word lowercase, the rest uppercase."""
    RANDOM = 7
    """Every letter independently uppercase or lowercase."""
    PSEUDO_RANDOM = 8
    """Letters in pairs, one uppercase and one lowercase, in random order."""

    @property
    def is_random(self) -> bool:
        return self in (Pattern.RANDOM, Pattern.PSEUDO_RANDOM)

    @classmethod
    def from_name(cls, name: str) -> 'Pattern':
        return member_from_name(cls, name)


def lowercase(word: str) -> str:
    return word.lower()

def uppercase(word: str) -> str:
    return word.upper()

def capitalize(word: str) -> str:
    """
    Uppercase the first character and lowercase the rest.

    Unlike `str.capitalize`, the first character is uppercased rather than
    titlecased.
    """
    return word[:1].upper() + word[1:].lower()

def toggle(word: str) -> str:
    return word[:1].lower() + word[1:].upper()


def _is_cased(char: str) -> bool:
    return is_upper(char) or is_lower(char)


def _alternating(words: Iterable[str]) -> Iterator[str]:
    upper = False
    for word in words:
        letters = []
        for char in word:
            if _is_cased(char):
                letters.append(char.upper() if upper else char.lower())
                upper = not upper
            else:
                letters.append(char)
        yield ''.join(letters)


def _random(word: str, rng: random.Random) -> str:
    return ''.join(
        char.upper() if rng.random() < 0.5 else char.lower()
        for char in word
    )


def _pseudo_random(words: Iterable[str], rng: random.Random) -> Iterator[str]:
    # pairs run across word breaks; uncased characters are not paired
    first_upper = None
    for word in words:
        letters = []
        for char in word:
            if not _is_cased(char):
                letters.append(char)
            elif first_upper is None:
                first_upper = rng.random() < 0.5
                letters.append(char.upper() if first_upper else char.lower())
            else:
                letters.append(char.lower() if first_upper else char.upper())
                first_upper = None
        yield ''.join(letters)


def iter_apply(pattern: Pattern, words: Iterable[str], rng: Optional[random.Random] = None) -> Iterator[str]:
    """
    Lazily apply a pattern, yielding the transformed words in order.

    Used by `wordcase.classifier.is_case` to stop at the first mismatch.
    """
    if not isinstance(pattern, Pattern):
        raise TypeError(f"expected a Pattern, got {pattern!r}")

    if pattern is Pattern.ALTERNATING:
        yield from _alternating(words)
        return

    if pattern.is_random:
        rng = rng or random.Random()
        if pattern is Pattern.PSEUDO_RANDOM:
            yield from _pseudo_random(words, rng)
            return
        for word in words:
            yield _random(word, rng)
        return

    for i, word in enumerate(words):
        if pattern is Pattern.LOWERCASE:
            yield lowercase(word)
        elif pattern is Pattern.UPPERCASE:
            yield uppercase(word)
        elif pattern is Pattern.CAPITAL:
            yield capitalize(word)
        elif pattern is Pattern.TOGGLE:
            yield toggle(word)
        elif pattern is Pattern.SENTENCE:
            yield capitalize(word) if i == 0 else lowercase(word)
        elif pattern is Pattern.CAMEL:
            yield lowercase(word) if i == 0 else capitalize(word)


def apply(pattern: Pattern, words: Iterable[str], rng: Optional[random.Random] = None) -> List[str]:
    """
    Apply a pattern to a sequence of words.

    Args:
        pattern: The pattern to apply
        words: Word fragments in source order
        rng: Random source for `Pattern.RANDOM` and `Pattern.PSEUDO_RANDOM`;
            a fresh unseeded generator is used when omitted

    Returns:
        Transformed words, one per input word

    Example:
        >>> apply(Pattern.CAPITAL, ['my', 'VAR'])
        ['My', 'Var']
        >>> apply(Pattern.ALTERNATING, ['SCREAMING', 'SNAKE'])
        ['sCrEaMiNg', 'SnAkE']
        >>> apply(Pattern.SENTENCE, ['testing', 'String'])
        ['Testing', 'string']
    """
    return list(iter_apply(pattern, words, rng))
