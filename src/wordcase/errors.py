"""Exceptions raised by wordcase.

Conversion itself never fails: every string paired with valid enum values has a
result. Errors are raised only at the edges, when integer codes or symbolic
names arrive from outside, when the packaged case table cannot be loaded, or
when a pandas adapter would produce clashing labels.
"""

__docformat__ = 'google'

__all__ = [
    'WordCaseError',
    'InvalidEnumCode',
    'InvalidEnumName',
    'CaseTableError',
    'DuplicateLabelError'
]

from enum import Enum
from typing import Any, Optional, Type


class WordCaseError(Exception):
    """Base error for wordcase."""
    def __init__(self, message: str = None, source: Exception = None):
        self.message = message
        self.source = source
        super().__init__(self.__str__())

    def __str__(self):
        msg = self.message or self.__class__.__name__
        if self.source:
            return f"{msg}: {self.source}"
        return msg


def _code_range(enum: Type[Enum]) -> str:
    codes = [member.value for member in enum]
    return f"{min(codes)}-{max(codes)}"


class InvalidEnumCode(WordCaseError, ValueError):
    """An integer case, pattern or boundary code that names no enum member.

    Args:
        argument: Name of the argument that carried the code
        value: The rejected value, exactly as received
        enum: The enum the value was expected to decode to

    Example:
        >>> str(InvalidEnumCode('target_case', 77, Case))
        'target_case: 77 is not a valid Case code (0-19)'
    """
    def __init__(self, argument: str, value: Any, enum: Type[Enum]):
        self.argument = argument
        self.value = value
        self.enum = enum
        super().__init__(
            f"{argument}: {value!r} is not a valid {enum.__name__} code ({_code_range(enum)})"
        )


class InvalidEnumName(WordCaseError, ValueError):
    """A symbolic name that matches no enum member."""
    def __init__(self, name: Any, enum: Type[Enum]):
        self.name = name
        self.enum = enum
        super().__init__(f"{name!r} is not a valid {enum.__name__} name")


class CaseTableError(WordCaseError):
    """The packaged case table is missing, malformed, or disagrees with `Case`."""
    pass


class DuplicateLabelError(WordCaseError):
    """Converting labels would map two distinct labels onto the same result."""
    def __init__(self, duplicates: Optional[list] = None):
        self.duplicates = duplicates or []
        super().__init__(f"converted labels collide: {self.duplicates}")
