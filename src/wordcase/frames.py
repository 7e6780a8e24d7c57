"""Case conversion for pandas objects.

Converts the string values of a `pandas.Series` or the column labels of a
`pandas.DataFrame`. Missing values and non-string labels pass through
unchanged.
"""

__docformat__ = 'google'

__all__ = [
    'convert_series',
    'is_case_series',
    'rename_columns'
]

from typing import Optional

import pandas as pd

from wordcase.cases import Case
from wordcase.classifier import is_case
from wordcase.converter import convert
from wordcase.errors import DuplicateLabelError


def _converter_for(case: Case, from_case: Optional[Case]):
    def convert_value(value):
        if isinstance(value, str):
            return convert(value, case, from_case)
        return value
    return convert_value


def convert_series(series: pd.Series, case: Case, from_case: Optional[Case] = None) -> pd.Series:
    """
    Convert every string in a Series.

    Args:
        series: Series of strings; missing values are left untouched
        case: Target case
        from_case: Split using only the boundaries of this case

    Returns:
        New Series with the same index and name

    Example:
        >>> convert_series(pd.Series(['fooBar', 'HTTPServer']), Case.SNAKE).tolist()
        ['foo_bar', 'http_server']
    """
    return series.map(_converter_for(case, from_case), na_action='ignore')


def is_case_series(series: pd.Series, case: Case) -> pd.Series:
    """
    Check every value of a Series against a case.

    Missing and non-string values are reported as False.
    """
    return series.map(lambda value: isinstance(value, str) and is_case(value, case)).astype(bool)


def rename_columns(frame: pd.DataFrame, case: Case, from_case: Optional[Case] = None) -> pd.DataFrame:
    """
    Convert the string column labels of a DataFrame.

    Args:
        frame: Any DataFrame
        case: Target case
        from_case: Split using only the boundaries of this case

    Returns:
        Copy of `frame` with converted column labels

    Raises:
        DuplicateLabelError: two labels would convert to the same label

    Example:
        >>> frame = pd.DataFrame(columns=['firstName', 'Last Name', 0])
        >>> list(rename_columns(frame, Case.SNAKE).columns)
        ['first_name', 'last_name', 0]
    """
    convert_label = _converter_for(case, from_case)
    labels = pd.Index([convert_label(label) for label in frame.columns])

    sources = {}
    for old, new in zip(frame.columns, labels):
        sources.setdefault(new, set()).add(old)
    collisions = [new for new, olds in sources.items() if len(olds) > 1]
    if collisions:
        raise DuplicateLabelError(collisions)

    renamed = frame.copy()
    renamed.columns = labels
    return renamed
