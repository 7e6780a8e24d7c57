"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import boundaries
from . import segmentation
from . import patterns
from . import cases
from . import converter
from . import classifier
from . import codes
from . import api
from . import strings
from . import errors
from . import frames

from .boundaries import Boundary, list_from
from .cases import Case
from .classifier import is_case
from .converter import Converter, convert
from .errors import InvalidEnumCode, WordCaseError
from .patterns import Pattern
from .segmentation import segment
from .strings import CS, CaseString

__all__ = [
    # Modules
    'boundaries',
    'segmentation',
    'patterns',
    'cases',
    'converter',
    'classifier',
    'codes',
    'api',
    'strings',
    'errors',
    'frames',
    # Names
    'Boundary',
    'Case',
    'Pattern',
    'Converter',
    'CaseString',
    'CS',
    'convert',
    'is_case',
    'list_from',
    'segment',
    'InvalidEnumCode',
    'WordCaseError'
]
