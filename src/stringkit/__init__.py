"""
.. include:: ../../README.md

String operations with permissive input coercion. Every function in
`stringkit.strings` is re-exported here.

See individual module documentation for detailed information.
"""
import logging

from . import coercion
from . import core
from . import errors
from . import matching
from . import patterns
from . import strings

from .strings import __all__ as _string_functions
from .strings import *
from .coercion import ensure_string
from .core import chain_operations
from .errors import InvalidArgumentError, InvalidPatternError
from .matching import MatchResult, Pattern, compile_pattern

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'coercion',
    'core',
    'errors',
    'matching',
    'patterns',
    'strings',
    'ensure_string',
    'chain_operations',
    'InvalidArgumentError',
    'InvalidPatternError',
    'MatchResult',
    'Pattern',
    'compile_pattern',
    *_string_functions
]
