"""Exceptions raised by `stringkit` operations.

Coercion is total, so these are the only two failure modes in the package.
Both subclass `ValueError`.
"""

__docformat__ = 'google'

__all__ = [
    'InvalidPatternError',
    'InvalidArgumentError'
]

class InvalidPatternError(ValueError):
    """Raised when a pattern cannot be used by the requested operation.

    Used in `stringkit.strings.match_all`, `stringkit.strings.replace_all`
    and `stringkit.matching.compile_pattern`.
    """

class InvalidArgumentError(ValueError):
    """Raised when a numeric argument is outside the accepted domain.

    Used in `stringkit.strings.repeat`.
    """
