__docformat__ = 'google'

__all__ = [
    'chain_operations'
]

from functools import reduce
from typing import Any, Callable, Iterable

def chain_operations(value: Any, operations: Iterable[Callable[[Any], Any]]) -> Any:
    """
    Apply each operation to the running value, left to right.

    Args:
        value: Initial value
        operations: Callables taking one argument

    Returns:
        Result of the last operation, or `value` if there are none

    Example:
        >>> chain_operations('  abc ', [str.strip, str.upper])
        'ABC'
        >>> chain_operations('abc', [])
        'abc'
    """
    return reduce(lambda result, operation: operation(result), operations, value)
