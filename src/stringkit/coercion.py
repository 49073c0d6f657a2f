"""Input normalization shared by every `stringkit` operation.

Text parameters pass through `ensure_string`. Position, index, length and
count parameters pass through `to_integer` and are then clamped by the
operation using `clamp` or `relative_index`.
"""

__docformat__ = 'google'

__all__ = [
    'ensure_string',
    'to_integer',
    'is_nan',
    'clamp',
    'relative_index'
]

import math
from decimal import Decimal
from typing import Any, Union

import numpy as np
import pandas as pd

def ensure_string(value: Any) -> str:
    """
    Coerce any value to text.

    Absence markers (`None` and `pandas.NA`) become the empty string, booleans
    render in lower case and numbers render in base-10 decimal without a
    trailing fractional part when they are integral. Everything else falls
    back to `str`.

    Args:
        value: Any value

    Returns:
        Text representation of the value; text input is returned unchanged

    Example:
        >>> ensure_string('abc')
        'abc'
        >>> ensure_string(None)
        ''
        >>> ensure_string(True)
        'true'
        >>> ensure_string(42)
        '42'
        >>> ensure_string(3.0)
        '3'
        >>> ensure_string(float('nan'))
        'NaN'
    """
    if isinstance(value, str):
        return value
    elif value is None or value is pd.NA:
        return ''
    elif isinstance(value, (bool, np.bool_)):
        return 'true' if value else 'false'
    elif isinstance(value, (int, np.integer)):
        return str(int(value))
    elif isinstance(value, (float, np.floating)):
        return _render_float(float(value))
    else:
        return str(value)

def _render_float(number: float) -> str:
    if math.isnan(number):
        return 'NaN'
    elif math.isinf(number):
        return 'Infinity' if number > 0 else '-Infinity'
    elif number == 0:
        return '0'
    elif number.is_integer() and abs(number) < 1e21:
        # shortest round-trip digits, zero-padded: 2.0**60 -> '1152921504606847000'
        return format(Decimal(repr(number)).normalize(), 'f')
    else:
        return repr(number)

def is_nan(value: Any) -> bool:
    """
    Check if a numeric argument converts to NaN.

    Text that is not a number converts to NaN; blank text converts to zero.

    Example:
        >>> is_nan(float('nan'))
        True
        >>> is_nan('abc')
        True
        >>> is_nan('')
        False
        >>> is_nan(3)
        False
    """
    if value is None or isinstance(value, (int, np.integer)):
        return False
    if isinstance(value, str) and value.strip() == '':
        return False

    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True

def to_integer(value: Any, default: int = 0) -> Union[int, float]:
    """
    Convert a numeric argument to an integer, keeping infinities.

    Args:
        value: Number, numeric text, or None
        default: Value returned when `value` is None

    Returns:
        Integer truncated toward zero, `0` for values that are not numbers,
        or `math.inf` / `-math.inf` for infinite input

    Example:
        >>> to_integer(2.7)
        2
        >>> to_integer(-2.7)
        -2
        >>> to_integer(None, default=5)
        5
        >>> to_integer(float('nan'))
        0
        >>> to_integer('12')
        12
    """
    if value is None:
        return default
    if isinstance(value, (int, np.integer)):
        return int(value)

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0

    if math.isnan(number):
        return 0
    elif math.isinf(number):
        return number
    else:
        return int(number)

def clamp(value: Union[int, float], lower: int, upper: int) -> int:
    """Clamp a (possibly infinite) integer to `[lower, upper]`."""
    return int(min(max(value, lower), upper))

def relative_index(value: Any, size: int, default: int = 0) -> int:
    """
    Resolve an index that counts from the end of the text when negative.

    Example:
        >>> relative_index(-4, 19)
        15
        >>> relative_index(-40, 19)
        0
        >>> relative_index(40, 19)
        19
    """
    index = to_integer(value, default)
    if index < 0:
        return clamp(size + index, 0, size)
    return clamp(index, 0, size)
