"""Constants and precompiled regex patterns used by `stringkit` operations.
"""

__docformat__ = 'google'

import re
from typing import Dict

## Padding
DEFAULT_PAD_STRING: str = ' '
"""Pad text used when none is given.

Used in `stringkit.strings.pad_start` and `stringkit.strings.pad_end`."""

## Splitting
MAX_SPLIT_LIMIT: int = 2**32 - 1
"""Largest number of items `stringkit.strings.split` returns.

Limits are reduced modulo `MAX_SPLIT_LIMIT + 1`, so -1 means no limit."""

## Pattern flags
GLOBAL_FLAG: str = 'g'
"""Flag letter that marks a pattern as global (find all matches).

Used in `stringkit.matching.compile_pattern`."""

FLAG_BITS: Dict[str, int] = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'u': 0
}
"""Flag letters accepted by `stringkit.matching.compile_pattern` and the `re` flags they map to.

`u` is accepted for compatibility and has no effect: `str` patterns are
always Unicode-aware."""

## Palindromes
NON_ALPHANUMERIC: str = '[^a-z0-9]'
"""@private"""

NON_ALPHANUMERIC_PATTERN: re.Pattern = re.compile(NON_ALPHANUMERIC)
"""Compiled regex matching every character that is not a lower-case ASCII letter or digit.

Applied after lower-casing, so upper-case letters are kept.

Used in `stringkit.strings.is_palindrome`."""
