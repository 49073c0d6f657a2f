r"""String manipulation functions with permissive input coercion.

Every function in this module coerces its text arguments with
`stringkit.coercion.ensure_string` before delegating to the corresponding
`str` or `re` operation, so `None`, numbers and booleans can be passed anywhere
text is expected. Position and length arguments are clamped rather than
rejected.

Functions that take a pattern accept a `stringkit.matching.Pattern`, a
compiled `re.Pattern` (treated as non-global), or plain text. Plain text is
matched literally by `replace`, `replace_all` and `split`, and compiled as a
regular expression by `match`, `match_all` and `search`.

Example:
    >>> from stringkit import compile_pattern
    >>> replace('2024-01-15', compile_pattern(r'-', 'g'), '/')
    '2024/01/15'
"""

__docformat__ = 'google'

__all__ = [
    # Case and composition
    'capitalize',
    'reverse_string',
    'is_palindrome',
    'length',
    'concat',
    # Search
    'includes',
    'index_of',
    'last_index_of',
    'starts_with',
    'ends_with',
    # Extraction
    'substring',
    'slice',
    'substr',
    'split',
    # Whitespace and case
    'trim',
    'trim_start',
    'trim_end',
    'to_lower_case',
    'to_upper_case',
    # Patterns
    'replace',
    'replace_all',
    'match',
    'match_all',
    'search',
    # Construction
    'repeat',
    'pad_start',
    'pad_end'
]

import logging
import math
import numbers
import re
import sys
from typing import Any, Callable, Iterator, List, Optional, Union

from stringkit.coercion import ensure_string, to_integer, is_nan, clamp, relative_index
from stringkit.core import chain_operations
from stringkit.errors import InvalidArgumentError, InvalidPatternError
from stringkit.matching import MatchResult, as_pattern, is_pattern
from stringkit.patterns import (
    DEFAULT_PAD_STRING,
    MAX_SPLIT_LIMIT,
    NON_ALPHANUMERIC_PATTERN
)

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[[MatchResult], Any]]

def capitalize(text: Any) -> str:
    """
    Upper-case the first character of a string and leave the rest unchanged.

    Example:
        >>> capitalize('hello world')
        'Hello world'
        >>> capitalize(123)
        '123'
        >>> capitalize('')
        ''
    """
    text = ensure_string(text)
    if len(text) == 0:
        return ''
    return text[0].upper() + text[1:]

def reverse_string(text: Any) -> str:
    """
    Reverse a string one code point at a time.

    Combining characters and other multi-code-point graphemes are not kept
    together.

    Example:
        >>> reverse_string('stressed')
        'desserts'
    """
    return ensure_string(text)[::-1]

def _strip_non_alphanumeric(text: str) -> str:
    return NON_ALPHANUMERIC_PATTERN.sub('', text)

def is_palindrome(text: Any) -> bool:
    """
    Check if a string reads the same backwards, ignoring case and punctuation.

    Every character that is not an ASCII letter or digit is dropped before
    comparing. Strings shorter than two characters are palindromes.

    Args:
        text: String to check

    Returns:
        True if the cleaned string equals its reverse, else False

    Example:
        >>> is_palindrome('A man, a plan, a canal: Panama')
        True
        >>> is_palindrome('hello')
        False
        >>> is_palindrome(None)
        True
    """
    text = ensure_string(text)
    if len(text) < 2:
        return True
    cleaned = chain_operations(text, [str.lower, _strip_non_alphanumeric])
    return cleaned == reverse_string(cleaned)

def length(text: Any) -> int:
    """Number of code points in the coerced string."""
    return len(ensure_string(text))

def concat(text: Any, *strings: Any) -> str:
    """
    Append one or more values to a string, coercing each one.

    Example:
        >>> concat('Hello', ', ', 'World', None, 1)
        'Hello, World1'
    """
    return ensure_string(text) + ''.join(map(ensure_string, strings))

def includes(text: Any, search: Any, position: Any = 0) -> bool:
    """
    Check if a string contains another string at or after `position`.

    Example:
        >>> includes('Blue Whale', 'Whale')
        True
        >>> includes('Blue Whale', 'Blue', 1)
        False
    """
    text = ensure_string(text)
    start = clamp(to_integer(position), 0, len(text))
    return text.find(ensure_string(search), start) != -1

def index_of(text: Any, search: Any, from_index: Any = 0) -> int:
    """
    Index of the first occurrence of `search` at or after `from_index`.

    Args:
        text: String to search within
        search: String to search for
        from_index: Position to begin searching, clamped to the string

    Returns:
        Index of the first occurrence, or -1 if not found

    Example:
        >>> index_of('Blue Whale', 'Whale')
        5
        >>> index_of('Blue Whale', 'Blute')
        -1
        >>> index_of('Blue Whale', '', 20)
        10
    """
    text = ensure_string(text)
    start = clamp(to_integer(from_index), 0, len(text))
    return text.find(ensure_string(search), start)

def last_index_of(text: Any, search: Any, from_index: Any = None) -> int:
    """
    Index of the last occurrence of `search` that starts at or before `from_index`.

    Args:
        text: String to search within
        search: String to search for
        from_index: Position to begin searching backwards. None or NaN searches from the end.

    Returns:
        Index of the last occurrence, or -1 if not found

    Example:
        >>> last_index_of('canal', 'a')
        3
        >>> last_index_of('canal', 'a', 2)
        1
        >>> last_index_of('canal', 'a', 0)
        -1
    """
    text = ensure_string(text)
    search = ensure_string(search)

    if from_index is None or is_nan(from_index):
        start = len(text)
    else:
        start = clamp(to_integer(from_index), 0, len(text))

    return text.rfind(search, 0, start + len(search))

def starts_with(text: Any, search: Any, position: Any = 0) -> bool:
    """
    Check if a string begins with `search`, starting the check at `position`.

    Example:
        >>> starts_with('To be, or not to be', 'To be')
        True
        >>> starts_with('To be, or not to be', 'not', 10)
        True
    """
    text = ensure_string(text)
    start = clamp(to_integer(position), 0, len(text))
    return text.startswith(ensure_string(search), start)

def ends_with(text: Any, search: Any, length: Any = None) -> bool:
    """
    Check if a string ends with `search`, considering only the first `length` characters.

    Example:
        >>> ends_with('Cats are the best!', 'best!')
        True
        >>> ends_with('Cats are the best!', 'are', 8)
        True
    """
    text = ensure_string(text)
    end = len(text) if length is None else clamp(to_integer(length), 0, len(text))
    return text.endswith(ensure_string(search), 0, end)

def substring(text: Any, start: Any = 0, end: Any = None) -> str:
    """
    Extract the characters between two indices.

    Negative and out-of-range indices are clamped to the string. If `start` is
    greater than `end` the two are swapped.

    Args:
        text: Input string
        start: First index to include
        end: Index to stop before. Defaults to the end of the string.

    Returns:
        The extracted substring

    Example:
        >>> substring('Mozilla', 1, 4)
        'ozi'
        >>> substring('Mozilla', 4, 1)
        'ozi'
        >>> substring('Mozilla', -5, 2)
        'Mo'
    """
    text = ensure_string(text)
    size = len(text)
    lower = clamp(to_integer(start), 0, size)
    upper = size if end is None else clamp(to_integer(end), 0, size)
    lower, upper = min(lower, upper), max(lower, upper)
    return text[lower:upper]

def slice(text: Any, begin: Any = 0, end: Any = None) -> str:
    """
    Extract a section of a string. Negative indices count from the end.

    An empty or inverted range gives an empty string; indices are never
    swapped.

    Example:
        >>> slice('The quick brown fox', 4, -4)
        'quick brown'
        >>> slice('The quick brown fox', -3)
        'fox'
        >>> slice('The quick brown fox', 10, 4)
        ''
    """
    text = ensure_string(text)
    size = len(text)
    lower = relative_index(begin, size)
    upper = size if end is None else relative_index(end, size)
    return text[lower:upper] if lower < upper else ''

def substr(text: Any, start: Any = 0, length: Any = None) -> str:
    """
    Extract `length` characters starting at `start`. Negative `start` counts from the end.

    Note:
        Legacy. Kept for compatibility; prefer `slice` or `substring`.

    Example:
        >>> substr('Mozilla', 1, 3)
        'ozi'
        >>> substr('Mozilla', -3)
        'lla'
    """
    text = ensure_string(text)
    size = len(text)
    lower = relative_index(start, size)
    count = size if length is None else to_integer(length)
    upper = clamp(lower + count, lower, size)
    return text[lower:upper]

def _split_limit(limit: Any) -> int:
    if limit is None:
        return MAX_SPLIT_LIMIT
    number = to_integer(limit)
    if math.isinf(number):
        return 0
    return number % (MAX_SPLIT_LIMIT + 1)

def _split_pattern(text: str, regex: re.Pattern, limit: int) -> List[Optional[str]]:
    size = len(text)
    if size == 0:
        return [] if regex.match(text) else [text]

    parts = []
    start = position = 0
    while position < size:
        found = regex.match(text, position)
        # empty matches at the previous cut would loop forever
        if found is None or found.end() == start:
            position += 1
            continue

        parts.append(text[start:position])
        if len(parts) == limit:
            return parts

        start = found.end()
        for group in found.groups():
            parts.append(group)
            if len(parts) == limit:
                return parts
        position = start

    parts.append(text[start:])
    return parts

def split(text: Any, separator: Any = None, limit: Any = None) -> List[Optional[str]]:
    r"""
    Divide a string into an ordered list of substrings.

    A text separator is matched literally and an empty separator splits the
    string into single characters. A pattern separator splits on every
    match, and its capture groups are included in the result (None for
    groups that did not participate).

    Args:
        text: Input string
        separator: Text or pattern to split on. If None, the whole string is returned as one item.
        limit: Maximum number of items to return

    Returns:
        List of substrings

    Example:
        >>> split('apple,banana,orange', ',', 2)
        ['apple', 'banana']
        >>> split('abc', '')
        ['a', 'b', 'c']
        >>> split('abc')
        ['abc']
        >>> from stringkit import compile_pattern
        >>> split('a1b2c', compile_pattern(r'(\d)'))
        ['a', '1', 'b', '2', 'c']
    """
    text = ensure_string(text)
    limit = _split_limit(limit)

    if limit == 0:
        return []
    elif separator is None:
        return [text]
    elif is_pattern(separator):
        return _split_pattern(text, as_pattern(separator).regex, limit)

    separator = ensure_string(separator)
    parts = list(text) if separator == '' else text.split(separator)
    return parts[:limit]

def trim(text: Any) -> str:
    """Remove leading and trailing whitespace."""
    return ensure_string(text).strip()

def trim_start(text: Any) -> str:
    """Remove leading whitespace."""
    return ensure_string(text).lstrip()

def trim_end(text: Any) -> str:
    """Remove trailing whitespace."""
    return ensure_string(text).rstrip()

def to_lower_case(text: Any) -> str:
    return ensure_string(text).lower()

def to_upper_case(text: Any) -> str:
    return ensure_string(text).upper()

def _literal_replacement(replacement: Replacement, matched: str, index: int, text: str) -> str:
    if callable(replacement):
        return ensure_string(replacement(MatchResult(matched, index, input=text)))
    return ensure_string(replacement)

def _substitute(text: str, regex: re.Pattern, replacement: Replacement, count: int) -> str:
    if callable(replacement):
        def substitute(found: re.Match) -> str:
            return ensure_string(replacement(MatchResult.from_match(found)))
        return regex.sub(substitute, text, count=count)
    return regex.sub(ensure_string(replacement), text, count=count)

def replace(text: Any, pattern: Any, replacement: Replacement) -> str:
    r"""
    Replace the first occurrence of a pattern, or every match of a global pattern.

    Args:
        text: Input string
        pattern: Literal text, or a pattern. Literal text and non-global
            patterns replace the first occurrence only.
        replacement: Replacement text, or a callable that receives a
            `stringkit.matching.MatchResult` and returns the replacement.
            For patterns, replacement text may use `re` group references
            such as `\1` or `\g<name>`.

    Returns:
        String with the replacement applied

    Example:
        >>> replace('banana', 'a', 'o')
        'bonana'
        >>> from stringkit import compile_pattern
        >>> replace('banana', compile_pattern('a', 'g'), 'o')
        'bonono'
        >>> replace('John Smith', compile_pattern(r'(\w+) (\w+)'), r'\2, \1')
        'Smith, John'
        >>> replace('a-b', '-', lambda m: f'[{m.index}]')
        'a[1]b'
    """
    text = ensure_string(text)

    if is_pattern(pattern):
        pattern = as_pattern(pattern)
        return _substitute(text, pattern.regex, replacement, count = 0 if pattern.is_global else 1)

    pattern = ensure_string(pattern)
    index = text.find(pattern)
    if index == -1:
        return text
    replaced = _literal_replacement(replacement, pattern, index, text)
    return text[:index] + replaced + text[index + len(pattern):]

def replace_all(text: Any, pattern: Any, replacement: Replacement) -> str:
    """
    Replace every occurrence of a pattern.

    Literal text is split on every occurrence and rejoined with the
    replacement, so an empty pattern inserts the replacement between
    characters. Patterns must be global.

    Args:
        text: Input string
        pattern: Literal text or a global pattern
        replacement: Replacement text or a callable, as in `replace`

    Returns:
        String with every occurrence replaced

    Raises:
        InvalidPatternError: If `pattern` is a non-global pattern.

    Example:
        >>> replace_all('banana', 'a', 'o')
        'bonono'
        >>> replace_all('abc', '', '-')
        'a-b-c'
    """
    text = ensure_string(text)

    if is_pattern(pattern):
        pattern = as_pattern(pattern)
        if not pattern.is_global:
            logger.debug('replace_all called with non-global pattern %r', pattern.source)
            raise InvalidPatternError('replace_all requires a global pattern')
        return _substitute(text, pattern.regex, replacement, count = 0)

    pattern = ensure_string(pattern)
    pieces = split(text, pattern)

    if not callable(replacement):
        return ensure_string(replacement).join(pieces)
    if len(pieces) < 2:
        return text

    replaced = [pieces[0]]
    offset = len(pieces[0])
    for piece in pieces[1:]:
        replaced.append(_literal_replacement(replacement, pattern, offset, text))
        replaced.append(piece)
        offset += len(pattern) + len(piece)
    return ''.join(replaced)

def match(text: Any, pattern: Any) -> Union[MatchResult, List[str], None]:
    r"""
    Match a string against a regular expression.

    Args:
        text: Input string
        pattern: Pattern, or regex source compiled as a non-global pattern

    Returns:
        For a non-global pattern, the first `stringkit.matching.MatchResult`.
        For a global pattern, a list of every whole match with no offsets or
        groups. None if nothing matches.

    Example:
        >>> result = match('Released in 2024', r'(\d+)')
        >>> result.match, result.index, result[1]
        ('2024', 12, '2024')
        >>> from stringkit import compile_pattern
        >>> match('a1b22c333', compile_pattern(r'\d+', 'g'))
        ['1', '22', '333']
        >>> match('abc', r'\d') is None
        True
    """
    text = ensure_string(text)
    pattern = as_pattern(pattern)

    if pattern.is_global:
        matches = [found.group(0) for found in pattern.regex.finditer(text)]
        return matches or None

    found = pattern.regex.search(text)
    return None if found is None else MatchResult.from_match(found)

def match_all(text: Any, pattern: Any) -> Iterator[MatchResult]:
    r"""
    Iterate over every match of a global pattern.

    The returned iterator is lazy and can be consumed once; call `match_all`
    again to restart. Regex source text is compiled as a global pattern.

    Args:
        text: Input string
        pattern: Global pattern, or regex source

    Returns:
        Iterator of `stringkit.matching.MatchResult`

    Raises:
        InvalidPatternError: If `pattern` is a non-global pattern. Raised
            immediately, not on first iteration.

    Example:
        >>> [(m.match, m.index) for m in match_all('t1e2s3', r'\d')]
        [('1', 1), ('2', 3), ('3', 5)]
    """
    text = ensure_string(text)
    pattern = as_pattern(pattern, is_global=True)

    if not pattern.is_global:
        logger.debug('match_all called with non-global pattern %r', pattern.source)
        raise InvalidPatternError('match_all requires a global pattern')

    return (MatchResult.from_match(found) for found in pattern.regex.finditer(text))

def search(text: Any, pattern: Any) -> int:
    r"""
    Index of the first match of a regular expression, or -1.

    Example:
        >>> search('hey JudE', '[A-Z]')
        4
        >>> search('hey', r'\d')
        -1
    """
    found = as_pattern(pattern).regex.search(ensure_string(text))
    return -1 if found is None else found.start()

def repeat(text: Any, count: Any) -> str:
    """
    Repeat a string `count` times.

    Args:
        text: String to repeat
        count: Non-negative whole number. None and NaN count as zero.

    Returns:
        String of `count` concatenated copies

    Raises:
        InvalidArgumentError: If `count` is negative, infinite, not a whole number,
            or would produce a string longer than `sys.maxsize`.

    Example:
        >>> repeat('abc', 2)
        'abcabc'
        >>> repeat('abc', 0)
        ''
    """
    text = ensure_string(text)
    if count is None:
        return ''

    number = _whole_number(count)
    if number is None or number < 0 or number > sys.maxsize // max(len(text), 1):
        logger.debug('Rejected repeat count %r', count)
        raise InvalidArgumentError(f'Invalid repeat count: {count!r}')

    return text * number

def _whole_number(count: Any) -> Optional[int]:
    """Integer value of `count`, 0 for NaN or non-numbers, None if not whole or finite."""
    if isinstance(count, numbers.Integral):
        return int(count)

    try:
        number = float(count)
    except (TypeError, ValueError):
        return 0

    if math.isnan(number):
        return 0
    elif math.isfinite(number) and number.is_integer():
        return int(number)
    else:
        return None

def _fill(text: str, target_length: Any, pad_string: Any) -> str:
    if pad_string is None:
        pad_string = DEFAULT_PAD_STRING
    filler = ensure_string(pad_string)
    target = to_integer(target_length)

    if target <= len(text) or filler == '':
        return ''
    if target > sys.maxsize:
        logger.debug('Rejected pad target length %r', target_length)
        raise InvalidArgumentError(f'Invalid target length: {target_length!r}')

    size = int(target) - len(text)
    return (filler * (size // len(filler) + 1))[:size]

def pad_start(text: Any, target_length: Any, pad_string: Any = DEFAULT_PAD_STRING) -> str:
    """
    Pad the start of a string until it reaches `target_length`.

    The pad string is repeated and truncated as needed. Strings already at or
    beyond the target length, and empty pad strings, leave the input
    unchanged. A pad string of None uses the default single space.

    Raises:
        InvalidArgumentError: If `target_length` is infinite or larger than `sys.maxsize`.

    Example:
        >>> pad_start('abc', 10, '-')
        '-------abc'
        >>> pad_start('5', 3, '0')
        '005'
        >>> pad_start('abc', 6, '12345')
        '123abc'
        >>> pad_start('abc', 2)
        'abc'
    """
    text = ensure_string(text)
    return _fill(text, target_length, pad_string) + text

def pad_end(text: Any, target_length: Any, pad_string: Any = DEFAULT_PAD_STRING) -> str:
    """
    Pad the end of a string until it reaches `target_length`.

    Example:
        >>> pad_end('data', 8, '0')
        'data0000'
        >>> pad_end('abc', 5)
        'abc  '
    """
    text = ensure_string(text)
    return text + _fill(text, target_length, pad_string)
