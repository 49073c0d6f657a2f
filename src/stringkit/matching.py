"""Compiled patterns and match results.

`Pattern` wraps a compiled `re.Pattern` together with an explicit global flag,
since Python's `re` has no notion of a pattern that finds all matches by
itself. `MatchResult` is the record returned by `stringkit.strings.match` and
`stringkit.strings.match_all`.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Pattern',
    'MatchResult',
    # Functions
    'compile_pattern',
    'as_pattern',
    'is_pattern'
]

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from stringkit.coercion import ensure_string
from stringkit.errors import InvalidPatternError
from stringkit.patterns import GLOBAL_FLAG, FLAG_BITS

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Pattern:
    """
    A compiled regular expression with an explicit global flag.

    Args:
        regex: Compiled `re` pattern
        is_global: True if operations should act on every match rather than the first

    Build instances with `compile_pattern` rather than directly.
    """
    regex: re.Pattern
    is_global: bool = False

    @property
    def source(self) -> str:
        return self.regex.pattern

@dataclass(frozen=True)
class MatchResult:
    """
    One regular expression match.

    Indexing mirrors an array-shaped match: `result[0]` is the whole match and
    `result[n]` is capture group `n`.

    Args:
        match: Matched text
        index: Offset of the match in `input`
        groups: Capture groups, with None for groups that did not participate
        named_groups: Named capture groups
        input: Text that was searched

    Example:
        >>> result = MatchResult('ab', 2, ('b',), {}, 'xxab')
        >>> result[0], result[1], len(result)
        ('ab', 'b', 2)
    """
    match: str
    index: int
    groups: Tuple[Optional[str], ...] = ()
    named_groups: Dict[str, Optional[str]] = field(default_factory=dict)
    input: str = ''

    @classmethod
    def from_match(cls, match: re.Match) -> 'MatchResult':
        return cls(
            match = match.group(0),
            index = match.start(),
            groups = match.groups(),
            named_groups = match.groupdict(),
            input = match.string
        )

    @property
    def end(self) -> int:
        return self.index + len(self.match)

    def __getitem__(self, key):
        return (self.match, *self.groups)[key]

    def __len__(self) -> int:
        return 1 + len(self.groups)

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter((self.match, *self.groups))

def compile_pattern(source: Union[str, re.Pattern], flags: str = '') -> Pattern:
    """
    Compile a regular expression with source-style flag letters.

    Accepted letters are `g` (global) and those in
    `stringkit.patterns.FLAG_BITS`. Flags of an already-compiled `re.Pattern`
    are kept and combined with `flags`.

    Args:
        source: Regex source text or a compiled `re.Pattern`
        flags: String of flag letters, e.g. 'gi'

    Returns:
        Pattern

    Raises:
        InvalidPatternError: If a flag letter is unknown or repeated, or the source does not compile.

    Example:
        >>> pattern = compile_pattern('[a-z]+', 'gi')
        >>> pattern.is_global
        True
        >>> bool(pattern.regex.flags & re.IGNORECASE)
        True
        >>> compile_pattern('a').is_global
        False
    """
    letters = ensure_string(flags)
    unknown = [letter for letter in letters if letter != GLOBAL_FLAG and letter not in FLAG_BITS]

    if unknown or len(set(letters)) != len(letters):
        logger.debug('Rejected pattern flags %r', letters)
        raise InvalidPatternError(f"Invalid pattern flags: '{letters}'")

    bits = 0
    for letter in letters:
        bits |= FLAG_BITS.get(letter, 0)

    if isinstance(source, re.Pattern):
        source, bits = source.pattern, source.flags | bits

    try:
        regex = re.compile(ensure_string(source), bits)
    except re.error as e:
        logger.debug('Could not compile pattern %r: %s', source, e)
        raise InvalidPatternError(f"Invalid regular expression: '{source}' ({e})") from e

    return Pattern(regex, is_global = GLOBAL_FLAG in letters)

def is_pattern(value: Any) -> bool:
    """True if `value` is a `Pattern` or a compiled `re.Pattern`."""
    return isinstance(value, (Pattern, re.Pattern))

def as_pattern(value: Any, is_global: bool = False) -> Pattern:
    """
    Normalize a pattern argument.

    `Pattern` instances pass through, a bare `re.Pattern` becomes a non-global
    `Pattern`, and any other value is coerced to text and compiled as a regex.

    Args:
        value: Pattern, `re.Pattern`, or regex source
        is_global: Global flag applied when `value` has to be compiled

    Returns:
        Pattern

    Example:
        >>> as_pattern(re.compile('a')).is_global
        False
        >>> as_pattern('a', is_global=True).is_global
        True
    """
    if isinstance(value, Pattern):
        return value
    elif isinstance(value, re.Pattern):
        return Pattern(value)
    else:
        return compile_pattern(ensure_string(value), GLOBAL_FLAG if is_global else '')
