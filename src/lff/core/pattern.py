"""Glob matching for the name pattern filter."""

from __future__ import annotations

import fnmatch
import re
from typing import Callable

from lff.errors import InvalidPatternError

NameMatcher = Callable[[str], bool]


def _check_brackets(pattern: str) -> None:
    """Raise InvalidPatternError for a '[' class that is never closed or
    that holds a reversed range such as ``[z-a]``.

    Scans the same way ``fnmatch.translate`` does: a leading '!' negates
    the class and a ']' right after the opening (or after the '!') is a
    literal member rather than the terminator.
    """
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        start = j
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            raise InvalidPatternError(pattern) from ValueError("unclosed character class; missing ']'")
        _check_ranges(pattern, pattern[start:j])
        i = j + 1


def _check_ranges(pattern: str, members: str) -> None:
    k = 0
    while k + 2 < len(members):
        if members[k + 1] == "-":
            low, high = members[k], members[k + 2]
            if low > high:
                raise InvalidPatternError(pattern) from ValueError(f"invalid range; '{low}' > '{high}'")
            k += 3
        else:
            k += 1


def compile_name_pattern(pattern: str) -> NameMatcher:
    """Compile a shell-style glob into a case-sensitive matcher.

    Supports ``*``, ``?``, ``[seq]`` and ``[!seq]``.  ``*`` also matches
    path separators, so ``'*abc*'`` matches ``dir/1abc2.txt``.

    Raises:
        InvalidPatternError: If a bracket class is unterminated or holds a
            reversed range, since it could never match anything. The
            reason is chained as the cause.
    """
    _check_brackets(pattern)
    try:
        regex = re.compile(fnmatch.translate(pattern))
    except re.error as exc:
        raise InvalidPatternError(pattern) from exc
    return lambda name: regex.match(name) is not None
