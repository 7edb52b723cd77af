"""Pointcut expression parsing and matching for AOP advice targeting.

Two designators are supported:

* ``execution(<pattern>)`` — matches a method by its qualified name
  (``<stereotype-or-module>.<ClassName>.<method>``). A bare ``<pattern>``
  is shorthand for ``execution(<pattern>)``.
* ``@annotation(<marker>)`` — matches any method carrying the marker
  created by :func:`~aspectlog.aop.decorators.make_marker`.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from aspectlog.aop.exceptions import InvalidPointcutError

EXECUTION = "execution"
ANNOTATION = "annotation"

_DESIGNATOR_RE = re.compile(r"^(?P<designator>@?[A-Za-z_]\w*)\((?P<body>[^()]*)\)$")
_MARKER_RE = re.compile(r"^[A-Za-z_]\w*$")
_PATTERN_RE = re.compile(r"^[\w*?]+(?:\.[\w*?]+)*$")


@dataclass(frozen=True)
class Pointcut:
    """A parsed pointcut expression."""

    kind: str
    pattern: str

    def matches(self, qualified_name: str, markers: frozenset[str] = frozenset()) -> bool:
        if self.kind == ANNOTATION:
            return self.pattern in markers
        return _pattern_to_regex(self.pattern).fullmatch(qualified_name) is not None


@functools.lru_cache(maxsize=256)
def parse_pointcut(expression: str) -> Pointcut:
    """Parse *expression* into a :class:`Pointcut`.

    Raises:
        InvalidPointcutError: unknown designator, unbalanced parentheses,
            or an empty/ill-formed pattern.
    """
    text = expression.strip()
    if not text:
        raise InvalidPointcutError(expression, "expression is empty")

    if "(" not in text and ")" not in text:
        return Pointcut(EXECUTION, _check_pattern(expression, text))

    match = _DESIGNATOR_RE.match(text)
    if match is None:
        raise InvalidPointcutError(expression, "expected 'execution(...)' or '@annotation(...)'")

    designator = match.group("designator")
    body = match.group("body").strip()
    if designator == "execution":
        return Pointcut(EXECUTION, _check_pattern(expression, body))
    if designator == "@annotation":
        if not _MARKER_RE.match(body):
            raise InvalidPointcutError(expression, f"'{body}' is not a marker name")
        return Pointcut(ANNOTATION, body)
    raise InvalidPointcutError(expression, f"unknown designator '{designator}'")


def matches_pointcut(expression: str, qualified_name: str, markers: frozenset[str] = frozenset()) -> bool:
    """Check whether a method matches a pointcut *expression*.

    Pattern syntax (``execution``)
    ------------------------------
    * ``*``  — matches exactly one dot-separated segment.
    * ``**`` — matches one or more segments (crosses dots).
    * Partial globs in a segment use fnmatch rules,
      e.g. ``get_*`` matches ``get_order``.

    Examples
    --------
    >>> matches_pointcut("execution(service.*.*)", "service.OrderService.create")
    True
    >>> matches_pointcut("**.*Service.*", "a.b.c.OrderService.create")
    True
    >>> matches_pointcut("@annotation(audited)", "service.Ledger.post", frozenset({"audited"}))
    True
    >>> matches_pointcut("*.my_method", "a.b.MyClass.my_method")
    False
    """
    return parse_pointcut(expression).matches(qualified_name, markers)


def _check_pattern(expression: str, pattern: str) -> str:
    if not _PATTERN_RE.match(pattern):
        raise InvalidPointcutError(expression, f"'{pattern}' is not a dotted name pattern")
    return pattern


def _segment_to_regex(seg: str) -> str:
    """Convert a single pattern segment to a regex fragment."""
    if seg == "**":
        return r"(?:[^.]+\.)*[^.]+"
    if seg == "*":
        return r"[^.]+"

    # Partial glob: ``*`` stays within one segment.
    parts: list[str] = []
    for ch in seg:
        if ch == "*":
            parts.append("[^.]*")
        elif ch == "?":
            parts.append("[^.]")
        else:
            parts.append(re.escape(ch))
    return "".join(parts)


@functools.lru_cache(maxsize=256)
def _pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Convert a dotted pattern string into a compiled regex."""
    return re.compile(r"\.".join(_segment_to_regex(seg) for seg in pattern.split(".")))
