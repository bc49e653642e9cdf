"""Parsing and validation of generated display names.

Batch replies are read with a strict line grammar::

    [<positive integer>] -> <rest of line>

Each line parses to either :class:`Matched` or :class:`Unrecognized`.
Unrecognized lines, non-positive positions and positions beyond the group
size are dropped without error; partial replies are normal and the caller
falls back for whatever is missing.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from ..config.defaults import DISPLAY_NAME_MAX_LENGTH

_LINE_RE = re.compile(r"^\[(\d+)\]\s*->\s*(.*)$")
_QUOTES = "\"'"


@dataclass(frozen=True)
class Matched:
    """A reply line that follows the grammar.

    Attributes:
        position: 1-based position as written by the generator.
        text: Raw name text after the arrow (unvalidated).
    """

    position: int
    text: str


@dataclass(frozen=True)
class Unrecognized:
    """Any other reply line (preamble, blank line, commentary)."""

    line: str


GroupLine = Union[Matched, Unrecognized]


def clean_name(raw: str) -> str:
    """Trim surrounding whitespace and quote characters."""
    return raw.strip().strip(_QUOTES).strip()


def validate_name(raw: Optional[str]) -> Optional[str]:
    """Return the cleaned name if acceptable, else ``None``.

    Acceptable means non-empty, at most DISPLAY_NAME_MAX_LENGTH bytes of UTF-8
    after cleaning, and no embedded line breaks.
    """
    if raw is None:
        return None
    name = clean_name(raw)
    if not name or len(name.encode("utf-8")) > DISPLAY_NAME_MAX_LENGTH:
        return None
    if "\n" in name or "\r" in name:
        return None
    return name


def parse_group_line(line: str) -> GroupLine:
    """Classify one reply line."""
    m = _LINE_RE.match(line.strip())
    if not m:
        return Unrecognized(line)
    return Matched(int(m.group(1)), m.group(2))


def parse_group_response(response: str) -> List[GroupLine]:
    return [parse_group_line(line) for line in response.split("\n")]


def iter_in_range(lines: List[GroupLine], size: int) -> Iterator[Matched]:
    """Yield matched lines whose position addresses one of ``size`` members."""
    for line in lines:
        if isinstance(line, Matched) and 1 <= line.position <= size:
            yield line


def names_by_index(response: str, size: int) -> Dict[int, str]:
    """Map 0-based member index to a validated name.

    When the reply names the same position twice, the last valid line wins.
    """
    out: Dict[int, str] = {}
    for line in iter_in_range(parse_group_response(response), size):
        name = validate_name(line.text)
        if name is not None:
            out[line.position - 1] = name
    return out


__all__ = [
    "Matched",
    "Unrecognized",
    "GroupLine",
    "clean_name",
    "validate_name",
    "parse_group_line",
    "parse_group_response",
    "iter_in_range",
    "names_by_index",
]
