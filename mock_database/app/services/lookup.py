"""
Helpers shared by the resource services.

Record ids arrive as raw path segments.  They are parsed leniently:
leading whitespace and a sign are accepted and only the leading run
of ASCII digits is used, so ``"2abc"`` means ``2``.  A segment with no
leading integer cannot match any record and parses to ``None``, which
the services treat as "not found" rather than as a client error.
"""

import re
from typing import Iterable, Optional, TypeVar


T = TypeVar("T")

# [0-9] rather than \d: other scripts' digits are not ids.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_record_id(raw: str) -> Optional[int]:
    """Return the integer prefix of ``raw`` or ``None`` if there is none.

    Digit runs too long for ``int()`` to convert also give ``None``;
    no record could carry such an id.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def format_record_id(record_id: Optional[int]) -> str:
    """Render an id for the query log; unparseable ids show as ``NaN``."""
    return "NaN" if record_id is None else str(record_id)


def find_by_id(records: Iterable[T], record_id: Optional[int]) -> Optional[T]:
    """Linear scan for the record whose ``id`` equals ``record_id``."""
    if record_id is None:
        return None
    for record in records:
        if record.id == record_id:
            return record
    return None
