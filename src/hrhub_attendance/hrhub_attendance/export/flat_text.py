from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset, dict))


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).replace(",", ";")


def export_to_flat_text(rows: Sequence[Any], title: str, *, generated_at: Optional[datetime] = None) -> bytes:
    """Render dataclass rows as a comma separated table, UTF-8 encoded.

    Layout: ``Report: <title>``, ``Generated: <timestamp>``, a blank line, then
    (only when there are rows) a header of field names and one line per row.
    Commas inside values become ';'; nothing is quoted. Collection-valued
    fields are not flat and are left out.
    """

    generated_at = generated_at or now_local()
    lines = [f"Report: {title}", f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}", ""]

    if rows:
        first = rows[0]
        if not is_dataclass(first):
            raise TypeError(f"Rows must be dataclass instances, got {type(first)!r}")
        names = [f.name for f in fields(first) if not _is_nested(getattr(first, f.name))]
        lines.append(",".join(names))
        for row in rows:
            lines.append(",".join(_cell(getattr(row, name)) for name in names))

    return ("\n".join(lines) + "\n").encode("utf-8")
