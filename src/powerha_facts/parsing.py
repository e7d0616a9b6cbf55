"""Line parsers for the delimiter-based output of the PowerHA utilities.

Every utility prints one record per line. Most use ``:`` between fields
and ``#`` to start a header or comment line; the SRC and the SNMP helper
use runs of blanks instead. ``clRGinfo`` reports its own errors on lines
starting with ``clRGinfo:``.

``cllsres`` is different: its ``#`` line names the fields of the data
lines that follow, so it is parsed in two phases through
:class:`HeaderTable`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

LinePredicate = Callable[[str], bool]

COLON = ":"


def is_hash_comment(line: str) -> bool:
    return line.startswith("#")


def starts_with(prefix: str) -> LinePredicate:
    """Build a predicate matching lines that begin with *prefix*."""

    def _matches(line: str) -> bool:
        return line.startswith(prefix)

    return _matches


def split_records(
    text: str | None,
    delimiter: str | None = COLON,
    skip: LinePredicate | None = is_hash_comment,
) -> list[list[str]]:
    """Split *text* into field lists, one per data line.

    ``None`` text yields no records. Blank lines and lines matching
    *skip* are dropped. A *delimiter* of ``None`` splits on runs of
    whitespace.
    """
    if not text:
        return []
    records: list[list[str]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if skip is not None and skip(line):
            continue
        records.append(line.split(delimiter) if delimiter else line.split())
    return records


def field_at(fields: list[str], index: int) -> str | None:
    """Return ``fields[index]`` or None when the line is too short."""
    if 0 <= index < len(fields):
        return fields[index]
    return None


@dataclass
class HeaderTable:
    """Field names captured from a ``#`` header line.

    Phase 1 builds a name-to-index table from the header; phase 2 looks
    fields up by name on each data line. Data lines may be longer or
    shorter than the header: extra fields are ignored and missing ones
    read as None.
    """

    names: list[str] = field(default_factory=list)
    index: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_line(cls, line: str, delimiter: str = COLON) -> HeaderTable:
        names = [name.strip().lower() for name in line.split(delimiter)]
        if names and names[0].startswith("#"):
            names[0] = names[0][1:]
        index: dict[str, int] = {}
        for i, name in enumerate(names):
            # a repeated name keeps its last position
            index[name] = i
        return cls(names=names, index=index)

    def get(self, fields: list[str], name: str) -> str | None:
        i = self.index.get(name)
        if i is None:
            return None
        return field_at(fields, i)

    def record(self, fields: list[str]) -> dict[str, str]:
        """Look up every named column on a data line, in header order.

        Columns the data line does not reach are left out.
        """
        record: dict[str, str] = {}
        for name in self.names:
            if not name or name in record:
                continue
            value = self.get(fields, name)
            if value is not None:
                record[name] = value
        return record


def iter_header_records(
    text: str | None,
    delimiter: str = COLON,
) -> Iterator[dict[str, str]]:
    """Yield one name-to-value mapping per data line of *text*.

    Each ``#`` line replaces the current header. Data lines seen before
    any header carry no names and are skipped.
    """
    if not text:
        return
    header: HeaderTable | None = None
    for line in text.splitlines():
        if not line.strip():
            continue
        if is_hash_comment(line):
            header = HeaderTable.from_line(line, delimiter)
            continue
        if header is None:
            continue
        yield header.record(line.split(delimiter))
