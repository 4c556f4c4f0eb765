"""Completed records and an in-memory sink for them.

The parser hands each finished record to a handler as two byte strings.
``RecordCollector`` is the simplest such handler: it copies every pair into a
list, which is handy for inspecting a file without touching the process
environment.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Record:
    name: bytes
    value: bytes


@dataclass
class RecordCollector:
    """Handler that keeps every record it receives, in emission order."""
    records: list[Record] = field(default_factory=list)

    def __call__(self, name: bytes, value: bytes) -> int:
        self.records.append(Record(name=bytes(name), value=bytes(value)))
        return 0

    def pairs(self) -> list[tuple[bytes, bytes]]:
        return [(r.name, r.value) for r in self.records]


def render_record(r: Record) -> str:
    """Render a Record back to its ``name=value`` line form."""
    return f"{r.name.decode('utf-8', 'replace')}={r.value.decode('utf-8', 'replace')}"
