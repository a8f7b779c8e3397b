"""Selection ranges expressed as document offsets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """An ``anchor``/``head`` offset pair; equal offsets form a plain cursor."""

    anchor: int
    head: int

    @classmethod
    def cursor(cls, offset: int) -> "SelectionRange":
        return cls(anchor=offset, head=offset)

    @property
    def start(self) -> int:
        return min(self.anchor, self.head)

    @property
    def end(self) -> int:
        return max(self.anchor, self.head)

    @property
    def is_cursor(self) -> bool:
        return self.anchor == self.head
