"""Read-only document views consumed by the cursor model."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .validation import ensure_location, ensure_offset


@dataclass(frozen=True, slots=True)
class LineInfo:
    """Line lookup result: 1-indexed line ``number`` and its ``start`` offset."""

    number: int
    start: int


class DocumentView(Protocol):
    """What the core needs from a host text buffer."""

    @property
    def line_count(self) -> int:
        ...

    @property
    def length(self) -> int:
        ...

    def line_at(self, offset: int) -> LineInfo:
        ...


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Plain string document with precomputed line starts.

    Lines are split on ``\\n`` only, so an empty text is a single empty line
    and a trailing newline produces a final empty line.
    """

    text: str = ""
    _starts: List[int] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        starts = [0]
        for index, char in enumerate(self.text):
            if char == "\n":
                starts.append(index + 1)
        object.__setattr__(self, "_starts", starts)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "TextDocument":
        return cls("\n".join(lines))

    @property
    def line_count(self) -> int:
        return len(self._starts)

    @property
    def length(self) -> int:
        return len(self.text)

    def line_at(self, offset: int) -> LineInfo:
        ensure_offset(self, offset)
        index = bisect_right(self._starts, offset) - 1
        return LineInfo(number=index + 1, start=self._starts[index])

    def line_length(self, row: int) -> int:
        start = self._starts[row]
        if row + 1 < len(self._starts):
            return self._starts[row + 1] - start - 1
        return len(self.text) - start

    def offset_at(self, row: int, col: int) -> int:
        """Convert a 0-indexed ``(row, col)`` location into an offset."""

        ensure_location(self, row, col)
        return self._starts[row] + col
