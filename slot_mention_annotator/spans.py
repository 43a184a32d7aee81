"""Token-index spans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open interval ``[start, end)`` over token indices."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end))

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

    def overlaps_any(self, spans: Iterable["Span"]) -> bool:
        return any(self.overlaps(other) for other in spans)

    def distance_to(self, other: "Span") -> int:
        """Number of tokens strictly between the two spans (0 if touching or overlapping)."""
        return max(0, max(self.start, other.start) - min(self.end, other.end))

    @classmethod
    def coerce(cls, value: object) -> object:
        """Accept ``[start, end]`` pairs where a span is expected."""
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(int(value[0]), int(value[1]))
        return value
