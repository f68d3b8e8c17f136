"""Snake body: a chain of segments, head first.

Segments live in an arena (a plain list) and link to their child by index;
the head is always index 0. Segments are only ever appended at the tail, so
arena order and chain order coincide and dropping a segment's descendants is
a slice deletion.

Movement is discrete follow-the-leader: while the head moves within its
cell nothing else changes; once it enters a new cell every segment moves
into the cell its parent just left and takes the direction its parent had
while leaving it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from core.geometry import RIGHT, Direction, Position, Speed


@dataclass(eq=False)
class Segment:
    position: Position
    direction: Direction
    child: Optional[int] = None
    # guards position/direction of this segment only
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class BodyChain:
    def __init__(self, position: Position, direction: Direction = RIGHT) -> None:
        self._segments: List[Segment] = [Segment(position, direction)]

    @property
    def head(self) -> Segment:
        return self._segments[0]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Segment]:
        index: Optional[int] = 0
        while index is not None:
            segment = self._segments[index]
            yield segment
            index = segment.child

    def _tail_index(self) -> int:
        index = 0
        while self._segments[index].child is not None:
            index = self._segments[index].child
        return index

    @property
    def tail(self) -> Segment:
        return self._segments[self._tail_index()]

    # ------------------------------------------------------------------
    def add_body(self) -> Segment:
        """Append a segment one cell behind the tail, facing the same way."""
        tail_index = self._tail_index()
        tail = self._segments[tail_index]
        with tail.lock:
            segment = Segment(tail.position - tail.direction * 1.0, tail.direction)
            self._segments.append(segment)
            tail.child = len(self._segments) - 1
        return segment

    def truncate(self) -> None:
        """Drop every segment after the head."""
        head = self.head
        with head.lock:
            head.child = None
        del self._segments[1:]

    def reset(self, position: Position, direction: Direction, segments: int) -> None:
        head = self.head
        with head.lock:
            head.position = position
            head.direction = direction
        self.truncate()
        for _ in range(segments):
            self.add_body()

    # ------------------------------------------------------------------
    def advance(self, elapsed_ms: float, speed: Speed) -> bool:
        """Move the head; returns True when it entered a new cell.

        Followers only move when the head changes cell, so sub-cell motion is
        invisible to them.
        """
        head = self.head
        with head.lock:
            before = head.position.screen_coordinates()
            heading = head.direction
            head.position = head.position + heading * (
                speed.steps_per_millisecond * elapsed_ms
            )
            after = head.position.screen_coordinates()
        if before == after:
            return False
        self._follow(heading)
        return True

    def _follow(self, heading: Direction) -> None:
        # Single head-to-tail pass; each segment hands its pre-move direction
        # to its child.
        parent = self.head
        parent_heading = heading
        while parent.child is not None:
            child = self._segments[parent.child]
            with parent.lock:
                anchor = parent.position
            with child.lock:
                previous = child.direction
                child.position = anchor - parent_heading * 1.0
                child.direction = parent_heading
            parent, parent_heading = child, previous

    def self_collision(self) -> bool:
        """True if any segment shares the head's cell."""
        segments = iter(self)
        head = next(segments)
        with head.lock:
            cell = head.position.screen_coordinates()
        for segment in segments:
            with segment.lock:
                if segment.position.screen_coordinates() == cell:
                    return True
        return False

    # ------------------------------------------------------------------
    def cells(self) -> List[tuple]:
        cells = []
        for segment in self:
            with segment.lock:
                cells.append(segment.position.screen_coordinates())
        return cells

    def describe(self) -> str:
        lines = []
        for segment in self:
            with segment.lock:
                lines.append(f"{segment.direction}{segment.position}")
        return "\n".join(lines)
