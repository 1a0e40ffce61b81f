"""
heapsort.py — Heapsort
=======================
Data-dependent schedule: which child a sift-down follows depends on the
values, so generation runs the whole sort on a private shadow copy.

Replay is checkpoint-replace.  Every exchange on the shadow produces a
HeapCheckpoint holding a full copy of the shadow array at that moment;
executing it overwrites the live values with the copy.  No comparison
is redone on live data, at the cost of an O(n) payload per step.

Counters: comparisons and exchanges happen on the shadow, so each
checkpoint carries the deltas accumulated since the previous one and
adds them when it is applied.  A settle checkpoint after every
sift-down flushes whatever is still pending.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from dataset import Dataset, Mark
from algorithms.step import Step, StepBuilder, StepList


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                                # 0
    "    for i in range(n // 2 - 1, -1, -1):",          # 1
    "        sift_down(a, i, n)",                       # 2
    "    for end in range(n - 1, 0, -1):",              # 3
    "        swap(a[0], a[end])",                       # 4
    "        sift_down(a, 0, end)",                     # 5
    "",                                                 # 6
    "def sift_down(a, i, size):",                       # 7
    "    largest ← max of i and its children < size",   # 8
    "    if largest != i:",                             # 9
    "        swap(a[i], a[largest]);  i ← largest",     # 10
]


@dataclass(frozen=True)
class HeapCheckpoint(Step):
    """
    Attributes:
        values      : shadow array right after the traced operation.
        active      : index marked SWAPPING (parent / root), or None.
        probe       : index marked COMPARING (child / tail), or None.
        sorted_from : indices >= sorted_from are SORTED.
        comparisons : comparisons performed since the previous checkpoint.
        swaps       : exchanges performed since the previous checkpoint.
        note        : short label used by explain().
        code_line   : PSEUDOCODE index of the traced operation.
    """

    values:      Tuple[int, ...]
    active:      Optional[int] = None
    probe:       Optional[int] = None
    sorted_from: int           = 0
    comparisons: int           = 0
    swaps:       int           = 0
    note:        str           = ""
    code_line:   int           = -1

    def apply(self, ds: Dataset) -> None:
        ds.values[:] = self.values
        ds.counters.compare(self.comparisons)
        ds.counters.swap(self.swaps)
        ds.clear_marks()
        ds.mark_range(self.sorted_from, len(ds), Mark.SORTED)
        if self.probe is not None:
            ds.mark(self.probe, Mark.COMPARING)
        if self.active is not None:
            ds.mark(self.active, Mark.SWAPPING)

    def explain(self) -> str:
        return self.note

    def pseudocode_line(self) -> int:
        return self.code_line


# ---------------------------------------------------------------------------
# Shadow tracer
# ---------------------------------------------------------------------------
class _HeapTracer:
    """Runs heapsort on a shadow copy and records checkpoints."""

    def __init__(self, values):
        self.a            = list(values)
        self.sb           = StepBuilder()
        self.sorted_from  = len(self.a)
        self._pending_cmp = 0
        self._pending_swp = 0

    def checkpoint(self, active=None, probe=None, note: str = "", code_line: int = -1) -> None:
        self.sb.add(HeapCheckpoint(
            values=tuple(self.a),
            active=active,
            probe=probe,
            sorted_from=self.sorted_from,
            comparisons=self._pending_cmp,
            swaps=self._pending_swp,
            note=note,
            code_line=code_line,
        ))
        self._pending_cmp = 0
        self._pending_swp = 0

    def exchange(self, i: int, j: int) -> None:
        self.a[i], self.a[j] = self.a[j], self.a[i]
        self._pending_swp += 1

    def sift_down(self, i: int, size: int) -> None:
        a = self.a
        while True:
            largest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size:
                self._pending_cmp += 1
                if a[left] > a[largest]:
                    largest = left
            if right < size:
                self._pending_cmp += 1
                if a[right] > a[largest]:
                    largest = right
            if largest == i:
                return
            self.exchange(i, largest)
            self.checkpoint(
                active=i, probe=largest, code_line=10,
                note=f"Sift down: swap parent {i} with its larger child {largest}.",
            )
            i = largest

    def run(self) -> StepList:
        n = len(self.a)
        for i in range(n // 2 - 1, -1, -1):
            self.sift_down(i, n)
            self.checkpoint(note=f"Subtree rooted at {i} is now a max-heap.", code_line=2)
        for end in range(n - 1, 0, -1):
            self.exchange(0, end)
            self.sorted_from = end
            self.checkpoint(
                active=0, probe=end, code_line=4,
                note=f"Move the heap maximum to position {end}.",
            )
            self.sift_down(0, end)
            self.checkpoint(note=f"Heap restored on [0..{end - 1}].", code_line=5)
        return self.sb.build()


def heap_sort(ds: Dataset) -> StepList:
    """Checkpoint per shadow exchange plus a settle checkpoint per sift-down."""
    return _HeapTracer(ds.values).run()
