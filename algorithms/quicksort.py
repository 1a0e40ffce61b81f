"""
quicksort.py — Quicksort (Lomuto partition)
============================================
Data-dependent schedule: which (lo, hi) ranges get partitioned depends
on where each pivot lands, and that is only known by running the sort.

Generation runs the whole sort on a private shadow copy, using an
explicit LIFO work-list instead of recursion, and emits one
PartitionStep per partition it performs.

Replay is recompute-on-live: PartitionStep keeps only (lo, hi) and runs
the SAME partition() on the live values.  Both copies start equal and
every step applies the same deterministic procedure to equal inputs, so
the live array equals the shadow array at every step boundary.
"""

from dataclasses import dataclass
from typing import Iterator, List, MutableSequence, Optional, Tuple

from dataset import Dataset, Mark
from algorithms.step import Step, StepBuilder, StepList


PSEUDOCODE: List[str] = [
    "def quick_sort(a):",                               # 0
    "    work ← [(0, n - 1)]",                          # 1
    "    while work:",                                  # 2
    "        lo, hi ← work.pop()",                      # 3
    "        pivot ← a[hi];  i ← lo - 1",               # 4
    "        for j in range(lo, hi):",                  # 5
    "            if a[j] <= pivot:",                    # 6
    "                i ← i + 1;  swap(a[i], a[j])",     # 7
    "        swap(a[i + 1], a[hi]);  p ← i + 1",        # 8
    "        push (lo, p - 1) and (p + 1, hi)",         # 9
]


# ---------------------------------------------------------------------------
# The one partition procedure shared by shadow and live
# ---------------------------------------------------------------------------
def partition(
    values: MutableSequence[int],
    lo: int,
    hi: int,
    ds: Optional[Dataset] = None,
) -> int:
    """
    Lomuto partition of values[lo..hi] around values[hi].
    Returns the pivot's final index.

    When `ds` is given (live replay) comparisons, exchanges and marks are
    recorded on it; the data movement is identical either way.  Every
    `values[j] <= pivot` hit counts as a swap, even when i == j.
    """
    pivot = values[hi]
    i     = lo - 1
    if ds is not None:
        ds.mark(hi, Mark.SWAPPING)
    for j in range(lo, hi):
        if ds is not None:
            ds.counters.compare()
            ds.mark(j, Mark.COMPARING)
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
            if ds is not None:
                ds.counters.swap()
                ds.mark(i, Mark.SWAPPING)
    # pivot placement is not counted as a swap
    p = i + 1
    values[p], values[hi] = values[hi], values[p]
    if ds is not None:
        ds.mark(p, Mark.SORTED)
    return p


@dataclass(frozen=True)
class PartitionStep(Step):
    LINE = 5
    lo: int
    hi: int

    def apply(self, ds: Dataset) -> None:
        ds.clear_marks()
        partition(ds.values, self.lo, self.hi, ds)

    def explain(self) -> str:
        return (
            f"Partition [{self.lo}..{self.hi}] around the pivot at position {self.hi}: "
            f"smaller-or-equal values move left, the pivot lands in its final place."
        )


# ---------------------------------------------------------------------------
# Shadow walk
# ---------------------------------------------------------------------------
def shadow_trace(values) -> Iterator[Tuple[int, int, List[int]]]:
    """
    Run quicksort on a private copy of `values`, yielding
    (lo, hi, shadow) after every partition.  `shadow` is the live
    working list; copy it if you need to keep it.
    """
    shadow = list(values)
    work: List[Tuple[int, int]] = [(0, len(shadow) - 1)]
    while work:
        lo, hi = work.pop()
        if lo >= hi:
            continue
        p = partition(shadow, lo, hi)
        yield lo, hi, shadow
        if p - 1 > lo:
            work.append((lo, p - 1))
        if p + 1 < hi:
            work.append((p + 1, hi))


def quick_sort(ds: Dataset) -> StepList:
    """One PartitionStep per partition discovered on the shadow copy."""
    sb = StepBuilder()
    for lo, hi, _ in shadow_trace(ds.values):
        sb.add(PartitionStep(lo=lo, hi=hi))
    return sb.build()
