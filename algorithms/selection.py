"""
selection.py — Selection Sort
==============================
Data-independent schedule: one Step per output position i.  Each Step
scans the unsorted tail on live values, picks the minimum and moves it
into place with at most one exchange.
"""

from dataclasses import dataclass
from typing import List

from dataset import Dataset, Mark
from algorithms.step import Step, StepBuilder, StepList


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in range(n - 1):",                   # 1
    "        min_idx ← i",                          # 2
    "        for j in range(i + 1, n):",            # 3
    "            if a[j] < a[min_idx]:",            # 4
    "                min_idx ← j",                  # 5
    "        swap(a[i], a[min_idx])",               # 6
]


@dataclass(frozen=True)
class SelectionStep(Step):
    LINE = 4
    i: int

    def apply(self, ds: Dataset) -> None:
        i, v = self.i, ds.values
        ds.clear_marks()
        min_idx = i
        for j in range(i + 1, len(v)):
            ds.counters.compare()
            ds.mark(j, Mark.COMPARING)
            if v[j] < v[min_idx]:
                min_idx = j
        if min_idx != i:
            ds.swap(i, min_idx)
            ds.counters.swap()
            ds.mark(min_idx, Mark.SWAPPING)
        ds.mark_range(0, i + 1, Mark.SORTED)

    def explain(self) -> str:
        return (
            f"Scan positions {self.i + 1}.. for the smallest value "
            f"and move it into position {self.i}."
        )


def selection_sort(ds: Dataset) -> StepList:
    n  = len(ds)
    sb = StepBuilder()
    for i in range(n - 1):
        sb.add(SelectionStep(i=i))
    return sb.build()
