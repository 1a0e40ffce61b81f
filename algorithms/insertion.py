"""
insertion.py — Insertion Sort
==============================
Data-independent schedule: one Step per key index i.  The Step shifts
larger neighbours right on live values until the key fits.

Counting: each shift is one comparison and one swap; the comparison that
stops the loop is not counted.
"""

from dataclasses import dataclass
from typing import List

from dataset import Dataset, Mark
from algorithms.step import Step, StepBuilder, StepList


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in range(1, n):",                    # 1
    "        key ← a[i];  j ← i - 1",               # 2
    "        while j >= 0 and a[j] > key:",         # 3
    "            a[j + 1] ← a[j];  j ← j - 1",      # 4
    "        a[j + 1] ← key",                       # 5
]


@dataclass(frozen=True)
class InsertionStep(Step):
    LINE = 3
    i: int

    def apply(self, ds: Dataset) -> None:
        v   = ds.values
        key = v[self.i]
        j   = self.i - 1
        ds.clear_marks()
        ds.mark(self.i, Mark.SWAPPING)
        while j >= 0 and v[j] > key:
            v[j + 1] = v[j]
            ds.mark(j + 1, Mark.COMPARING)
            ds.counters.compare()
            ds.counters.swap()
            j -= 1
        v[j + 1] = key
        ds.mark(j + 1, Mark.SWAPPING)

    def explain(self) -> str:
        return (
            f"Take the value at position {self.i} and shift larger values "
            f"right until it fits into the sorted prefix."
        )


def insertion_sort(ds: Dataset) -> StepList:
    n  = len(ds)
    sb = StepBuilder()
    for i in range(1, n):
        sb.add(InsertionStep(i=i))
    return sb.build()
