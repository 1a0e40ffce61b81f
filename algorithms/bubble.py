"""
bubble.py — Bubble Sort
========================
Data-independent schedule: the (pass, j) pairs depend only on n, so the
Steps capture indices and do the real comparison on live values.

One Step per adjacent pair:
  1. Mark j, j+1 COMPARING, count one comparison
  2. If out of order, exchange them and mark SWAPPING
  3. Re-mark the suffix settled by earlier passes as SORTED
"""

from dataclasses import dataclass
from typing import List

from dataset import Dataset, Mark
from algorithms.step import Step, StepBuilder, StepList


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in range(n - 1):",                   # 1
    "        for j in range(n - 1 - i):",           # 2
    "            if a[j] > a[j + 1]:",              # 3
    "                swap(a[j], a[j + 1])",         # 4
]


@dataclass(frozen=True)
class BubbleStep(Step):
    LINE = 3
    pass_no: int
    j:       int

    def apply(self, ds: Dataset) -> None:
        j = self.j
        ds.clear_marks()
        ds.mark(j, Mark.COMPARING)
        ds.mark(j + 1, Mark.COMPARING)
        ds.counters.compare()
        if ds.values[j] > ds.values[j + 1]:
            ds.swap(j, j + 1)
            ds.mark(j, Mark.SWAPPING)
            ds.mark(j + 1, Mark.SWAPPING)
            ds.counters.swap()
        # the last `pass_no` positions were settled by earlier passes
        ds.mark_range(len(ds) - self.pass_no, len(ds), Mark.SORTED)

    def explain(self) -> str:
        return (
            f"Pass {self.pass_no + 1}: compare positions {self.j} and {self.j + 1}, "
            f"swap them if the left one is larger."
        )


def bubble_sort(ds: Dataset) -> StepList:
    """One BubbleStep per comparison, n-1 passes."""
    n  = len(ds)
    sb = StepBuilder()
    for i in range(n - 1):
        for j in range(n - 1 - i):
            sb.add(BubbleStep(pass_no=i, j=j))
    return sb.build()
