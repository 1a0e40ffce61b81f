"""
merge.py — Bottom-up Merge Sort
================================
Data-independent schedule: run widths 1, 2, 4, … and the run boundaries
depend only on n.  One Step per pair of adjacent runs; it merges the
live values of a[lo..mid] and a[mid+1..hi] back into place.

Counting: each element comparison is a comparison; taking an element
from the right run (moving it ahead of the left run) is a swap.
"""

from dataclasses import dataclass
from typing import List

from dataset import Dataset, Mark
from algorithms.step import Step, StepBuilder, StepList


PSEUDOCODE: List[str] = [
    "def merge_sort(a):",                                   # 0
    "    width ← 1",                                        # 1
    "    while width < n:",                                 # 2
    "        for lo in range(0, n, 2 * width):",            # 3
    "            mid ← min(lo + width - 1, n - 1)",         # 4
    "            hi  ← min(lo + 2 * width - 1, n - 1)",     # 5
    "            merge(a, lo, mid, hi)",                    # 6
    "        width ← 2 * width",                            # 7
]


@dataclass(frozen=True)
class MergeStep(Step):
    LINE = 6
    lo:  int
    mid: int
    hi:  int

    def apply(self, ds: Dataset) -> None:
        lo, mid, hi = self.lo, self.mid, self.hi
        v     = ds.values
        left  = v[lo:mid + 1]
        right = v[mid + 1:hi + 1]
        i = j = 0
        k = lo
        ds.clear_marks()
        while i < len(left) and j < len(right):
            ds.counters.compare()
            if left[i] <= right[j]:
                v[k] = left[i]
                i += 1
            else:
                v[k] = right[j]
                j += 1
                ds.counters.swap()
            k += 1
        for x in left[i:] + right[j:]:
            v[k] = x
            k += 1
        ds.mark_range(lo, hi + 1, Mark.SWAPPING)

    def explain(self) -> str:
        return (
            f"Merge runs [{self.lo}..{self.mid}] and [{self.mid + 1}..{self.hi}] "
            f"into one sorted run."
        )


def merge_sort(ds: Dataset) -> StepList:
    n     = len(ds)
    sb    = StepBuilder()
    width = 1
    while width < n:
        for lo in range(0, n, 2 * width):
            mid = min(lo + width - 1, n - 1)
            hi  = min(lo + 2 * width - 1, n - 1)
            if mid >= hi:
                continue
            sb.add(MergeStep(lo=lo, mid=mid, hi=hi))
        width *= 2
    return sb.build()
