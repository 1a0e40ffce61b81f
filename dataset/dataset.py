"""
dataset.py — Array Under Sort
==============================
Single source of truth for the bars.  Steps and the web layer both talk
to this object.

Responsibilities:
  1. Hold the permutation being sorted        (values)
  2. Hold the per-index annotation            (marks)
  3. Hold the run's comparison / swap tally   (counters)
  4. Shuffle / load helpers                   (reset, from_values)
  5. Serialisation for the web layer          (to_dict)

Design decisions:
  - `values` and `marks` are plain lists mutated in place.  Steps keep
    indices, never references to these lists, so a reset can swap the
    contents without leaving stale aliases behind.
  - The Dataset never checks whether it is sorted.  That is the
    algorithms' job; the Stepper reports it via `is_sorted`.
"""

import random
from typing import List, Iterable, Optional, Tuple

from dataset.mark import Mark
from dataset.counters import Counters


# ---------------------------------------------------------------------------
# Legal sizes the UI offers
# ---------------------------------------------------------------------------
SIZE_OPTIONS: Tuple[int, ...] = (8, 16, 32, 64, 100)
DEFAULT_SIZE: int             = 100


class Dataset:
    """
    Attributes:
        values   : [int] — a permutation of 1..N.
        marks    : [Mark] — aligned by index with `values`.
        counters : Counters for the current run.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        rng: Optional[random.Random] = None,
        values: Optional[Iterable[int]] = None,
    ):
        self.values:   List[int]  = []
        self.marks:    List[Mark] = []
        self.counters: Counters   = Counters()
        if values is not None:
            self.load(values)
        else:
            self.reset(size, rng=rng)

    # ==================================================================
    # LIFECYCLE
    # ==================================================================
    def reset(self, size: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        """Fresh random permutation of 1..size, marks cleared, counters zeroed."""
        if size is None:
            size = len(self.values)
        if size < 1:
            raise ValueError(f"Dataset size must be positive, got {size}")
        values = list(range(1, size + 1))
        (rng or random).shuffle(values)
        self.load(values)

    def load(self, values: Iterable[int]) -> None:
        """Replace the contents with an explicit permutation."""
        self.values[:] = list(values)
        self.marks[:]  = [Mark.DEFAULT] * len(self.values)
        self.counters.reset()

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Dataset":
        return cls(values=values)

    # ==================================================================
    # MUTATION (called by Steps)
    # ==================================================================
    def swap(self, i: int, j: int) -> None:
        v = self.values
        v[i], v[j] = v[j], v[i]

    def clear_marks(self) -> None:
        self.marks[:] = [Mark.DEFAULT] * len(self.marks)

    def mark(self, idx: int, mark: Mark) -> None:
        self.marks[idx] = mark

    def mark_range(self, lo: int, hi: int, mark: Mark) -> None:
        """Mark indices lo..hi-1 (half-open, like range())."""
        for k in range(max(lo, 0), min(hi, len(self.marks))):
            self.marks[k] = mark

    def mark_all_sorted(self) -> None:
        self.marks[:] = [Mark.SORTED] * len(self.marks)

    # ==================================================================
    # READ HELPERS
    # ==================================================================
    @property
    def size(self) -> int:
        return len(self.values)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.values)

    def to_dict(self) -> dict:
        return {
            "values":   list(self.values),
            "marks":    [m.value for m in self.marks],
            "counters": self.counters.to_dict(),
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return (
            f"Dataset(size={len(self.values)}, comparisons={self.counters.comparisons}, "
            f"swaps={self.counters.swaps})"
        )
