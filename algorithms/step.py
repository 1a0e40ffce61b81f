"""
step.py — Replayable Sort Step
===============================
Every algorithm is a generator function that returns a list of Step
objects.  A Step is one atomic mutation of the shared Dataset:

    • which indices to read / compare / exchange
    • which counters to bump
    • which bars to highlight afterwards

Design decisions:
  - Step is a frozen dataclass.  It holds ONLY the parameters its
    generator fixed ahead of time (indices, ranges, snapshots).  The
    live Dataset is handed in explicitly at apply() time, so a Step
    never aliases the array it mutates.
  - Steps run at most once, in list order.  apply() returns nothing;
    its only effect is on the Dataset and its Counters.
  - explain() is plain-English text for the learning panel and
    pseudocode_line() the PSEUDOCODE index to highlight.  Both are
    derived from the Step's parameters only.
"""

from dataclasses import dataclass
from typing import ClassVar, List

from dataset import Dataset


# Type alias for a fully materialised run
StepList = List["Step"]


@dataclass(frozen=True)
class Step:
    """
    Base class.  Subclasses override apply() and explain(), and set LINE
    to the index of the PSEUDOCODE line they execute (-1 for none).
    """

    LINE: ClassVar[int] = -1

    def apply(self, ds: Dataset) -> None:
        raise NotImplementedError

    def explain(self) -> str:
        return ""

    def pseudocode_line(self) -> int:
        return self.LINE


@dataclass(frozen=True)
class FinishStep(Step):
    """Closing step every generator appends: all bars become SORTED."""

    def apply(self, ds: Dataset) -> None:
        ds.mark_all_sorted()

    def explain(self) -> str:
        return "Done — every bar is in its final position."


# ---------------------------------------------------------------------------
# Convenience builder so generators don't each re-implement the tail
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad generators use to collect Steps.

    Usage inside a generator:
        sb = StepBuilder()
        for j in range(n - 1):
            sb.add(BubbleStep(pass_no=0, j=j))
        return sb.build()
    """

    def __init__(self):
        self.steps: StepList = []

    def add(self, step: Step) -> None:
        self.steps.append(step)

    def build(self) -> StepList:
        """Return the collected steps with the closing FinishStep appended."""
        return self.steps + [FinishStep()]

    def __len__(self) -> int:
        return len(self.steps)
