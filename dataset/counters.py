from dataclasses import dataclass


@dataclass
class Counters:
    """
    Running tally for one sort run.

    Both fields only ever grow while a run is in progress; reset() is
    the single place they go back to zero.
    """

    comparisons: int = 0
    swaps:       int = 0

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps       = 0

    def compare(self, n: int = 1) -> None:
        self.comparisons += n

    def swap(self, n: int = 1) -> None:
        self.swaps += n

    def to_dict(self) -> dict:
        return {"comparisons": self.comparisons, "swaps": self.swaps}
