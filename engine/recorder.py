"""
recorder.py — Run Recorder & Analytics
========================================
Runs a complete sort headlessly on a private copy of a permutation,
then computes the numbers the analytics panel shows.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", values=stepper.dataset.values)
    metrics = rec.run_to_completion()

The live Dataset is never touched: the recorder copies the values it is
given, so it can run the active algorithm "ahead" of playback.
"""

import logging
import sys
import time
from dataclasses import dataclass, asdict
from typing import Iterable, Optional

from dataset import Dataset
from algorithms import get_algorithm, AlgoInfo
from engine.stepper import Stepper


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    size:          int   = 0
    total_steps:   int   = 0          # length of the Step list
    comparisons:   int   = 0
    swaps:         int   = 0
    wall_time_ms:  float = 0.0        # build + replay, wall clock
    memory_bytes:  int   = 0          # approx size of the Step list (sys.getsizeof)
    sorted:        bool  = False      # values ascending after the last step?

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        stepper : The private Stepper driving the copy.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.stepper:    Optional[Stepper]    = None
        self.metrics:    Optional[RunMetrics] = None
        self._algo_info: Optional[AlgoInfo]   = None

    def start(self, algo_key: str, values: Iterable[int]) -> None:
        """Prepare a private Dataset copy and Stepper for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        self._algo_info = info
        self.metrics    = None
        self.stepper    = Stepper(algo_key=algo_key, dataset=Dataset.from_values(values))

    def run_to_completion(self) -> RunMetrics:
        """Build and replay every step, then compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        self.stepper.run_to_completion()
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("recorded %s: %s", self.metrics.algo_key, self.metrics)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        st = self.stepper
        ds = st.dataset
        v  = ds.values

        # approximate memory: the list plus every step and its payload
        mem = sys.getsizeof(st.sequence)
        for s in st.sequence:
            mem += sys.getsizeof(s)
            payload = getattr(s, "values", None)
            if payload is not None:
                mem += sys.getsizeof(payload)

        return RunMetrics(
            algo_key=self._algo_info.key,
            algo_label=self._algo_info.label,
            size=len(ds),
            total_steps=st.total_steps,
            comparisons=ds.counters.comparisons,
            swaps=ds.counters.swaps,
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            sorted=all(v[k] <= v[k + 1] for k in range(len(v) - 1)),
        )
