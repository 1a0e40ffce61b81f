"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the UI interacts with during a run.
It owns the Dataset, the materialised Step list and the cursor into it,
and exposes a clean play/pause/tick/speed API.

State machine:
    IDLE     →  play()        →  RUNNING   (builds the Step list first)
    IDLE     →  step_once()   →  PAUSED
    RUNNING  →  pause()       →  PAUSED    (READY if nothing ran yet)
    PAUSED   →  play()        →  RUNNING
    RUNNING  →  (list exhausted) → FINISHED
    any      →  reset()       →  IDLE      (fresh shuffle, counters zeroed)

Speed:
    Ten integer levels.  Each tick runs round(2.8 ** ((speed - 1) / 3))
    steps: 1 at speed 1, 22 at speed 10.

Thread safety:
  This class is NOT thread-safe.  The caller must drive tick() /
  advance() and every command from a single thread.
"""

import logging
import random
from enum import Enum
from typing import Callable, Dict, Optional

from dataset import Dataset, SIZE_OPTIONS, DEFAULT_SIZE
from algorithms import get_algorithm, AlgoInfo
from algorithms.step import StepList


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"       # no Step list yet
    READY    = "ready"      # Step list built, nothing executed
    RUNNING  = "running"
    PAUSED   = "paused"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed & frame timing
# ---------------------------------------------------------------------------
MIN_SPEED:     int = 1
MAX_SPEED:     int = 10
DEFAULT_SPEED: int = 5

FRAME_INTERVAL:        float = 1.0 / 60.0   # seconds per tick under advance()
MAX_TICKS_PER_ADVANCE: int   = 4            # drop backlog after a long stall


def steps_per_tick(speed: int) -> int:
    """Exponential speed curve: level 1 → 1 step, level 10 → 22 steps."""
    return int(round(2.8 ** ((speed - 1) / 3.0)))


SPEED_TABLE: Dict[int, int] = {s: steps_per_tick(s) for s in range(MIN_SPEED, MAX_SPEED + 1)}


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        dataset     : The live Dataset (values, marks, counters).
        algo_key    : Registry key of the active algorithm.
        sequence    : Materialised Step list for the current run (empty while IDLE).
        cursor      : Number of Steps executed so far.
        speed       : Level 1..10.
        state       : Current StepperState.
        explanation : explain() text of the last executed Step.
        pseudocode_line : PSEUDOCODE index of the last executed Step, -1 if none.
        on_finish   : Optional callback(Stepper) fired once when a run finishes.
    """

    def __init__(
        self,
        algo_key: str = "bubble",
        size: int = DEFAULT_SIZE,
        dataset: Optional[Dataset] = None,
        on_finish: Optional[Callable[["Stepper"], None]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._algo_info:  AlgoInfo      = self._lookup(algo_key)
        self._rng:        Optional[random.Random] = rng
        self.dataset:     Dataset       = dataset if dataset is not None else Dataset(size, rng=rng)
        self.sequence:    StepList      = []
        self.cursor:      int           = 0
        self.speed:       int           = DEFAULT_SPEED
        self.state:       StepperState  = StepperState.IDLE
        self.explanation: str           = ""
        self.pseudocode_line: int       = -1
        self.on_finish:   Optional[Callable[["Stepper"], None]] = on_finish

        self._built_size: int   = 0
        self._frame_time: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def build(self) -> None:
        """Materialise the Step list against the current permutation."""
        ds = self.dataset
        ds.counters.reset()
        ds.clear_marks()
        self.sequence    = self._algo_info.fn(ds)
        self.cursor      = 0
        self.explanation = ""
        self.pseudocode_line = -1
        self._built_size = len(ds)
        self.state       = StepperState.READY
        logger.debug(
            "built %s sequence: size=%d steps=%d",
            self._algo_info.key, len(ds), len(self.sequence),
        )

    def reset(self, algo_key: Optional[str] = None, size: Optional[int] = None) -> None:
        """Back to IDLE with a fresh shuffle — the Step list is discarded."""
        if algo_key is not None:
            self._algo_info = self._lookup(algo_key)
        self.dataset.reset(size, rng=self._rng)
        self.sequence    = []
        self.cursor      = 0
        self.explanation = ""
        self.pseudocode_line = -1
        self.state       = StepperState.IDLE
        self._built_size = 0
        self._frame_time = 0.0
        logger.debug("reset: algo=%s size=%d", self._algo_info.key, len(self.dataset))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_algorithm(self, algo_key: str) -> None:
        """Switching algorithm always forces a reset, even mid-run."""
        self.reset(algo_key=algo_key)

    def shuffle(self) -> None:
        self.pause()
        self.reset()

    def set_size(self, size: int) -> None:
        if size not in SIZE_OPTIONS:
            raise ValueError(f"Unsupported size {size}; choose one of {SIZE_OPTIONS}")
        # never resize under a running sequence
        self.pause()
        self.reset(size=size)

    def set_speed(self, level: int) -> None:
        self.speed = max(MIN_SPEED, min(MAX_SPEED, int(level)))

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == StepperState.FINISHED:
            return
        if self.state == StepperState.IDLE:
            self.build()
        if self.cursor >= len(self.sequence):
            self._finish()
            return
        self.state       = StepperState.RUNNING
        self._frame_time = 0.0

    def pause(self) -> None:
        if self.state != StepperState.RUNNING:
            return
        self.state = StepperState.PAUSED if self.cursor > 0 else StepperState.READY

    def toggle_play(self) -> None:
        """Space-bar semantics: play/pause, or reshuffle once finished."""
        if self.state == StepperState.FINISHED:
            self.shuffle()
        elif self.state == StepperState.RUNNING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> int:
        """
        Run one tick's worth of Steps.  Returns how many Steps executed;
        0 when not running.
        """
        if self.state != StepperState.RUNNING:
            return 0
        return self._execute(steps_per_tick(self.speed))

    def advance(self, dt: float) -> int:
        """
        Per-frame entry point.  Accumulates `dt` seconds and ticks once
        per elapsed FRAME_INTERVAL.  Returns the number of Steps executed.
        """
        if self.state != StepperState.RUNNING:
            return 0
        self._frame_time += max(0.0, float(dt))
        executed = 0
        ticks    = 0
        while self._frame_time >= FRAME_INTERVAL and self.state == StepperState.RUNNING:
            if ticks == MAX_TICKS_PER_ADVANCE:
                self._frame_time = 0.0
                break
            self._frame_time -= FRAME_INTERVAL
            executed += self.tick()
            ticks    += 1
        return executed

    def step_once(self) -> bool:
        """Manually run exactly one Step while not playing.  False if nothing ran."""
        if self.state in (StepperState.RUNNING, StepperState.FINISHED):
            return False
        if self.state == StepperState.IDLE:
            self.build()
        if self.cursor >= len(self.sequence):
            self._finish()
            return False
        self._execute(1)
        if self.state != StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def run_to_completion(self) -> None:
        """Execute every remaining Step."""
        if self.state == StepperState.FINISHED:
            return
        if self.state == StepperState.IDLE:
            self.build()
        self._execute(len(self.sequence) - self.cursor)
        if self.state != StepperState.FINISHED:
            self._finish()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def algo_key(self) -> str:
        return self._algo_info.key

    @property
    def algo_info(self) -> AlgoInfo:
        return self._algo_info

    @property
    def total_steps(self) -> int:
        return len(self.sequence)

    @property
    def running(self) -> bool:
        return self.state == StepperState.RUNNING

    @property
    def finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_sorted(self) -> bool:
        return self.finished

    @property
    def steps_per_tick(self) -> int:
        return steps_per_tick(self.speed)

    def to_dict(self) -> dict:
        return {
            "algo_key":       self.algo_key,
            "algo_label":     self._algo_info.label,
            "state":          self.state.value,
            "running":        self.running,
            "finished":       self.finished,
            "cursor":         self.cursor,
            "total_steps":    self.total_steps,
            "speed":          self.speed,
            "steps_per_tick": self.steps_per_tick,
            "size":           len(self.dataset),
            "explanation":    self.explanation,
            "pseudocode":     list(self._algo_info.pseudocode),
            "pseudocode_line": self.pseudocode_line,
            **self.dataset.to_dict(),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _lookup(algo_key: str) -> AlgoInfo:
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        return info

    def _execute(self, count: int) -> int:
        ds = self.dataset
        if len(ds) != self._built_size:
            raise RuntimeError(
                f"Sequence was built for size {self._built_size}, dataset has size {len(ds)}"
            )
        end  = min(self.cursor + count, len(self.sequence))
        done = end - self.cursor
        while self.cursor < end:
            step = self.sequence[self.cursor]
            step.apply(ds)
            self.cursor += 1
            self.explanation = step.explain()
            self.pseudocode_line = step.pseudocode_line()
        if self.cursor >= len(self.sequence):
            self._finish()
        return done

    def _finish(self) -> None:
        self.dataset.mark_all_sorted()
        self.state = StepperState.FINISHED
        c = self.dataset.counters
        logger.info(
            "%s finished: size=%d steps=%d comparisons=%d swaps=%d",
            self._algo_info.key, len(self.dataset), len(self.sequence), c.comparisons, c.swaps,
        )
        if self.on_finish:
            self.on_finish(self)
