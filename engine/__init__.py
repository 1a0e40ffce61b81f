"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder
"""

from engine.stepper  import (
    Stepper,
    StepperState,
    SPEED_TABLE,
    steps_per_tick,
    MIN_SPEED,
    MAX_SPEED,
    DEFAULT_SPEED,
)
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_TABLE",
    "steps_per_tick",
    "MIN_SPEED",
    "MAX_SPEED",
    "DEFAULT_SPEED",
    "Recorder",
    "RunMetrics",
]
