from enum import Enum


# ---------------------------------------------------------------------------
# Mark Enum — per-index annotation, maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class Mark(Enum):
    DEFAULT   = "default"     # plain bar
    COMPARING = "comparing"   # amber — being read / compared right now
    SWAPPING  = "swapping"    # red — just written / exchanged
    SORTED    = "sorted"      # green — settled in its final position
