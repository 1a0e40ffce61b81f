"""
dataset/
--------
Core data layer.  Public API:

    from dataset import Dataset, Counters, Mark
    from dataset import SIZE_OPTIONS, DEFAULT_SIZE
"""

from dataset.mark     import Mark
from dataset.counters import Counters
from dataset.dataset  import Dataset, SIZE_OPTIONS, DEFAULT_SIZE

__all__ = [
    "Mark",
    "Counters",
    "Dataset",
    "SIZE_OPTIONS",
    "DEFAULT_SIZE",
]
