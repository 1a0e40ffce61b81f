"""
Tests for quicksort's recompute-on-live replay.

The generator partitions a shadow copy; each PartitionStep re-runs the
same partition on the live array.  After K steps the live values must
equal the shadow values after K partitions, for every K.
"""

import dataclasses
import random
import unittest

from dataset import Dataset
from algorithms.step import FinishStep
from algorithms.quicksort import quick_sort, shadow_trace, partition, PartitionStep


class TestShadowLiveConsistency(unittest.TestCase):

    def _check(self, values):
        ds    = Dataset.from_values(values)
        trace = [(lo, hi, list(shadow)) for lo, hi, shadow in shadow_trace(values)]
        seq   = quick_sort(ds)

        self.assertEqual(len(seq), len(trace) + 1)
        self.assertIsInstance(seq[-1], FinishStep)
        for k, (step, (lo, hi, shadow)) in enumerate(zip(seq, trace)):
            self.assertEqual((step.lo, step.hi), (lo, hi))
            step.apply(ds)
            self.assertEqual(ds.values, shadow, f"diverged after step {k + 1}")

    def test_fixed_permutation(self):
        self._check([5, 9, 1, 7, 3, 10, 2, 8, 4, 6])

    def test_seeded_random_permutations(self):
        rng = random.Random(2024)
        for size in (2, 3, 8, 16, 32, 64, 100):
            values = list(range(1, size + 1))
            rng.shuffle(values)
            with self.subTest(size=size):
                self._check(values)

    def test_sorted_input_worst_case(self):
        self._check(list(range(1, 101)))

    def test_shadow_trace_does_not_mutate_input(self):
        values = [3, 1, 2]
        list(shadow_trace(values))
        self.assertEqual(values, [3, 1, 2])


class TestPartitionStep(unittest.TestCase):

    def test_holds_only_the_range(self):
        names = [f.name for f in dataclasses.fields(PartitionStep)]
        self.assertEqual(names, ["lo", "hi"])

    def test_partition_places_pivot(self):
        values = [7, 2, 9, 4, 5]
        p = partition(values, 0, 4)
        self.assertEqual(values[p], 5)
        self.assertTrue(all(v <= 5 for v in values[:p]))
        self.assertTrue(all(v > 5 for v in values[p + 1:]))

    def test_live_partition_counts(self):
        ds = Dataset.from_values([3, 1, 2])
        PartitionStep(lo=0, hi=2).apply(ds)
        # pivot 2: compare 3 (stay), compare 1 (hit, one swap); pivot placement uncounted
        self.assertEqual(ds.values, [1, 2, 3])
        self.assertEqual(ds.counters.comparisons, 2)
        self.assertEqual(ds.counters.swaps, 1)

    def test_in_place_hits_count_as_swaps(self):
        ds = Dataset.from_values([1, 2, 3])
        PartitionStep(lo=0, hi=2).apply(ds)
        # both hits have i == j and move nothing; they still count
        self.assertEqual(ds.values, [1, 2, 3])
        self.assertEqual(ds.counters.comparisons, 2)
        self.assertEqual(ds.counters.swaps, 2)


if __name__ == "__main__":
    unittest.main()
