"""
Tests for the sequence generators.

Every generator must produce a Step list that, replayed in order on the
permutation it was built from, leaves the values sorted ascending.
"""

import itertools
import random
import unittest

from dataset import Dataset, Mark, SIZE_OPTIONS
from algorithms import REGISTRY, get_algorithm, list_algorithms, algorithms_by_tag
from algorithms.step import FinishStep, StepBuilder
from algorithms.bubble import bubble_sort, BubbleStep
from algorithms.selection import selection_sort
from algorithms.insertion import insertion_sort
from algorithms.merge import merge_sort
from algorithms.heapsort import heap_sort, HeapCheckpoint


def replay(fn, values):
    """Build with `fn` on a fresh Dataset and apply every step."""
    ds  = Dataset.from_values(values)
    seq = fn(ds)
    for step in seq:
        step.apply(ds)
    return ds, seq


class TestSortCorrectness(unittest.TestCase):

    def test_all_algorithms_all_sizes(self):
        rng   = random.Random(1234)
        sizes = sorted(set(SIZE_OPTIONS) | set(range(1, 11)))
        for info in list_algorithms():
            for size in sizes:
                for _ in range(5):
                    values = list(range(1, size + 1))
                    rng.shuffle(values)
                    with self.subTest(algo=info.key, values=values):
                        ds, _ = replay(info.fn, values)
                        self.assertEqual(ds.values, list(range(1, size + 1)))
                        self.assertEqual(ds.marks, [Mark.SORTED] * size)

    def test_every_permutation_of_small_sizes(self):
        for info in list_algorithms():
            for size in range(1, 6):
                for perm in itertools.permutations(range(1, size + 1)):
                    with self.subTest(algo=info.key, perm=perm):
                        ds, _ = replay(info.fn, perm)
                        self.assertEqual(ds.values, sorted(perm))

    def test_sorted_and_reversed_inputs(self):
        for info in list_algorithms():
            for values in (list(range(1, 65)), list(range(64, 0, -1))):
                with self.subTest(algo=info.key, first=values[0]):
                    ds, _ = replay(info.fn, values)
                    self.assertEqual(ds.values, list(range(1, 65)))


class TestSequenceShape(unittest.TestCase):

    def test_sequences_end_with_finish_step(self):
        for info in list_algorithms():
            ds = Dataset(16, rng=random.Random(3))
            seq = info.fn(ds)
            self.assertIsInstance(seq[-1], FinishStep, info.key)

    def test_generation_does_not_touch_live_dataset(self):
        for info in list_algorithms():
            ds = Dataset(32, rng=random.Random(9))
            before = list(ds.values)
            info.fn(ds)
            self.assertEqual(ds.values, before, info.key)
            self.assertEqual(ds.counters.comparisons, 0, info.key)
            self.assertEqual(ds.counters.swaps, 0, info.key)

    def test_size_one_is_single_finish_step(self):
        for info in list_algorithms():
            ds = Dataset.from_values([1])
            self.assertEqual(info.fn(ds), [FinishStep()], info.key)

    def test_data_independent_schedule_depends_only_on_size(self):
        a = Dataset.from_values([5, 3, 8, 1, 7, 2, 6, 4])
        b = Dataset.from_values([1, 2, 3, 4, 5, 6, 7, 8])
        for fn in (bubble_sort, selection_sort, insertion_sort, merge_sort):
            self.assertEqual(fn(a), fn(b), fn.__name__)

    def test_every_step_explains_itself(self):
        for info in list_algorithms():
            ds = Dataset(8, rng=random.Random(5))
            for step in info.fn(ds):
                self.assertTrue(step.explain(), info.key)

    def test_every_step_points_at_its_pseudocode(self):
        for info in list_algorithms():
            ds = Dataset(16, rng=random.Random(9))
            seq = info.fn(ds)
            for step in seq[:-1]:
                line = step.pseudocode_line()
                self.assertTrue(0 <= line < len(info.pseudocode), (info.key, step))
                self.assertTrue(info.pseudocode[line].strip(), (info.key, line))
            self.assertEqual(seq[-1].pseudocode_line(), -1)

    def test_heap_checkpoints_follow_the_operation(self):
        seq = heap_sort(Dataset.from_values([2, 1, 3]))
        self.assertEqual([s.pseudocode_line() for s in seq],
                         [10, 2, 4, 5, 4, 5, -1])

    def test_step_builder_appends_finish(self):
        sb = StepBuilder()
        sb.add(BubbleStep(pass_no=0, j=0))
        self.assertEqual(len(sb), 1)
        self.assertEqual(sb.build(), [BubbleStep(pass_no=0, j=0), FinishStep()])


class TestCounters(unittest.TestCase):

    def test_counters_never_decrease(self):
        for info in list_algorithms():
            ds  = Dataset(32, rng=random.Random(11))
            seq = info.fn(ds)
            prev = (0, 0)
            for step in seq:
                step.apply(ds)
                cur = (ds.counters.comparisons, ds.counters.swaps)
                self.assertGreaterEqual(cur[0], prev[0], info.key)
                self.assertGreaterEqual(cur[1], prev[1], info.key)
                prev = cur

    def test_bubble_scenario(self):
        ds, seq = replay(bubble_sort, [3, 1, 4, 2])
        self.assertEqual(ds.values, [1, 2, 3, 4])
        self.assertEqual(ds.counters.comparisons, 6)
        # [3,1,4,2] has three inversions; bubble sort removes one per swap
        self.assertEqual(ds.counters.swaps, 3)
        self.assertEqual(len(seq), 7)

    def test_selection_comparisons_are_quadratic(self):
        ds, _ = replay(selection_sort, [4, 3, 2, 1, 8, 7, 6, 5])
        self.assertEqual(ds.counters.comparisons, 8 * 7 // 2)

    def test_insertion_on_sorted_input(self):
        ds, _ = replay(insertion_sort, list(range(1, 11)))
        self.assertEqual(ds.counters.comparisons, 0)
        self.assertEqual(ds.counters.swaps, 0)

    def test_insertion_counts_one_comparison_per_shift(self):
        values = list(range(1, 33))
        random.Random(8).shuffle(values)
        ds, _ = replay(insertion_sort, values)
        self.assertEqual(ds.counters.comparisons, ds.counters.swaps)

    def test_insertion_swaps_equal_inversions(self):
        values = [2, 4, 1, 3]
        ds, _  = replay(insertion_sort, values)
        self.assertEqual(ds.counters.swaps, 3)

    def test_merge_on_sorted_input_never_swaps(self):
        ds, _ = replay(merge_sort, list(range(1, 17)))
        self.assertEqual(ds.counters.swaps, 0)

    def test_size_one_counts_nothing(self):
        for info in list_algorithms():
            ds, _ = replay(info.fn, [1])
            self.assertEqual(ds.counters.comparisons, 0, info.key)
            self.assertEqual(ds.counters.swaps, 0, info.key)
            self.assertEqual(ds.marks, [Mark.SORTED])


class TestStepAnnotations(unittest.TestCase):

    def test_bubble_step_marks_pair_and_settled_suffix(self):
        ds = Dataset.from_values([2, 1, 3, 4])
        BubbleStep(pass_no=1, j=0).apply(ds)
        self.assertEqual(ds.values, [1, 2, 3, 4])
        self.assertEqual(ds.marks, [Mark.SWAPPING, Mark.SWAPPING, Mark.DEFAULT, Mark.SORTED])

    def test_bubble_step_without_exchange(self):
        ds = Dataset.from_values([1, 2, 3])
        BubbleStep(pass_no=0, j=1).apply(ds)
        self.assertEqual(ds.marks, [Mark.DEFAULT, Mark.COMPARING, Mark.COMPARING])
        self.assertEqual(ds.counters.swaps, 0)


class TestHeapCheckpoints(unittest.TestCase):

    def test_checkpoints_carry_permutations(self):
        ds  = Dataset(16, rng=random.Random(21))
        seq = heap_sort(ds)
        for step in seq[:-1]:
            self.assertIsInstance(step, HeapCheckpoint)
            self.assertEqual(sorted(step.values), list(range(1, 17)))

    def test_checkpoint_overwrites_live_values(self):
        ds = Dataset.from_values([1, 2, 3])
        HeapCheckpoint(values=(3, 1, 2), active=0, probe=2, sorted_from=2,
                       comparisons=2, swaps=1).apply(ds)
        self.assertEqual(ds.values, [3, 1, 2])
        self.assertEqual(ds.marks, [Mark.SWAPPING, Mark.DEFAULT, Mark.COMPARING])
        self.assertEqual(ds.counters.to_dict(), {"comparisons": 2, "swaps": 1})

    def test_first_checkpoint_after_last_is_sorted(self):
        ds  = Dataset(32, rng=random.Random(4))
        seq = heap_sort(ds)
        self.assertEqual(list(seq[-2].values), list(range(1, 33)))


class TestRegistry(unittest.TestCase):

    def test_six_algorithms_in_order(self):
        self.assertEqual(
            list(REGISTRY), ["bubble", "selection", "insertion", "merge", "quick", "heap"]
        )

    def test_lookup(self):
        self.assertEqual(get_algorithm("merge").label, "Merge Sort")
        self.assertIsNone(get_algorithm("bogo"))

    def test_data_dependent_flags(self):
        dependent = [a.key for a in list_algorithms() if a.data_dependent]
        self.assertEqual(dependent, ["quick", "heap"])

    def test_by_tag(self):
        keys = [a.key for a in algorithms_by_tag("stable")]
        self.assertEqual(keys, ["bubble", "insertion", "merge"])

    def test_to_dict_is_json_ready(self):
        card = get_algorithm("heap").to_dict()
        self.assertNotIn("fn", card)
        self.assertEqual(card["complexity_time"], "O(n log n)")


if __name__ == "__main__":
    unittest.main()
