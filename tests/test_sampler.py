"""
Tests for game/sampler.py.

Coverage:
  - sample_categories → distinct output, exact pool, insufficient pool,
                        injected random source, pool left untouched
"""

import random
import unittest

from jeopardy.game.sampler import InsufficientPoolError, sample_categories
from jeopardy.models.models import Category, Clue


def _make_pool(size):
    return {
        cat_id: Category(cat_id, f"Category {cat_id}", [Clue(cat_id * 100 + n, f"q{n}", f"a{n}") for n in range(5)])
        for cat_id in range(1, size + 1)
    }


class TestSampleCategories(unittest.TestCase):

    def test_returns_distinct_categories(self):
        """Over many seeds the sample always has k pairwise distinct categories."""
        pool = _make_pool(10)
        for seed in range(200):
            sample = sample_categories(pool, 6, random.Random(seed).randrange)
            ids = [category.category_id for category in sample]
            self.assertEqual(len(ids), 6)
            self.assertEqual(len(set(ids)), 6)
            self.assertTrue(set(ids) <= set(pool))

    def test_pool_equal_to_count_returns_whole_pool(self):
        pool = _make_pool(6)
        sample = sample_categories(pool, 6, random.Random(3).randrange)
        self.assertEqual({c.category_id for c in sample}, set(pool))

    def test_insufficient_pool_raises(self):
        pool = _make_pool(4)
        with self.assertRaises(InsufficientPoolError) as context:
            sample_categories(pool, 6)
        self.assertEqual(context.exception.available, 4)
        self.assertEqual(context.exception.required, 6)

    def test_empty_pool_raises(self):
        with self.assertRaises(InsufficientPoolError):
            sample_categories({}, 6)

    def test_repeated_indexes_are_rejected(self):
        """A scripted source repeating indexes only contributes each category once, in draw order."""
        pool = _make_pool(5)
        draws = iter([2, 2, 0, 2, 0, 4])
        sample = sample_categories(pool, 3, lambda n: next(draws))
        self.assertEqual([c.category_id for c in sample], [3, 1, 5])

    def test_random_index_bound_is_pool_size(self):
        pool = _make_pool(7)
        bounds = []

        def rand_index(n):
            bounds.append(n)
            return len(bounds) - 1

        sample_categories(pool, 3, rand_index)
        self.assertEqual(bounds, [7, 7, 7])

    def test_accepts_sequence_pool(self):
        pool = list(_make_pool(6).values())
        sample = sample_categories(pool, 6, random.Random(1).randrange)
        self.assertEqual(len({c.category_id for c in sample}), 6)

    def test_sequence_with_repeated_category_counts_once(self):
        categories = list(_make_pool(5).values())
        with self.assertRaises(InsufficientPoolError):
            sample_categories(categories + [categories[0]], 6)

    def test_pool_is_not_modified(self):
        pool = _make_pool(10)
        before = dict(pool)
        sample_categories(pool, 6, random.Random(7).randrange)
        self.assertEqual(pool, before)

    def test_seeded_source_is_deterministic(self):
        pool = _make_pool(10)
        first = sample_categories(pool, 6, random.Random(42).randrange)
        second = sample_categories(pool, 6, random.Random(42).randrange)
        self.assertEqual([c.category_id for c in first], [c.category_id for c in second])

    def test_negative_count_raises(self):
        with self.assertRaises(ValueError):
            sample_categories(_make_pool(3), -1)

    def test_zero_count_returns_empty(self):
        self.assertEqual(sample_categories(_make_pool(3), 0), [])


if __name__ == "__main__":
    unittest.main()
