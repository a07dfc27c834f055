# -*- coding: ascii -*-
"""
Tests for trans-pair structural equivalence.
"""

import unittest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bailer.assignment import LigandAssignment
from bailer.equivalence import (
    trans_pair_key,
    structurally_equal,
    contains_equivalent,
    early_check,
    commit,
    dedupe_assignments,
)


class TestStructuralEquality(unittest.TestCase):

    def test_key_is_sorted_pairs(self):
        a = LigandAssignment(['q', 'r', 'p', 'q', 'p', 'r'])
        self.assertEqual(trans_pair_key(a), (('p', 'q'), ('p', 'r'), ('q', 'r')))

    def test_pair_order_between_pairs_ignored(self):
        a = LigandAssignment(['p', 'q', 'p', 'r', 'q', 'r'])
        b = LigandAssignment(['p', 'r', 'q', 'r', 'p', 'q'])
        self.assertTrue(structurally_equal(a, b))
        self.assertTrue(structurally_equal(b, a))

    def test_label_order_inside_pair_matters(self):
        # Same trans pairs as sets, but (q,p) is not (p,q) under tuple comparison
        a = LigandAssignment(['p', 'q', 'p', 'r', 'q', 'r'])
        b = LigandAssignment(['q', 'p', 'p', 'r', 'q', 'r'])
        self.assertFalse(structurally_equal(a, b))

    def test_different_pairs(self):
        a = LigandAssignment(['p', 'p', 'q', 'q', 'r', 'r'])
        b = LigandAssignment(['p', 'p', 'q', 'r', 'q', 'r'])
        self.assertFalse(structurally_equal(a, b))

    def test_reflexive(self):
        a = LigandAssignment('abcdef')
        self.assertTrue(structurally_equal(a, a.clone()))

    def test_contains_equivalent(self):
        existing = [LigandAssignment(['p', 'p', 'q', 'q', 'r', 'r'])]
        self.assertTrue(contains_equivalent(existing, LigandAssignment(['q', 'q', 'p', 'p', 'r', 'r'])))
        self.assertFalse(contains_equivalent(existing, LigandAssignment(['p', 'p', 'q', 'r', 'q', 'r'])))
        self.assertFalse(contains_equivalent([], existing[0]))


class TestSeenSet(unittest.TestCase):

    def test_early_check_does_not_commit(self):
        seen = set()
        qa = {}
        a = LigandAssignment('abcdef')
        key, is_dup = early_check(a, seen, qa)
        self.assertFalse(is_dup)
        self.assertEqual(seen, set())
        commit(key, seen)
        key2, is_dup2 = early_check(a.clone(), seen, qa)
        self.assertTrue(is_dup2)
        self.assertEqual(key, key2)
        self.assertEqual(qa['dedup_hits'], 1)

    def test_commit_ignores_none(self):
        seen = set()
        commit(None, seen)
        self.assertEqual(seen, set())

    def test_dedupe_keeps_first(self):
        first = LigandAssignment(['p', 'q', 'p', 'r', 'q', 'r'])
        twin = LigandAssignment(['p', 'r', 'q', 'r', 'p', 'q'])
        other = LigandAssignment(['p', 'p', 'q', 'q', 'r', 'r'])
        unique = dedupe_assignments([first, twin, other])
        self.assertEqual(len(unique), 2)
        self.assertIs(unique[0], first)
        self.assertIs(unique[1], other)


if __name__ == '__main__':
    unittest.main()
