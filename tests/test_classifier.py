#!/usr/bin/env python3
"""
Tests for classify and ClassifierMap.
"""

import unittest
from pushstream import Stream, StreamConfig, KeyCoercion, ClassifierMap


def collect(stream):
    values = []
    stream.listen(values.append)
    return values


class TestClassify(unittest.TestCase):
    """Test dynamic classification into child streams."""
    
    def setUp(self):
        self.source = Stream()
    
    def tearDown(self):
        StreamConfig.reset()
    
    def test_late_subscriber_misses_earlier_values(self):
        groups = self.source.classify(lambda v: v[0])
        self.source.push("a1")
        a_out = collect(groups.get("a"))
        b_out = collect(groups.get("b"))
        
        self.source.push("b2")
        self.source.push("a3")
        
        self.assertIsInstance(groups, ClassifierMap)
        self.assertEqual(a_out, ["a3"])
        self.assertEqual(b_out, ["b2"])
    
    def test_children_created_lazily(self):
        """A child exists only after its first value arrives."""
        groups = self.source.classify(lambda v: v % 3)
        self.assertNotIn(0, groups)
        self.assertEqual(len(groups), 0)
        
        self.source.push(3)
        self.source.push(6)
        
        self.assertIn(0, groups)
        self.assertNotIn(1, groups)
        self.assertEqual(list(groups), [0])
    
    def test_get_is_idempotent(self):
        groups = self.source.classify(len)
        first = groups.get(2)
        self.assertIs(groups.get(2), first)
        self.assertEqual(list(groups.keys()), [2])
    
    def test_subscribe_before_first_value(self):
        """get() may create a child ahead of any matching value."""
        groups = self.source.classify(lambda v: v[0])
        a_out = collect(groups.get("a"))
        
        for value in ["a1", "b2", "a3"]:
            self.source.push(value)
        
        self.assertEqual(a_out, ["a1", "a3"])
        self.assertEqual({key for key, _ in groups.items()}, {"a", "b"})
    
    def test_distinct_keys_distinct_children(self):
        groups = self.source.classify(lambda v: v > 0)
        self.source.push(1)
        self.source.push(-1)
        self.assertIsNot(groups.get(True), groups.get(False))
        self.assertEqual(groups.parent, self.source)
    
    def test_children_record_parent(self):
        groups = self.source.classify(str)
        self.source.push(1)
        self.assertEqual(groups.get("1").upstreams, (self.source,))
    
    def test_unhashable_key(self):
        groups = self.source.classify(lambda v: [v])
        with self.assertRaises(TypeError):
            self.source.push(1)
        self.assertEqual(len(groups), 0)
        self.assertNotIn([1], groups)
    
    def test_keys_not_coerced_by_default(self):
        groups = self.source.classify(lambda v: v)
        self.source.push(1)
        self.source.push("1")
        self.assertEqual(len(groups), 2)
    
    def test_string_coercion(self):
        """KeyCoercion.STR merges keys that print alike."""
        StreamConfig.set_defaults(key_coercion=KeyCoercion.STR)
        groups = self.source.classify(lambda v: v)
        out = collect(groups.get(1))
        
        self.source.push(1)
        self.source.push("1")
        
        self.assertEqual(list(groups), ["1"])
        self.assertEqual(out, [1, "1"])
    
    def test_constant_classifier(self):
        groups = self.source.classify("all")
        out = collect(groups.get("all"))
        self.source.push(1)
        self.source.push(2)
        self.assertEqual(out, [1, 2])
    
    def test_classifier_with_context(self):
        buckets = {"x": "letters", "1": "digits"}
        groups = self.source.classify(lambda table, v: table[v], buckets)
        self.source.push("x")
        self.source.push("1")
        self.assertEqual(sorted(groups), ["digits", "letters"])
    
    def test_coercion_fixed_at_construction(self):
        """Changing the config later does not split an existing key."""
        groups = self.source.classify(lambda v: v)
        self.source.push(1)
        
        StreamConfig.set_defaults(key_coercion=KeyCoercion.STR)
        self.source.push(1)
        
        self.assertEqual(list(groups), [1])
        self.source.push("1")
        self.assertEqual(list(groups), [1, "1"])
    
    def test_explicit_key_coercion(self):
        """A per-map coercion overrides the config default."""
        groups = self.source.classify(lambda v: v, key_coercion=KeyCoercion.STR)
        self.source.push(1)
        self.source.push("1")
        self.assertEqual(list(groups), ["1"])
        self.assertIs(groups.get(1), groups.get("1"))
    
    def test_child_end_isolated(self):
        """Ending one child leaves its siblings and the parent open."""
        groups = self.source.classify(lambda v: v % 2)
        odd_out = collect(groups.get(1))
        even_out = collect(groups.get(0))
        groups.get(1).end()
        
        for i in range(4):
            self.source.push(i)
        
        self.assertEqual(odd_out, [])
        self.assertEqual(even_out, [0, 2])
        self.assertFalse(self.source.ended)


if __name__ == "__main__":
    unittest.main()
