# -*- coding: ascii -*-
"""Tests for YAML configuration loading."""

import os
import shutil
import tempfile
import unittest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bailer.config import DEFAULT_CONFIG, deep_merge, load_config
from bailer.errors import ConfigError


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, text):
        path = os.path.join(self.tmpdir, "cfg.yaml")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_defaults(self):
        config = load_config()
        self.assertEqual(config, DEFAULT_CONFIG)
        config['engine']['dedup'] = False
        self.assertTrue(DEFAULT_CONFIG['engine']['dedup'])

    def test_merge(self):
        path = self._write("engine:\n  enantiomers: false\nlogging:\n  level: debug\n")
        config = load_config(path)
        self.assertFalse(config['engine']['enantiomers'])
        self.assertTrue(config['engine']['dedup'])
        self.assertEqual(config['logging']['level'], 'DEBUG')
        self.assertEqual(config['output']['outdir'], '.')

    def test_empty_file(self):
        self.assertEqual(load_config(self._write("")), DEFAULT_CONFIG)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config(os.path.join(self.tmpdir, "nope.yaml"))

    def test_not_a_mapping(self):
        with self.assertRaises(ConfigError):
            load_config(self._write("- a\n- b\n"))

    def test_bad_yaml(self):
        with self.assertRaises(ConfigError):
            load_config(self._write("engine: [unclosed\n"))

    def test_bad_level(self):
        with self.assertRaises(ConfigError):
            load_config(self._write("logging:\n  level: LOUD\n"))

    def test_bad_table(self):
        with self.assertRaises(ConfigError):
            load_config(self._write("output:\n  table: out.xlsx\n"))

    def test_repo_config_loads(self):
        path = Path(__file__).parent.parent / "configs" / "bailer.yaml"
        config = load_config(path)
        self.assertEqual(config['engine'], {'dedup': True, 'enantiomers': True})


class TestDeepMerge(unittest.TestCase):

    def test_nested(self):
        merged = deep_merge({'a': {'x': 1, 'y': 2}, 'b': 3}, {'a': {'y': 5}})
        self.assertEqual(merged, {'a': {'x': 1, 'y': 5}, 'b': 3})


if __name__ == '__main__':
    unittest.main()
