#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_config.py - Unit tests for configuration loading
"""

import sys
import os
import io
import tempfile
import unittest
from contextlib import redirect_stderr
from unittest.mock import patch

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mmd2en.core.config import Config


class TestConfig(unittest.TestCase):
    """Test cases for Config."""

    def setUp(self):
        self.file = tempfile.NamedTemporaryFile('w', suffix='.yaml', encoding='utf-8', delete=False)
        self.file.close()

    def tearDown(self):
        os.remove(self.file.name)

    def write(self, text):
        with open(self.file.name, 'w', encoding='utf-8') as f:
            f.write(text)

    def test_defaults(self):
        config = Config(config_file=self.file.name, use_env=False)
        self.assertEqual('sed', config['sed_command'])
        self.assertEqual('mdls', config['mdls_command'])
        self.assertFalse(config['verbose'])
        self.assertIn('modified', config['file_properties'])

    def test_defaults_are_not_shared(self):
        """Test that changing one instance leaves the defaults alone."""
        config = Config(config_file=self.file.name, use_env=False)
        config['file_properties']['path'] = 'path'
        self.assertNotIn('path', Config.DEFAULTS['file_properties'])

    def test_loads_known_keys_from_file(self):
        """Test that a YAML file overrides defaults and unknown keys are ignored."""
        self.write("sed_command: gsed\nspotlight_properties:\n  name: kMDItemFSName\nunknown: 1\n")
        config = Config(config_file=self.file.name, use_env=False)
        self.assertEqual('gsed', config['sed_command'])
        self.assertEqual({'name': 'kMDItemFSName'}, config['spotlight_properties'])
        self.assertNotIn('unknown', config)

    def test_reports_unreadable_file(self):
        self.write("sed_command: [ not closed\n")
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            config = Config(config_file=self.file.name, use_env=False)
        self.assertEqual('sed', config['sed_command'])
        self.assertIn("Error loading configuration", stderr.getvalue())

    def test_environment_overrides_file(self):
        """Test environment variables and boolean conversion."""
        self.write("mdls_command: /usr/bin/mdls\n")
        env = {'MMD2EN_MDLS': '/opt/mdls', 'MMD2EN_VERBOSE': 'yes', 'MMD2EN_SPOTLIGHT': '0'}
        with patch.dict(os.environ, env), patch('mmd2en.core.config.load_dotenv'):
            config = Config(config_file=self.file.name)
        self.assertEqual('/opt/mdls', config['mdls_command'])
        self.assertIs(True, config['verbose'])
        self.assertIs(False, config['spotlight_enabled'])

    def test_get_with_default(self):
        config = Config(config_file=self.file.name, use_env=False)
        self.assertEqual('fallback', config.get('missing', 'fallback'))
        self.assertEqual(config.to_dict()['sed_command'], config.get('sed_command'))


if __name__ == '__main__':
    unittest.main()
