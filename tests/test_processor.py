#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_processor.py - Unit tests for the Processor composition

This module checks source ordering, metadata precedence and the content
handed to the note sink.
"""

import sys
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mmd2en.core.note import NoteRecord
from mmd2en.core.shell import ShellResult
from mmd2en.processor import Processor


class TestProcessor(unittest.TestCase):
    """Test cases for Processor."""

    def setUp(self):
        self.file = tempfile.NamedTemporaryFile('w', suffix='.md', encoding='utf-8', delete=False)
        self.file.close()

        self.attributes = {'kMDItemTitle': 'Spotlight title', 'kMDItemUserTags': ['work']}
        self.index = MagicMock()
        self.index.query.side_effect = lambda path, name: self.attributes.get(name)
        self.runner = MagicMock()
        self.sink = MagicMock()

    def tearDown(self):
        os.remove(self.file.name)

    def write(self, document):
        with open(self.file.name, 'w', encoding='utf-8') as f:
            f.write(document)

    def new_processor(self, **kwargs):
        options = dict(
            shell_runner=self.runner,
            sink=self.sink,
            file_properties={'title': 'stem', 'path': 'path'},
            spotlight_properties={'title': 'kMDItemTitle', 'tags': 'kMDItemUserTags'},
            spotlight_index=self.index,
            spotlight_enabled=True,
        )
        options.update(kwargs)
        return Processor(**options)

    def test_creates_instance_of_shell_runner(self):
        """Test that a ShellRunner is created when none is given."""
        with patch('mmd2en.processor.ShellRunner') as shell_runner:
            processor = Processor(spotlight_enabled=False)
        shell_runner.assert_called_once_with()
        self.assertIs(shell_runner.return_value, processor.shell_runner)
        self.assertIs(shell_runner.return_value, processor.legacy_frontmatter.shell_runner)

    def test_empty_key_mappings_are_rejected(self):
        """Test that explicitly empty key mappings are not replaced by defaults."""
        with self.assertRaises(ValueError):
            self.new_processor(file_properties={})
        with self.assertRaises(ValueError):
            self.new_processor(spotlight_properties={})

    def test_non_utf8_document_is_left_untouched(self):
        """Test that a document that is not UTF-8 yields no content instead of failing."""
        with open(self.file.name, 'wb') as f:
            f.write(b"Body \xff\xfe text\n")

        record = self.new_processor().call(self.file.name)

        self.assertIsNone(record.content)
        self.assertEqual(self.file.name, record.metadata['path'])
        self.runner.run.assert_not_called()

    def test_frontmatter_wins_over_other_sources(self):
        """Test that YAML frontmatter overrides Spotlight and file metadata."""
        self.write("---\ntitle: Frontmatter title\n---\n\nBody\n")

        record = self.new_processor().call(self.file.name)

        self.assertIsInstance(record, NoteRecord)
        self.assertEqual('Frontmatter title', record.metadata['title'])
        self.assertEqual('work', record.metadata['tags'])
        self.assertEqual(self.file.name, record.metadata['path'])
        self.assertEqual('Body', record.content)
        self.runner.run.assert_not_called()

    def test_spotlight_wins_over_file_properties(self):
        self.write("Just a body\n")

        record = self.new_processor().call(self.file.name)

        self.assertEqual('Spotlight title', record.metadata['title'])
        self.assertEqual("Just a body\n", record.content)

    def test_empty_values_do_not_override(self):
        """Test that a source without a value keeps the earlier one."""
        self.attributes = {}
        self.write("Just a body\n")

        record = self.new_processor().call(self.file.name)

        stem = os.path.splitext(os.path.basename(self.file.name))[0]
        self.assertEqual(stem, record.metadata['title'])
        self.assertNotIn('tags', record.metadata)

    def test_legacy_content_is_used_without_yaml_frontmatter(self):
        """Test that converted legacy headers end up in the content."""
        self.write("= My notebook\n@ foo\n\nBody\n")
        self.runner.run.return_value = ShellResult(0, b"Notebook: My notebook\nTags: foo\n\nBody\n")

        record = self.new_processor().call(self.file.name)

        self.assertEqual("Notebook: My notebook\nTags: foo\n\nBody\n", record.content)
        self.assertNotIn('Notebook', record.metadata)

    def test_passes_record_to_sink(self):
        self.write("---\ntags: [a, b]\n---\nBody\n")

        record = self.new_processor().call(self.file.name)

        self.assertEqual(['a', 'b'], record.metadata['tags'])
        self.sink.assert_called_once_with(record.metadata, record.content)

    def test_spotlight_can_be_disabled(self):
        self.write("Body\n")

        record = self.new_processor(spotlight_enabled=False).call(self.file.name)

        self.index.query.assert_not_called()
        self.assertIsNone(record.metadata.get('tags'))

    def test_sources_run_in_order(self):
        """Test the order in which metadata sources are consulted."""
        self.write("Body\n")
        processor = self.new_processor()
        calls = []

        def stage(name, result):
            mock = MagicMock()
            mock.call.side_effect = lambda file: calls.append(name) or result
            return mock

        processor.file_properties = stage('file_properties', {})
        processor.spotlight_properties = stage('spotlight_properties', {})
        processor.legacy_frontmatter = stage('legacy_frontmatter', ({}, "Body\n"))
        processor.yaml_frontmatter = stage('yaml_frontmatter', ({}, None))

        processor.call(self.file.name)

        self.assertEqual(['file_properties', 'spotlight_properties', 'legacy_frontmatter', 'yaml_frontmatter'], calls)


if __name__ == '__main__':
    unittest.main()
