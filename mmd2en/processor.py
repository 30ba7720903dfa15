#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
processor.py - Metadata extraction for one note

Processor runs every metadata source over a document and combines the
results into the NoteRecord handed to the note sink.
"""

from typing import Any, Callable, Mapping, Optional

from .core.config import config
from .core.note import NoteRecord
from .core.shell import ShellRunner
from .processors.base_processor import SourceKeys
from .processors.file_properties import FilePropertiesProcessor
from .processors.frontmatter import LegacyFrontmatterProcessor, YAMLFrontmatterProcessor
from .processors.spotlight import SpotlightIndex, SpotlightPropertiesProcessor
from .utils.metadata import combine_metadata
from .utils.output import vprint


NoteSink = Callable[[dict, Optional[str]], Any]


class Processor:
    """
    Collects metadata and final content for a note.

    Sources run in this order, later ones winning on key collisions:
    1. File properties
    2. Spotlight properties (when enabled)
    3. Legacy frontmatter
    4. YAML frontmatter

    The content is the document without its YAML frontmatter if there was
    any, else the document with legacy lines converted to MultiMarkdown
    metadata.
    """

    def __init__(
        self,
        shell_runner: Optional[ShellRunner] = None,
        sink: Optional[NoteSink] = None,
        file_properties: Optional[Mapping[str, SourceKeys]] = None,
        spotlight_properties: Optional[Mapping[str, SourceKeys]] = None,
        spotlight_index: Optional[SpotlightIndex] = None,
        spotlight_enabled: Optional[bool] = None,
    ):
        """
        Initialize the processor.

        Args:
            shell_runner: Runner for the legacy frontmatter conversion
            sink: Called with (metadata, content) for every processed note
            file_properties: Target key to file attribute(s) (defaults to config value)
            spotlight_properties: Target key to Spotlight attribute(s) (defaults to config value)
            spotlight_index: Index used for Spotlight lookups
            spotlight_enabled: Whether to query Spotlight (defaults to config value)
        """
        self.shell_runner = shell_runner or ShellRunner()
        self.sink = sink

        if spotlight_enabled is None:
            spotlight_enabled = config["spotlight_enabled"]
        if file_properties is None:
            file_properties = config["file_properties"]
        if spotlight_properties is None:
            spotlight_properties = config["spotlight_properties"]

        self.file_properties = FilePropertiesProcessor(file_properties)
        self.spotlight_properties = None
        if spotlight_enabled:
            self.spotlight_properties = SpotlightPropertiesProcessor(
                spotlight_properties, index=spotlight_index
            )
        self.legacy_frontmatter = LegacyFrontmatterProcessor(self.shell_runner)
        self.yaml_frontmatter = YAMLFrontmatterProcessor()

    def call(self, file: Any) -> NoteRecord:
        """
        Process one document.

        Args:
            file: A path or a file object exposing its path as ``name``

        Returns:
            NoteRecord with the combined metadata and the final content
        """
        file_metadata = self.file_properties.call(file)
        spotlight_metadata = self.spotlight_properties.call(file) if self.spotlight_properties else {}
        legacy_metadata, legacy_content = self.legacy_frontmatter.call(file)
        yaml_metadata, yaml_content = self.yaml_frontmatter.call(file)

        metadata = combine_metadata(file_metadata, spotlight_metadata, legacy_metadata, yaml_metadata)
        content = yaml_content if yaml_content is not None else legacy_content
        record = NoteRecord(metadata, content)

        vprint(f"Collected metadata keys: {', '.join(metadata) or '(none)'}")
        if self.sink is not None:
            self.sink(record.metadata, record.content)
        return record

    __call__ = call
