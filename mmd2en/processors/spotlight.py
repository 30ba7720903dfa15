#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
spotlight.py - Metadata from the macOS Spotlight index

This module queries Spotlight through ``mdls`` and exposes the results
through an AggregatingProcessor, so several Spotlight attributes can feed
one metadata field.
"""

import plistlib
from typing import Any, Mapping, Optional

from ..core.config import config
from ..core.errors import MetadataQueryError
from ..core.note import document_path
from ..core.shell import ShellRunner
from .base_processor import AggregatingProcessor, SourceKeys


class SpotlightIndex:
    """
    Looks up single Spotlight attributes of a file.
    """

    def __init__(self, shell_runner: Optional[ShellRunner] = None, mdls_command: Optional[str] = None):
        """
        Initialize the index.

        Args:
            shell_runner: Runner used to call mdls
            mdls_command: mdls executable (defaults to config value)
        """
        self.shell_runner = shell_runner or ShellRunner()
        self.mdls_command = mdls_command or config["mdls_command"]

    def query(self, path: str, name: str) -> Any:
        """
        Query one attribute of a file.

        Args:
            path: Path of the file
            name: Spotlight attribute name, e.g. ``kMDItemFSName``

        Returns:
            The attribute value, or None if the index has no value for it

        Raises:
            MetadataQueryError: If mdls exits with a non-zero status
        """
        result = self.shell_runner.run([self.mdls_command, "-plist", "-", "-name", name, path])
        if result.status != 0:
            raise MetadataQueryError("mdls", result.status)
        # Attributes without a value are left out of the plist
        attributes = plistlib.loads(result.output)
        return attributes.get(name)


class SpotlightPropertiesProcessor(AggregatingProcessor):
    """
    Aggregates Spotlight attributes into metadata fields.

    Example:
        SpotlightPropertiesProcessor({"tags": ["kMDItemUserTags", "kMDItemKeywords"]})
    """

    def __init__(self, keys: Optional[Mapping[str, SourceKeys]] = None, index: Optional[SpotlightIndex] = None):
        self.index = index or SpotlightIndex()
        super().__init__(keys, lambda path, name: self.index.query(path, name))

    def call(self, file: Any):
        path = document_path(file)
        if path is None:
            raise ValueError(f"Cannot determine the path of {file!r}")
        return super().call(path)

    __call__ = call
