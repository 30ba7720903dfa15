#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
frontmatter.py - Frontmatter detection and conversion

This module handles the two header syntaxes a note can carry:
- YAML frontmatter between two ``---`` lines, parsed into metadata
- legacy ``= Notebook`` / ``@ tags`` lines, rewritten to MultiMarkdown
  metadata lines for the MultiMarkdown parser to pick up later

Neither processor ever writes to the document.
"""

import re
from typing import Any, Dict, Optional, Tuple

import yaml

from ..core.config import config
from ..core.errors import ConversionError
from ..core.note import document_path, read_document, read_document_bytes
from ..core.shell import ShellRunner
from ..utils.output import vprint


FRONTMATTER_MARKER = "---"

BYTE_ORDER_MARK = "\ufeff"

# sed expressions turning legacy lines into MultiMarkdown metadata
LEGACY_SUBSTITUTIONS = (
    "s/^= /Notebook: /",
    "s/^@ /Tags: /",
)

LEGACY_LINE = re.compile(r'^[=@] ')


class YAMLFrontmatterProcessor:
    """
    Reads YAML frontmatter and strips it from the content.

    A block is only recognised when the very first line is ``---``; it ends
    at the next line consisting of ``---`` alone.
    """

    def call(self, file: Any) -> Tuple[Dict[str, Any], Optional[str]]:
        """
        Parse the frontmatter of a document.

        Args:
            file: A path or a file object exposing its path as ``name``

        Returns:
            tuple: (metadata, content_after_frontmatter) if frontmatter was
            found, else ({}, None) meaning the document is untouched
        """
        text = read_document(file)
        if text is None:
            vprint(f"Cannot read {file!r}, assuming no frontmatter")
            return {}, None

        lines = text.splitlines(keepends=True)
        if not lines or lines[0].rstrip() != FRONTMATTER_MARKER:
            return {}, None

        # find closing ---
        end_idx = next((i for i in range(1, len(lines)) if lines[i].rstrip() == FRONTMATTER_MARKER), None)
        if end_idx is None:
            return {}, None

        try:
            loaded = yaml.safe_load("".join(lines[1:end_idx]))
        except yaml.YAMLError as e:
            vprint(f"Error parsing frontmatter for {document_path(file)}: {str(e)}")
            return {}, None

        metadata = {}
        if isinstance(loaded, dict):
            metadata = {str(key): value for key, value in loaded.items() if value is not None}

        content = "".join(lines[end_idx + 1:]).strip("\r\n")
        vprint(f"Found YAML frontmatter with {len(metadata)} keys")
        return metadata, content

    __call__ = call


class LegacyFrontmatterProcessor:
    """
    Converts legacy sigil lines to MultiMarkdown metadata.

    ``= <notebook>`` becomes ``Notebook: <notebook>`` and ``@ <tags>``
    becomes ``Tags: <tags>``. The conversion is done by ``sed`` over the
    whole document; the result stays in the content, so the returned
    metadata is always empty.
    """

    def __init__(self, shell_runner: Optional[ShellRunner] = None, sed_command: Optional[str] = None):
        """
        Initialize the processor.

        Args:
            shell_runner: Runner used to call sed
            sed_command: sed executable (defaults to config value)
        """
        self.shell_runner = shell_runner or ShellRunner()
        self.sed_command = sed_command or config["sed_command"]

    def call(self, file: Any) -> Tuple[Dict[str, Any], Optional[str]]:
        """
        Convert the legacy header of a document.

        Args:
            file: A path or a file object exposing its path as ``name``

        Returns:
            tuple: ({}, converted_content) if legacy lines were found,
            ({}, None) if the document is not UTF-8, else
            ({}, original_content)

        Raises:
            ConversionError: If sed exits with a non-zero status
        """
        # Detection runs on the bytes sed sees, byte-order mark included
        raw = read_document_bytes(file)
        if raw is not None:
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                vprint(f"{document_path(file)} is not UTF-8, leaving it untouched")
                return {}, None
            if not has_legacy_header(text):
                return {}, text[1:] if text.startswith(BYTE_ORDER_MARK) else text

        # A document that cannot be opened is handed to sed as well; it reports the failure
        path = document_path(file)
        args = [self.sed_command]
        for expression in LEGACY_SUBSTITUTIONS:
            args.extend(["-e", expression])
        args.append(path if path is not None else "")

        result = self.shell_runner.run(args)
        if result.status != 0:
            raise ConversionError("sed", result.status)

        try:
            content = result.output.decode("utf-8-sig")
        except UnicodeDecodeError:
            vprint(f"sed output for {path} is not UTF-8, leaving it untouched")
            return {}, None

        vprint(f"Converted legacy frontmatter in {path}")
        return {}, content

    __call__ = call


def has_legacy_header(text: str) -> bool:
    """
    Check whether a document starts with legacy sigil lines.

    Only the head block is considered, i.e. the lines before the first
    blank line.

    Args:
        text: Document text

    Returns:
        True if a sigil line is part of the head block
    """
    for line in text.splitlines():
        if not line.strip():
            return False
        if LEGACY_LINE.match(line):
            return True
    return False
