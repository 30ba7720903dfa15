#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
note.py - Core data model for mmd2en

This module defines the values that flow between processors: the way a
document is addressed on disk, the stat record file properties are read
from, and the final note record handed to the note sink.
"""

from typing import Any, Dict, List, NamedTuple, Optional, Union
import os


# A metadata value is a single scalar or a duplicate-free list of scalars
MetadataValue = Union[Any, List[Any]]
Metadata = Dict[str, MetadataValue]


class NoteRecord(NamedTuple):
    """
    Metadata and content of one processed document.

    Attributes:
        metadata: Field name to scalar or list of scalars, no None values
        content: Final document text, or None when nothing rewrote the
            document and the original should be used unchanged
    """
    metadata: Metadata
    content: Optional[str]


class FileInfo(NamedTuple):
    """Path and stat record of a document, taken once per lookup pass."""
    path: str
    stat: os.stat_result


def document_path(file: Any) -> Optional[str]:
    """
    Resolve the filesystem path of a document.

    Args:
        file: A path, or a file object exposing its path as ``name``

    Returns:
        The path as a string, or None if the document has no usable path
    """
    if isinstance(file, (str, bytes, os.PathLike)):
        path = os.fspath(file)
    else:
        path = getattr(file, "name", None)
    if isinstance(path, bytes):
        path = os.fsdecode(path)
    if not isinstance(path, str) or not path:
        return None
    return path


def file_info(file: Any) -> FileInfo:
    """
    Stat a document.

    Open file objects are stat'ed through their descriptor, everything else
    through its path. OSError propagates.

    Args:
        file: A path or an open file object

    Returns:
        FileInfo for the document
    """
    path = document_path(file)
    fileno = getattr(file, "fileno", None)
    if fileno is not None and not getattr(file, "closed", True):
        return FileInfo(path or "", os.fstat(fileno()))
    if path is None:
        raise ValueError(f"Cannot determine the path of {file!r}")
    return FileInfo(path, os.stat(path))


def read_document(file: Any) -> Optional[str]:
    """
    Read a document's text from disk.

    The document is reopened by path, so the caller's handle position is
    left alone. A leading byte-order mark is dropped and line endings are
    kept as they are.

    Args:
        file: A path or a file object exposing its path as ``name``

    Returns:
        The document text, or None if it cannot be read
    """
    path = document_path(file)
    if path is None:
        return None
    try:
        with open(path, 'r', encoding='utf-8-sig', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None


def read_document_bytes(file: Any) -> Optional[bytes]:
    """
    Read a document's raw bytes from disk, as external tools see them.

    Args:
        file: A path or a file object exposing its path as ``name``

    Returns:
        The document bytes, or None if it cannot be opened
    """
    path = document_path(file)
    if path is None:
        return None
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError:
        return None
