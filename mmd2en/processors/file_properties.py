#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
file_properties.py - Metadata from filesystem attributes

Attribute names map to getter functions through FILE_ATTRIBUTES. Names are
checked when the processor is configured, and the document is stat'ed once
per call.
"""

import os
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from ..core.note import FileInfo, file_info
from .base_processor import AggregatingProcessor, SourceKeys


def _timestamp(field: str) -> Callable[[FileInfo], Optional[datetime]]:
    def getter(info: FileInfo) -> Optional[datetime]:
        value = getattr(info.stat, field, None)
        return datetime.fromtimestamp(value) if value is not None else None
    return getter


FILE_ATTRIBUTES: Dict[str, Callable[[FileInfo], Any]] = {
    "atime": _timestamp("st_atime"),
    "mtime": _timestamp("st_mtime"),
    "ctime": _timestamp("st_ctime"),
    # Not available on every platform
    "birthtime": _timestamp("st_birthtime"),
    "size": lambda info: info.stat.st_size,
    "path": lambda info: info.path,
    "basename": lambda info: os.path.basename(info.path),
    "dirname": lambda info: os.path.dirname(info.path),
    "extname": lambda info: os.path.splitext(info.path)[1],
    "stem": lambda info: os.path.splitext(os.path.basename(info.path))[0],
}


def file_attribute(info: FileInfo, name: str) -> Any:
    """Read one attribute from a FileInfo record."""
    return FILE_ATTRIBUTES[name](info)


class FilePropertiesProcessor(AggregatingProcessor):
    """
    Aggregates filesystem attributes into metadata fields.

    Example:
        FilePropertiesProcessor({"modified": "mtime", "path": "path"})
    """

    def __init__(self, keys: Optional[Mapping[str, SourceKeys]] = None):
        super().__init__(keys, file_attribute)

        unknown = sorted({
            str(name) for sources in self.keys.values() for name in sources if name not in FILE_ATTRIBUTES
        })
        if unknown:
            raise ValueError(f"Unknown file attributes: {', '.join(unknown)}")

    def call(self, file: Any):
        return super().call(file_info(file))

    __call__ = call
