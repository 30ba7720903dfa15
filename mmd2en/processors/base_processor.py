#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
base_processor.py - Generic metadata aggregation

This module defines AggregatingProcessor, which merges several raw
attribute lookups into single metadata fields. The Spotlight and file
property processors are configured instances of it.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..utils.metadata import merge_values
from ..utils.output import vprint


SourceKeys = Union[str, Sequence[str]]
Lookup = Callable[[Any, Any], Any]


def normalize_keys(keys: Optional[Mapping[str, SourceKeys]]) -> Dict[str, Tuple[Any, ...]]:
    """
    Normalize a key mapping so every target has a tuple of source keys.

    Args:
        keys: Target key to one source key or a sequence of source keys

    Returns:
        Target key to tuple of source keys
    """
    normalized = {}
    for target, sources in (keys or {}).items():
        if isinstance(sources, (list, tuple)):
            normalized[target] = tuple(sources)
        else:
            normalized[target] = (sources,)
    return normalized


class AggregatingProcessor:
    """
    Merges raw lookups per target key into one metadata value.

    For every target key the lookup function is called once per source key.
    The results are flattened, concatenated in source key order, cleared of
    blank items and deduplicated. A single remaining item is returned as a
    bare scalar, anything else as a list.

    Attributes:
        keys: Read-only mapping of target key to tuple of source keys
    """

    def __init__(self, keys: Optional[Mapping[str, SourceKeys]] = None, lookup: Optional[Lookup] = None):
        """
        Initialize the processor.

        Args:
            keys: Target key to one or more source keys
            lookup: Function called as ``lookup(file, source_key)``

        Raises:
            ValueError: If no keys or no lookup function are given
        """
        normalized = normalize_keys(keys)
        if not normalized or not all(normalized.values()):
            raise ValueError("No metadata keys provided")
        if lookup is None or not callable(lookup):
            raise ValueError("No lookup function provided")

        self._keys = MappingProxyType(normalized)
        self._lookup = lookup

    @property
    def keys(self) -> Mapping[str, Tuple[Any, ...]]:
        """Target key to source keys, as configured."""
        return self._keys

    def call(self, file: Any) -> Dict[str, Any]:
        """
        Look up and merge all configured keys for a document.

        Errors raised by the lookup function are not caught.

        Args:
            file: Whatever the lookup function expects as its first argument

        Returns:
            Dictionary of target key to merged value, in configured order
        """
        values = {}
        for target, sources in self._keys.items():
            values[target] = merge_values(self._lookup(file, source) for source in sources)
        vprint(f"{type(self).__name__} retrieved {len(values)} keys")
        return values

    __call__ = call
