#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metadata.py - Utilities for merging raw metadata values

Lookups return a scalar, a list of scalars or nothing. These helpers turn
several such results into one metadata value.
"""

from typing import Any, Dict, Iterable, List


def flatten_value(value: Any) -> List[Any]:
    """
    Turn a raw lookup result into a list.

    Args:
        value: A scalar, a list or tuple of scalars, or None

    Returns:
        List of items (empty for None)
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def is_blank(value: Any) -> bool:
    """Check whether a merged item carries no information."""
    return value is None or (isinstance(value, str) and value == "")


def deduplicate_values(values: Iterable[Any]) -> List[Any]:
    """
    Deduplicate values, keeping the first occurrence of each.

    Values need not be hashable. Values of different types are never
    duplicates, so 1, True and 1.0 are all kept.

    Args:
        values: Values to deduplicate

    Returns:
        Deduplicated list in original order
    """
    result = []
    for value in values:
        if not any(type(seen) is type(value) and seen == value for seen in result):
            result.append(value)
    return result


def merge_values(raw_values: Iterable[Any]) -> Any:
    """
    Merge several raw lookup results into one metadata value.

    Results are flattened and concatenated in order, blank items are
    dropped and duplicates removed. A single remaining item is returned
    bare; otherwise the list is returned, possibly empty.

    Args:
        raw_values: Raw lookup results, in source key order

    Returns:
        A scalar or a list of scalars
    """
    items = [item for raw in raw_values for item in flatten_value(raw)]
    merged = deduplicate_values(item for item in items if not is_blank(item))
    if len(merged) == 1:
        return merged[0]
    return merged


def combine_metadata(*mappings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combine metadata mappings, later mappings winning on key collisions.

    Blank values (None, empty strings and empty lists) are skipped, so they
    never replace a value found earlier.

    Args:
        *mappings: Metadata mappings in increasing precedence

    Returns:
        Combined metadata mapping
    """
    combined: Dict[str, Any] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            if is_blank(value) or value == []:
                continue
            combined[key] = value
    return combined
