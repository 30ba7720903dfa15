#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils package - Utility functions for mmd2en

This package contains various utility functions and helpers:
- Metadata utilities for merging lookup results
- Verbose diagnostic output
"""

from .metadata import (
    flatten_value,
    deduplicate_values,
    merge_values,
    combine_metadata
)
from .output import vprint
