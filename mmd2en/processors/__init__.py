#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Processors package - Metadata sources for mmd2en

This package contains the individual metadata sources:
- Frontmatter: YAML frontmatter and legacy header lines
- Aggregating: generic merging of attribute lookups
- Spotlight: attributes from the macOS Spotlight index
- File properties: filesystem attributes
"""

from .base_processor import AggregatingProcessor
from .frontmatter import YAMLFrontmatterProcessor, LegacyFrontmatterProcessor
from .spotlight import SpotlightIndex, SpotlightPropertiesProcessor
from .file_properties import FilePropertiesProcessor, FILE_ATTRIBUTES
