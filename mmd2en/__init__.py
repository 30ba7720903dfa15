#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
mmd2en - Metadata extraction for MultiMarkdown notes sent to Evernote

This package provides functionality for:
- Reading and stripping YAML frontmatter
- Converting legacy ``=`` / ``@`` header lines to MultiMarkdown metadata
- Merging Spotlight and filesystem attributes into metadata fields
- Combining all of the above into one record for the note sink
"""

__version__ = "0.1.0"

# Import core modules
from .core.config import config
from .core.errors import Mmd2enError, ConversionError, MetadataQueryError
from .core.note import NoteRecord
from .core.shell import ShellRunner

# Import processors
from .processors import (
    AggregatingProcessor,
    FilePropertiesProcessor,
    LegacyFrontmatterProcessor,
    SpotlightIndex,
    SpotlightPropertiesProcessor,
    YAMLFrontmatterProcessor,
)
from .processor import Processor
