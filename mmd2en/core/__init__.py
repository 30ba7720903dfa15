#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core package - Core functionality for mmd2en

This package contains the core functionality:
- Config: Configuration management
- Errors: Exceptions raised while talking to external tools
- Note: Data model for documents and processed notes
- Shell: Execution of external tools
"""

from .config import config, Config
from .errors import Mmd2enError, ToolError, ConversionError, MetadataQueryError
from .note import NoteRecord, FileInfo, document_path, file_info, read_document, read_document_bytes
from .shell import ShellRunner, ShellResult
