#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
errors.py - Exceptions raised by mmd2en

Misconfiguration is reported with ValueError; everything raised while
talking to external tools derives from Mmd2enError.
"""


class Mmd2enError(Exception):
    """Base error for mmd2en."""


class ToolError(Mmd2enError, RuntimeError):
    """An external tool exited with a non-zero status."""

    def __init__(self, tool: str, status: int):
        self.tool = tool
        self.status = status
        super().__init__(f"`{tool}` exited with status {status}")


class ConversionError(ToolError):
    """Legacy frontmatter could not be converted."""


class MetadataQueryError(ToolError):
    """The Spotlight index could not be queried."""
