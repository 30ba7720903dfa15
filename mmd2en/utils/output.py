#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
output.py - Verbose diagnostics for mmd2en
"""

import sys

from ..core.config import config


def vprint(*args, **kwargs):
    """Print to stderr only if verbose mode is enabled."""
    if config["verbose"]:
        kwargs.setdefault("file", sys.stderr)
        print("[VERBOSE]", *args, **kwargs)
