#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
shell.py - Synchronous execution of external tools

ShellRunner is the only place where mmd2en starts processes. Processors
receive it through their constructor so tests can hand in a fake.
"""

import os
import subprocess
from typing import NamedTuple, Sequence, Union

from ..utils.output import vprint


class ShellResult(NamedTuple):
    """Exit status and captured standard output of a finished process."""
    status: int
    output: bytes


class ShellRunner:
    """
    Runs an argument vector to completion.

    Standard output is captured; standard error is left attached to the
    caller's stderr so tool diagnostics stay visible. No shell is involved,
    arguments are passed verbatim.
    """

    def run(self, args: Sequence[Union[str, os.PathLike]]) -> ShellResult:
        """
        Run a command and wait for it.

        Args:
            args: Program name followed by its arguments

        Returns:
            ShellResult with the exit status and stdout bytes
        """
        argv = [os.fspath(arg) for arg in args]
        vprint(f"Running {' '.join(argv)}")
        completed = subprocess.run(argv, stdout=subprocess.PIPE, check=False)
        return ShellResult(completed.returncode, completed.stdout)
