#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for mmd2en.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="mmd2en",
    version="0.1.0",
    description="Metadata extraction for MultiMarkdown notes sent to Evernote",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: MacOS :: MacOS X",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
        "python-dotenv>=0.19.0",
    ],
)
