#!/usr/bin/env python3
"""Setup script for semver-value."""

from setuptools import setup, find_packages
from pathlib import Path
import re

# Read version from package without importing it
init_py = Path("semver_value/__init__.py").read_text(encoding="utf-8")
version = re.search(r'^__version__ = "([^"]+)"', init_py, re.MULTILINE).group(1)

# Read long description from README
readme = Path("README.md").read_text(encoding="utf-8")

# Read requirements, skipping blanks and comments
requirements = [
    line.strip()
    for line in Path("semver_value/requirements.txt").read_text().splitlines()
    if line.strip() and not line.strip().startswith("#")
]

setup(
    name="semver-value",
    version=version,
    description="Three segment version values with prefix, text and JSON conversions",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="version semver parsing json",
)
