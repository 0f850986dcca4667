# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Setup configuration for qa-chunking package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="qa-chunking",
    version="0.1.0",
    author="QA-Chunking Contributors",
    description="Question/answer aware chunking of chat conversations for summarization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "jsonschema>=4.18.0",  # Message record validation
        "prometheus-client>=0.19.0",  # Prometheus metrics backend
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
