#!/usr/bin/env python3
"""
Setup script for pyrestrict
"""

from setuptools import setup, find_packages

setup(
    name="pyrestrict",
    version="0.1.0",
    description="Restriction enzyme cut reduction and fragment assembly",
    author="pyrestrict Team",
    packages=find_packages(exclude=["restrict.tests", "restrict.tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "biopython>=1.79",
        "pandas>=1.4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'restrict=restrict.cli.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
