#!/usr/bin/env python
"""
Setup script for outcomes - optional values and recoverable errors as data
"""

from setuptools import setup, find_packages
import os
import re

# Read the version from the outcomes/__init__.py file
with open(os.path.join("outcomes", "__init__.py"), "r") as f:
    version_match = re.search(r"__version__\s*=\s*['\"]([^'\"]*)['\"]", f.read())
    version = version_match.group(1) if version_match else "0.1.0"

# Try to use README.rst first (for PyPI), fall back to README.md
long_description = ""
content_type = "text/x-rst"
if os.path.exists("README.rst"):
    with open("README.rst", "r", encoding="utf-8") as f:
        long_description = f.read()
elif os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as f:
        long_description = f.read()
    content_type = "text/markdown"

# Define dependencies
install_requires = [
    "PyYAML>=6.0",
]

# Optional dependencies
extras_require = {
    "dev": [
        "pytest>=7.3.1",
        "pytest-cov>=4.1.0",
        "black>=23.3.0",
        "isort>=5.12.0",
    ],
}

setup(
    name="outcomes",
    version=version,
    description="Maybe and Either monads with validated constructors built on them",
    long_description=long_description,
    long_description_content_type=content_type,
    packages=find_packages(include=["outcomes", "outcomes.*"]),
    package_data={
        "outcomes": ["py.typed"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "outcomes=outcomes.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "functional-programming",
        "maybe",
        "either",
        "validation",
    ],
)
