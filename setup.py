#!/usr/bin/env python3
"""Setup script for Cold Plunge MCP Server."""

from setuptools import setup, find_packages
import os

# Read requirements from requirements.txt
def read_requirements():
    requirements_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    try:
        with open(requirements_path, 'r') as f:
            return [line.strip() for line in f if line.strip() and not line.startswith('#')]
    except FileNotFoundError:
        return []

# Read long description from README
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    try:
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return "MCP server and regression checks for cold plunge / ice bath thermal calculations"

setup(
    name="cold-plunge-mcp",
    version="1.0.0",
    description="MCP server and regression checks for cold plunge / ice bath thermal calculations",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["tools", "utils"]),
    py_modules=["server", "run_physics_checks"],
    include_package_data=True,
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=7"]},
    entry_points={
        "console_scripts": [
            "cold-plunge-checks=run_physics_checks:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords="mcp cold-plunge ice-bath thermal-engineering unit-conversion",
)
