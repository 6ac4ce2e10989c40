"""
Setup script for pushstream.
"""

from setuptools import setup, find_packages

# Read the contents of README file
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="pushstream",
    version="0.1.0",
    description="Push-based reactive streams with a functional combinator algebra",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="Apache-2.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
