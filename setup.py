"""
Setup script for quiver - a pure Python package, no native extensions to build.
"""

from setuptools import find_packages
from setuptools import setup

LIBRARY = "quiver"

# Read version and metadata
with open(f"{LIBRARY}/__version__.py", "r", encoding="UTF8") as v:
    exec(v.read())

with open("README.md", "r", encoding="UTF8") as f:
    long_description = f.read()

# Setup configuration
setup(
    name=LIBRARY,
    version=__version__,
    description="Read-only Arrow columns as vectors for an array language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[LIBRARY, f"{LIBRARY}.*"]),
    python_requires=">=3.11",
    install_requires=["numpy", "pyarrow"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
