from setuptools import setup, find_packages

from felicity import __version__

setup(
    name="felicity",
    version=__version__,
    description="Binary heap with pluggable ordering and removal at any index",
    packages=find_packages(exclude=["*.tests"]),
    python_requires=">=3.6",
    license="MIT"
)
