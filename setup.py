"""Setup script for the netenomics package."""

from setuptools import setup, find_packages

setup(
    name="netenomics",
    version="2.1.0",
    description="Numeric routines for market and game-economy analysis",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Netenomics Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
        "scipy>=1.7.0",
        "matplotlib>=3.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "netenomics=netenomics.cli:main",
        ],
    },
)
