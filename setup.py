import re
from pathlib import Path

from setuptools import setup, find_namespace_packages


def read_version():
    """Read __version__ from src/conlog/_version.py."""
    text = (Path(__file__).parent / "src" / "conlog" / "_version.py").read_text(
        encoding="utf-8")
    return re.search(r'^__version__ = "([^"]+)"', text, re.M).group(1)


setup(
    name="conlog",
    version=read_version(),
    description="Leveled, colour-marked console logging for engine-hosted applications, plus typed value wrappers",
    packages=find_namespace_packages(where="src", include=["conlog*"]),
    package_dir={"": "src"},
    install_requires=[],
    extras_require={
        "dev": ["pytest", "pytest-cov"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
