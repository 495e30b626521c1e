#!/usr/bin/env python

from setuptools import setup, find_packages

requires = [
    "click>=7.0",
    "click_log>=0.3.2",
    "tqdm>=4.8.4",
]

extra_requires = {
    "test": ["pytest>=6.0"]
}

__version__ = None
__author__ = None
__email__ = None
__description__ = None
__license__ = None
exec(open("src/rcp_palette/version.py").read())

setup(
    name="rcp-palette",
    author=__author__,
    author_email=__email__,
    version=__version__,
    description=__description__,
    license=__license__,
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=requires,
    extras_require=extra_requires,
    entry_points={"console_scripts": ["rcp-palette = rcp_palette.cli.app:main"]},
)
