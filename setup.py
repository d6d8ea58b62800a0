#!/usr/bin/env python
import os
import re

from setuptools import setup, find_packages


INSTALL_REQUIRES = ["petlib", "attrs", "msgpack"]
TEST_REQUIRES = ["pytest"]
DOC_REQUIRES = ["sphinx", "sphinx_rtd_theme"]
DEV_REQUIRES = TEST_REQUIRES + DOC_REQUIRES + ["black", "pre-commit", "pytest-cov"]


here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.rst")) as f:
    long_description = f.read()


with open(os.path.join(here, "fairdeck/__init__.py")) as f:
    matches = re.findall(r"(__.+__) = \"(.*)\"", f.read())
    for var_name, var_value in matches:
        globals()[var_name] = var_value


setup(
    name=__title__,
    version=__version__,
    description=__description__,
    long_description=long_description,
    author=__author__,
    author_email=__email__,
    packages=find_packages(exclude=["tests", "examples"]),
    license=__license__,
    url=__url__,
    python_requires=">=3.6",
    install_requires=INSTALL_REQUIRES,
    tests_require=TEST_REQUIRES,
    extras_require={"dev": DEV_REQUIRES, "test": TEST_REQUIRES, "doc": DOC_REQUIRES,},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Security :: Cryptography",
        "Topic :: Games/Entertainment",
        "License :: OSI Approved :: MIT License",
    ],
)
