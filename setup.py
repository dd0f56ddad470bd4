#!/usr/bin/env python

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="python-same",
    version="0.1.0",
    author="Sir Wabbit",
    author_email="wabbit@wabbit.one",
    description="Identity comparison and address hashing for reference handles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["same"],
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
