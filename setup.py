# This file is part of the spliterati project
#
# Copyright (c) 2022 spliterati authors - MIT License
# SPDX-License-Identifier: MIT

import os
import setuptools


def project_path(*sub_paths):
    project_dirpath = os.path.abspath(os.path.dirname(__file__))
    return os.path.join(project_dirpath, *sub_paths)


def read(*sub_paths):
    with open(project_path(*sub_paths), mode="rb") as fobj:
        return fobj.read().decode("utf-8")


def read_requirements(*sub_paths):
    return [
        line.strip()
        for line in read(*sub_paths).splitlines()
        if line.strip() and not line.startswith("#")
    ]


install_requires = read_requirements("requirements", "pypi.txt")
tests_require    = read_requirements("requirements", "test.txt")


long_description = "\n\n".join((read("README.md"), read("CHANGELOG.md")))


setuptools.setup(
    name="spliterati",
    license="MIT",
    version="2022.1001b0",
    keywords="ssss shamir split share secret threshold gf256 ed25519 nacl crypto",
    description="Threshold secret splitting with Shamir Secret Shares and signed shards.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["spliterati"],
    package_dir={"": "src"},
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={'test': tests_require},
    entry_points="""
        [console_scripts]
        spliterati=spliterati.cli:cli
    """,

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Unix",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
