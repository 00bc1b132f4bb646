from __future__ import annotations

import os

from setuptools import find_packages, setup


def readme():
    with open(os.path.join(HERE, "README.md")) as fptr:
        return fptr.read()


PACKAGE_NAME = "hmrpc"
HERE = os.path.abspath(os.path.dirname(__file__))
VERSION = "0.1.0"

PACKAGES = find_packages(exclude=["tests", "tests.*", "dist", "build"])

REQUIRES = ["orjson>=3.9.0", "voluptuous>=0.13.1"]

TEST_REQUIRES = ["pytest>=7.4.0", "pytest-asyncio>=0.21.0"]

setup(
    name=PACKAGE_NAME,
    version=VERSION,
    license="MIT License",
    description="Typed XML-RPC client for HomeMatic interface processes",
    long_description=readme(),
    long_description_content_type="text/markdown",
    packages=PACKAGES,
    package_data={"hmrpc": ["py.typed"]},
    zip_safe=False,
    platforms="any",
    python_requires=">=3.11",
    install_requires=REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    entry_points={"console_scripts": ["hmrpc=hmrpc.hmcli:main"]},
    keywords=["homematic", "ccu", "xml-rpc"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.11",
        "Topic :: Home Automation",
    ],
)
