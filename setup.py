# SPDX-FileCopyrightText: 2025 shamir-audit contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="shamir-audit",
    version="0.1.0",
    description="Shamir secret reconstruction with detection of corrupted shares",
    author="shamir-audit contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
    ],
    extras_require={
        # dev / testing
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shamir-audit=shamir_audit.cli:main",
        ],
    },
)
