"""Setup script for the moonphase package."""

import os
import re

from setuptools import find_packages, setup  # type: ignore


def get_version():
    """Get the version of the package."""
    init_path = os.path.join("moonphase", "__init__.py")
    with open(init_path) as f:
        content = f.read()
        match = re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]', content)
        if match:
            return match.group(1)
        raise RuntimeError("Unable to find version string.")


setup(
    name="moonphase",
    version=get_version(),
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"moonphase": ["schema/*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "requests>=2.25",
        "python-dotenv>=1.0.0",
        "jsonschema>=4.0",
        "tzlocal>=5.0",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "moonphase=moonphase.__main__:main",
        ],
    },
)
