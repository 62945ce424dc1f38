"""Setup script for asleep CLI tool."""

from setuptools import find_packages, setup

setup(
    name="asleep-cli",
    version="0.1.0",
    description="Asleep CLI - Daily sleep totals from sleep intervals",
    py_modules=["asleep"],
    packages=find_packages(include=["asleep_core", "asleep_core.*"]),
    install_requires=[
        "typer>=0.9.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.0.0",
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "asleep=asleep:app",
        ],
    },
    python_requires=">=3.11",
    license="MIT",
)
