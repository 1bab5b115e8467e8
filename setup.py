from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

PROJECT_ROOT = Path(__file__).resolve().parent
README = (PROJECT_ROOT / "README.md").read_text(encoding="utf-8")

setup(
    name="bikram-sambat-calendar",
    version="0.1.0",
    description="Bikram Sambat (Nepali) calendar conversion and month grids for Frappe environments",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Bikram Sambat Calendar Contributors",
    author_email="support@example.com",
    url="https://github.com/example/bikram-sambat-calendar",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "frappe": ["frappe>=14.0.0"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "bikram-sambat=bikram_sambat.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Framework :: Frappe",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: Nepali",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Office/Business :: Scheduling",
    ],
)
