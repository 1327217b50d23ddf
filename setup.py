"""
PerfDiff Report - Markdown Performance Comparison Reports

Turns pre-computed benchmark comparison results (baseline vs. current
duration statistics) into Markdown documents suitable for pull request
comments, splitting large result sets across several pages.

Features:
- Summary tables with baseline → current deltas and significance markers
- Collapsible per-entry details (mean, stdev, raw runs)
- Deterministic page splitting (output.md or output-1.md … output-N.md)
- Concurrent file writes with aggregated failure reporting
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else __doc__

setup(
    name="perfdiff-report",
    version="1.0.0",
    description="Markdown performance comparison reports for benchmark results",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Shawky",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "perfdiff-report=comparison_report.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Quality Assurance",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="performance testing benchmark comparison markdown report ci-cd",
)
