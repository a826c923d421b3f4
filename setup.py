"""Setup configuration for Table Filters package."""

from setuptools import setup, find_packages

setup(
    name="table-filters",
    version="1.0.0",
    description="Filter state merge and encoding engine for tabular UI components",
    author="Alex",
    author_email="",
    packages=find_packages(where="src") + ["config"],
    package_dir={"": "src", "config": "config"},
    python_requires=">=3.11",
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
)
