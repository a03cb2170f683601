from setuptools import find_packages, setup

setup(
    name="rangelink",
    version="0.1.0",
    description="RangeLink - compact path#L10C5-L20C10 references: formatter, parser and detector",
    packages=find_packages(include=["rangelink", "rangelink.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer>=0.12,<0.26",  # CLI (0.26+ vendors click; code uses click contexts)
        "click>=8.0",  # CLI context and exceptions
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "rangelink=rangelink.cli:main",
        ],
    },
)
