from setuptools import find_packages, setup

setup(
    name="dotlink",
    version="0.1.0",
    description="Dotfiles installer - idempotent symlinks with backups and dry-run",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "click",  # Usage errors raised through Typer
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Highlighted JSON/YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "dotlink=dotlink.cli:main",
        ],
    },
)
