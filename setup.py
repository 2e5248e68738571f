from setuptools import find_packages, setup

setup(
    name="headlink",
    version="0.1.0",
    description="Find markdown headings and build wiki links to them",
    packages=find_packages(include=["headlink", "headlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI; 0.26+ vendors click, hiding its context from click.get_current_context
        "click",  # Current-context lookup in CLI result handling
        "pydantic>=2",  # Settings and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
        "pyyaml",  # YAML command output
        "pygments",  # Highlighted output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "headlink=headlink.cli:main",
        ],
    },
)
