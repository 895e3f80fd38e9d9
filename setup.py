from setuptools import find_packages, setup

setup(
    name="railfence",
    version="1.0.0",
    description="Rail Fence transposition cipher library and CLI",
    author="martian58",
    packages=find_packages(include=["railfence", "railfence.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12",  # CLI framework
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output format
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "railfence=railfence.cli:main",
        ],
    },
)
