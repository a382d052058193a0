from setuptools import setup, find_packages

setup(
    name="stopwatch",
    version="0.1.0",
    description="Terminal stopwatch with lap times",
    packages=find_packages(include=["stopwatch", "stopwatch.*"]),
    install_requires=[
        "typer",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "stopwatch=stopwatch.cli:app",
        ],
    },
    python_requires=">=3.10",
)
