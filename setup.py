from setuptools import setup, find_packages

setup(
    name="terminal-commands",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "structlog>=23.1",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "terminal-commands=terminal_commands.core.cli:main",
        ],
    },
    description="Text-command dispatch engine with overload resolution and multi-step interactions.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
