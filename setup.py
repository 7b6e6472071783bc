"""Setup script for Code Typo Scanner."""

from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [
        line.strip() for line in fh if line.strip() and not line.startswith("#")
    ]

setup(
    name="code-typo-scanner",
    version="0.1.0",
    author="Code Typo Scanner Team",
    description="Find misspelled words in identifiers, comments and strings of source code",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=[
        "typo_scanner",
        "config",
        "models",
        "errors",
        "dictionary",
        "word_segmenter",
        "typo_classifier",
        "syntax_walker",
        "grammars",
        "file_analyzer",
    ],
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "typo-scanner=typo_scanner:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Quality Assurance",
    ],
)
