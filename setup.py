"""
Setup script for text2lesson.

text2lesson compiles lessons written in plain text with a light version of
Markdown into structured problems:

1. Lesson Source - split the text into intros, questions, answers and explanations
2. Markdown Pipeline - render each part to HTML
3. Problem Classifier - derive the interaction type from the content

The 't2l' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="text2lesson",
    version="1.0.0",
    description="Plain text lesson compiler with a light Markdown renderer",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="text2lesson",
    packages=find_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "t2l=src.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="lesson markdown education compiler quiz",
)
