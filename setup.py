from setuptools import setup, find_packages

# Read README for long description
def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Scanner and recursive-descent recognizer for a small imperative language"

setup(
    name="minilang-recognizer",
    version="0.1.0",
    description="Scanner and recursive-descent recognizer for a small imperative language",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["minilang", "minilang.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.0.0,<3",
        "numpy>=1.18.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "hypothesis",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "minilang-check=minilang.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="lexer, parser, recursive descent, recognizer, grammar",
)
