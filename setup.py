# setup.py
from setuptools import setup, find_packages

setup(
    name="fexl",
    version="0.1.0",
    description="A small fexpr Lisp: tree-walking evaluator, reader and REPL",
    packages=find_packages(include=["fexl", "fexl.*"]),
    python_requires=">=3.11",
    install_requires=[
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["fexl = fexl.repl:main"],
    },
    zip_safe=False,
)
