# setup.py
from setuptools import setup, find_packages

setup(
    name="yascm",
    version="0.1.0",
    description="A small Scheme interpreter: reader, tree-walking evaluator and primitives",
    packages=find_packages(include=["yascm", "yascm.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["yascm=yascm.repl:main"],
    },
    zip_safe=False,
)
