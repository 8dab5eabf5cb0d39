# setup.py
from setuptools import setup, find_packages

setup(
    name="fez",
    version="0.1.0",
    description="A minimal Scheme-dialect expression evaluator",
    packages=find_packages(include=["fez", "fez.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["fez=fez.repl:main"],
    },
    zip_safe=False,
)
