# setup.py
from setuptools import setup, find_packages

setup(
    name="minischeme",
    version="0.1.0",
    description="A minimal interpreter for a Scheme-like language",
    packages=find_packages(include=["minischeme", "minischeme.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minischeme=minischeme.repl:main"],
    },
    zip_safe=False,
)
