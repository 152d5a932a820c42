# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="Minimal embeddable Scheme-like expression interpreter",
    packages=find_packages(include=["schemer", "schemer.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemer=schemer.repl:main"],
    },
    zip_safe=False,
)
